# Shared pytest fixtures
from __future__ import annotations

from pathlib import Path

import pytest

from boxlogo.logging.init import reset_logging
from boxlogo.models.render_request import RenderRequest


@pytest.fixture(autouse=True)
def _fresh_logging():
    # handler は sys.stdout を掴むので capsys ごとに作り直す
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(tmp_path: Path, monkeypatch) -> Path:
    (tmp_path / "config").mkdir()
    (tmp_path / "data").mkdir()
    (tmp_path / "out").mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("BOXLOGO_CONFIG", raising=False)
    return tmp_path


@pytest.fixture()
def sample_config_yaml() -> str:
    return """template:
  layers:
    - name: Title
      kind: text
    - name: Background
      kind: fill
  font: does-not-exist.otf
  font_size: 40
  horizontal_padding: 140
  vertical_padding: 80
output:
  suffix: " Supreme Box Logo"
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "boxlogo.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def sample_csv(temp_workdir: Path) -> Path:
    f = temp_workdir / "data" / "logos.csv"
    f.write_text(
        "Box,HELLO,FF0000,0000FF\n"
        "bad,row\n"
        "Box2,WORLD,255,0,0,0,255,0\n",
        encoding="utf-8",
    )
    return f


class ScriptedPrompter:
    """Prompter answering from a script; None in the script means cancel."""

    def __init__(self, answers=(), csv_file=None, output_directory=None):
        self.answers = list(answers)
        self.csv_file = csv_file
        self.output_directory = output_directory
        self.asked: list[str] = []
        self.alerts: list[str] = []
        self.selected_output = False

    def ask(self, message):
        self.asked.append(message)
        if not self.answers:
            raise AssertionError(f"unexpected prompt: {message}")
        return self.answers.pop(0)

    def alert(self, message):
        self.alerts.append(message)

    def select_csv_file(self):
        return self.csv_file

    def select_output_directory(self):
        self.selected_output = True
        return self.output_directory


class RecordingRenderer:
    """Renderer double: records requests and touches the output file."""

    def __init__(self, fail_on: str | None = None, error: Exception | None = None):
        self.requests: list[RenderRequest] = []
        self.fail_on = fail_on
        self.error = error or OSError("disk full")

    def render(self, request: RenderRequest) -> Path:
        if self.fail_on is not None and request.file_name == self.fail_on:
            raise self.error
        self.requests.append(request)
        path = request.output_directory / f"{request.file_name} Supreme Box Logo.png"
        path.write_bytes(b"")
        return path


@pytest.fixture()
def scripted_prompter():
    return ScriptedPrompter


@pytest.fixture()
def recording_renderer():
    return RecordingRenderer
