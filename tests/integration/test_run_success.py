from __future__ import annotations

import builtins
from pathlib import Path

from PIL import Image

from boxlogo.cli import main as cli_main

"""End-to-end: console prompts -> CSV -> Pillow PNGs."""


def _feed(monkeypatch, answers):
    it = iter(answers)

    def fake_input(prompt=""):
        value = next(it)
        if isinstance(value, BaseException):
            raise value
        return value

    monkeypatch.setattr(builtins, "input", fake_input)


def test_interactive_run_writes_pngs(temp_workdir: Path, write_config, sample_csv, monkeypatch, capsys):
    out_dir = temp_workdir / "out"
    _feed(monkeypatch, [
        str(sample_csv),  # CSV selection
        "abc",            # start: not a number
        "0",              # start
        "0",              # stop: not above start
        "3",              # stop: above row count
        "2",              # stop
        str(out_dir),     # output directory
    ])

    code = cli_main([])
    out = capsys.readouterr().out

    assert code == 0
    assert "WARN Input was not a number." in out
    assert "WARN Input was lower than or equal to the lower bound of 0." in out
    assert "WARN Input was larger than the total number of rows (2)." in out
    assert "SUMMARY rows=2 range=[0, 2) rendered=2" in out

    box = out_dir / "Box Supreme Box Logo.png"
    box2 = out_dir / "Box2 Supreme Box Logo.png"
    with Image.open(box) as img:
        assert img.convert("RGB").getpixel((0, 0)) == (0, 0, 255)
    with Image.open(box2) as img:
        assert img.convert("RGB").getpixel((0, 0)) == (0, 255, 0)


def test_interactive_cancel_at_output_prompt(temp_workdir: Path, write_config, sample_csv, monkeypatch, capsys):
    _feed(monkeypatch, [str(sample_csv), "0", "2", EOFError()])
    code = cli_main([])
    out = capsys.readouterr().out
    assert code == 0
    assert "INFO Ending script." in out
    assert list((temp_workdir / "out").iterdir()) == []


def test_interactive_cancel_at_csv_prompt(temp_workdir: Path, write_config, monkeypatch, capsys):
    _feed(monkeypatch, [""])
    assert cli_main([]) == 0
    assert "INFO Ending script." in capsys.readouterr().out
