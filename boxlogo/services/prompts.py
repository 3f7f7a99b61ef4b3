from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Protocol

"""Operator interaction (file / directory selection, numeric prompt, alert).

``Prompter`` is the boundary the orchestrator and range selector talk to.
``ConsolePrompter`` implements it on stdin/stdout; every method returns
None when the operator cancels (EOF / Ctrl-C, or an empty selection).
"""

__all__ = [
    "Prompter",
    "ConsolePrompter",
    "EntryKind",
    "entry_kind",
    "accepts_csv_entry",
    "SELECT_CSV_FILE_PROMPT",
    "SELECT_OUTPUT_DIRECTORY_PROMPT",
]

logger = logging.getLogger(__name__)

SELECT_CSV_FILE_PROMPT = "Select the CSV file to generate images from."
SELECT_OUTPUT_DIRECTORY_PROMPT = "Select the directory to output the generated images."

CSV_SUFFIX = ".csv"


class EntryKind(Enum):
    """File-system entry kind used by the selection filter."""
    FILE = "file"
    DIRECTORY = "directory"
    MISSING = "missing"
    OTHER = "other"


def entry_kind(path: Path) -> EntryKind:
    if path.is_dir():
        return EntryKind.DIRECTORY
    if path.is_file():
        return EntryKind.FILE
    if not path.exists():
        return EntryKind.MISSING
    return EntryKind.OTHER


def accepts_csv_entry(path: Path) -> bool:
    """Selection filter: directories (to browse into) and ``*.csv`` files."""
    kind = entry_kind(path)
    if kind is EntryKind.DIRECTORY:
        return True
    return kind is EntryKind.FILE and path.suffix.lower() == CSV_SUFFIX


class Prompter(Protocol):
    def select_csv_file(self) -> Path | None: ...

    def select_output_directory(self) -> Path | None: ...

    def ask(self, message: str) -> str | None: ...

    def alert(self, message: str) -> None: ...


class ConsolePrompter:
    """Prompter on the terminal (input()/print)."""

    def _read(self, message: str) -> str | None:
        try:
            return input(f"{message}\n> ")
        except (EOFError, KeyboardInterrupt):
            # キャンセル扱い
            print()
            return None

    def ask(self, message: str) -> str | None:
        return self._read(message)

    def alert(self, message: str) -> None:
        logger.warning(message)

    def _list_csv_candidates(self, directory: Path) -> None:
        entries = sorted(p for p in directory.iterdir() if accepts_csv_entry(p))
        if not entries:
            print(f"  (no CSV files in {directory})")
            return
        for p in entries:
            marker = "/" if entry_kind(p) is EntryKind.DIRECTORY else ""
            print(f"  {p.name}{marker}")

    def select_csv_file(self) -> Path | None:
        while True:
            answer = self._read(SELECT_CSV_FILE_PROMPT)
            if answer is None or not answer.strip():
                return None
            path = Path(answer.strip()).expanduser()
            kind = entry_kind(path)
            if kind is EntryKind.DIRECTORY:
                self._list_csv_candidates(path)
                continue
            if kind is EntryKind.MISSING:
                self.alert(f"File not found: {path}")
                continue
            if not accepts_csv_entry(path):
                self.alert(f"Not a CSV file: {path}")
                continue
            return path

    def select_output_directory(self) -> Path | None:
        while True:
            answer = self._read(SELECT_OUTPUT_DIRECTORY_PROMPT)
            if answer is None or not answer.strip():
                return None
            path = Path(answer.strip()).expanduser()
            if entry_kind(path) is not EntryKind.DIRECTORY:
                self.alert(f"Not a directory: {path}")
                continue
            return path
