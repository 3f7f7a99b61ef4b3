from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable
from pathlib import Path

from ..models.color import CHANNEL_MAX, CHANNEL_MIN, RGB, RowMode
from ..models.row_record import RowRecord

"""CSV row parser.

Format: one row per line, comma separated, no header, no quoting.
Empty fields are dropped before anything else, so ``a,,b,`` has two fields.
The remaining field count selects the row mode:

- 4 fields -> HEX: file name, label, text hex, background hex
- 8 fields -> RGB: file name, label, text r/g/b, background r/g/b

Any other count, a malformed hex value or an RGB channel that is not a
number in [0, 255] drops the row. Dropping is silent (DEBUG log only);
deciding what to do with zero rows is up to the orchestrator.
"""

__all__ = [
    "parse_line",
    "parse_lines",
    "read_csv_file",
    "is_hex_color",
    "parse_channel",
]

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","

# 大文字化してから照合 ('#' は無ければ補う)
_HEX_COLOR_RE = re.compile(r"#(?:[0-9A-F]{6}|[0-9A-F]{3})")

# ASCII の数字のみ ("1_0" や全角・アラビア数字は不可)
_CHANNEL_RE = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*", re.ASCII)

# 行区切りは \n と \r\n のみ
_LINE_BREAK_RE = re.compile(r"\r?\n")

_HEX_TEXT_INDEX = 2
_HEX_BACKGROUND_INDEX = 3
_RGB_FIRST_CHANNEL_INDEX = 2


def is_hex_color(value: str) -> bool:
    """True for ``#RRGGBB`` / ``#RGB`` (the ``#`` is optional, any case)."""
    candidate = value if value.startswith("#") else "#" + value
    return _HEX_COLOR_RE.fullmatch(candidate.upper()) is not None


def parse_channel(value: str) -> int | None:
    """Parse one RGB channel; None unless it is a whole number in [0, 255]."""
    if _CHANNEL_RE.fullmatch(value) is None:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number) or not number.is_integer():
        return None
    if number < CHANNEL_MIN or number > CHANNEL_MAX:
        return None
    return int(number)


def _split_fields(line: str) -> list[str]:
    return [f for f in line.split(FIELD_SEPARATOR) if f]


def _build_hex_record(fields: list[str]) -> RowRecord | None:
    text_hex = fields[_HEX_TEXT_INDEX]
    background_hex = fields[_HEX_BACKGROUND_INDEX]
    if not (is_hex_color(text_hex) and is_hex_color(background_hex)):
        return None
    return RowRecord(
        file_name=fields[0],
        label_text=fields[1],
        mode=RowMode.HEX,
        text_color=text_hex,
        background_color=background_hex,
    )


def _build_rgb_record(fields: list[str]) -> RowRecord | None:
    channels: list[int] = []
    for raw in fields[_RGB_FIRST_CHANNEL_INDEX:]:
        value = parse_channel(raw)
        if value is None:
            return None
        channels.append(value)
    return RowRecord(
        file_name=fields[0],
        label_text=fields[1],
        mode=RowMode.RGB,
        text_color=RGB(*channels[0:3]),
        background_color=RGB(*channels[3:6]),
    )


def parse_line(line: str) -> RowRecord | None:
    """Parse a single raw line; None when the row is invalid."""
    fields = _split_fields(line.rstrip("\r\n"))
    mode = RowMode.from_field_count(len(fields))
    if mode is RowMode.HEX:
        return _build_hex_record(fields)
    if mode is RowMode.RGB:
        return _build_rgb_record(fields)
    return None


def parse_lines(lines: Iterable[str]) -> list[RowRecord]:
    """Parse raw lines into RowRecords, preserving order and dropping invalid rows."""
    records: list[RowRecord] = []
    for line_no, line in enumerate(lines, start=1):
        record = parse_line(line)
        if record is None:
            logger.debug(f"csv: skipped line {line_no}: {line.rstrip()!r}")
            continue
        records.append(record)
    return records


def _split_lines(text: str) -> list[str]:
    lines = _LINE_BREAK_RE.split(text)
    # 末尾の改行で生じる空要素は行として数えない
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def read_csv_file(path: Path) -> list[RowRecord]:
    """Read and parse a CSV file (UTF-8, optional BOM)."""
    # newline="" で改行変換を止める (単独の \r は行区切りではない)
    with path.open(encoding="utf-8-sig", newline="") as f:
        text = f.read()
    records = parse_lines(_split_lines(text))
    logger.debug(f"csv: {path.name} valid_rows={len(records)}")
    return records
