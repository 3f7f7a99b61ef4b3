from __future__ import annotations

from dataclasses import dataclass

from .color import RGB, RowMode

"""RowRecord model: one validated CSV row.

A RowRecord is only constructed after the whole row passed validation, so
every field is always populated. HEX rows keep their validated hex strings
and are resolved to RGB on demand (services.colors.resolve_color).
"""

__all__ = [
    "RowRecord",
    "ColorValue",
]

ColorValue = str | RGB


@dataclass(frozen=True)
class RowRecord:
    file_name: str  # output base name, no extension
    label_text: str  # text rendered on the Title layer
    mode: RowMode
    text_color: ColorValue  # hex string (HEX) or RGB (RGB)
    background_color: ColorValue
