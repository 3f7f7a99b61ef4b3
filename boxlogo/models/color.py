from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

"""Color domain models for the box logo generator.

RGB is the canonical color handed to the renderer. RowMode records which
of the two CSV layouts a row used, ColorRole selects which template layer
a color belongs to.
"""

__all__ = [
    "RGB",
    "RowMode",
    "ColorRole",
    "CHANNEL_MIN",
    "CHANNEL_MAX",
]

CHANNEL_MIN = 0
CHANNEL_MAX = 255


@dataclass(frozen=True)
class RGB:
    """Canonical color, each channel an integer in [0, 255]."""
    r: int
    g: int
    b: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


class RowMode(Enum):
    """How the trailing fields of a CSV row are interpreted.

    - HEX: name, text, text-hex, bg-hex (4 fields)
    - RGB: name, text, text-r, text-g, text-b, bg-r, bg-g, bg-b (8 fields)
    """
    HEX = "HEX"
    RGB = "RGB"

    @property
    def field_count(self) -> int:
        return 4 if self is RowMode.HEX else 8

    @classmethod
    def from_field_count(cls, count: int) -> RowMode | None:
        for mode in cls:
            if mode.field_count == count:
                return mode
        return None


class ColorRole(Enum):
    """Template layer a color is applied to."""
    TITLE = "Title"
    BACKGROUND = "Background"
