from __future__ import annotations

from ..models.color import RGB, ColorRole, RowMode
from ..models.row_record import ColorValue, RowRecord

"""Color resolver: RowRecord color fields -> canonical RGB.

HEX values are normalized in a single pass (optional ``#`` stripped,
uppercased, 3 or 6 digits). A 3-digit shorthand doubles each digit into its
own channel: ``ABC`` -> ``AA`` ``BB`` ``CC``. RGB values pass through as-is;
validation already guaranteed the [0, 255] range.
"""

__all__ = [
    "hex_to_rgb",
    "resolve_color",
]

_HEX_DIGITS = frozenset("0123456789ABCDEF")


def hex_to_rgb(hex_value: str) -> RGB:
    """Convert ``#RRGGBB`` / ``#RGB`` (``#`` optional, any case) to RGB.

    Raises:
        ValueError: If the value is not 3 or 6 hexadecimal digits.
    """
    digits = hex_value[1:] if hex_value.startswith("#") else hex_value
    digits = digits.upper()
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    elif len(digits) != 6:
        raise ValueError(f"hex color must have 3 or 6 digits: {hex_value!r}")
    if any(d not in _HEX_DIGITS for d in digits):
        raise ValueError(f"not a hex color: {hex_value!r}")
    return RGB(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
    )


def _color_for_role(record: RowRecord, role: ColorRole) -> ColorValue:
    if role is ColorRole.TITLE:
        return record.text_color
    return record.background_color


def resolve_color(record: RowRecord, role: ColorRole) -> RGB:
    """Return the RGB for the Title or Background layer of a row."""
    value = _color_for_role(record, role)
    if record.mode is RowMode.HEX:
        return hex_to_rgb(str(value))
    if not isinstance(value, RGB):
        raise TypeError(f"RGB row holds non-RGB color: {value!r}")
    return value
