from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .color import RGB

"""Immutable request crossing the rendering boundary (one per CSV row)."""

__all__ = [
    "RenderRequest",
]


@dataclass(frozen=True)
class RenderRequest:
    label_text: str
    text_color: RGB
    background_color: RGB
    file_name: str
    output_directory: Path
