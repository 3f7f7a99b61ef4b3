from __future__ import annotations

import logging
import math
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from ..config.loader import DEFAULT_OUTPUT_SUFFIX, TemplateConfig
from ..models.render_request import RenderRequest
from .template import require_layers

"""Pillow renderer for the two-layer box logo template.

Each call builds a fresh canvas sized to the rendered label plus the fixed
padding, fills it with the background color, draws the label centered on a
transparent text layer and writes ``<file_name><suffix>.png``.
"""

__all__ = [
    "TemplateRenderer",
    "output_path_for",
    "load_font",
]

logger = logging.getLogger(__name__)

PNG_EXTENSION = ".png"

FontType = ImageFont.FreeTypeFont | ImageFont.ImageFont


def load_font(name: str, size: int) -> FontType:
    """Load a TrueType/OpenType font, falling back to Pillow's default font."""
    try:
        return ImageFont.truetype(name, size)
    except OSError:
        logger.warning(f"font not found: {name} -> using default font")
        return ImageFont.load_default(size=size)


def output_path_for(request: RenderRequest, suffix: str = DEFAULT_OUTPUT_SUFFIX) -> Path:
    return request.output_directory / f"{request.file_name}{suffix}{PNG_EXTENSION}"


class TemplateRenderer:
    """Render RenderRequests onto the configured template."""

    def __init__(self, template: TemplateConfig, output_suffix: str = DEFAULT_OUTPUT_SUFFIX) -> None:
        self.template = template
        self.output_suffix = output_suffix
        self._font: FontType | None = None

    @property
    def font(self) -> FontType:
        if self._font is None:
            self._font = load_font(self.template.font, self.template.font_size)
        return self._font

    def compose(self, request: RenderRequest) -> Image.Image:
        """Build the composited RGB image for one request."""
        require_layers(self.template)

        left, top, right, bottom = self.font.getbbox(request.label_text)
        text_width = math.ceil(right - left)
        text_height = math.ceil(bottom - top)
        size = (
            text_width + self.template.horizontal_padding,
            text_height + self.template.vertical_padding,
        )
        # canvas は最低 1px
        size = (max(size[0], 1), max(size[1], 1))

        background = Image.new("RGBA", size, request.background_color.as_tuple() + (255,))

        text_layer = Image.new("RGBA", size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(text_layer)
        x = (size[0] - text_width) / 2 - left
        y = (size[1] - text_height) / 2 - top
        draw.text((x, y), request.label_text, font=self.font, fill=request.text_color.as_tuple())

        return Image.alpha_composite(background, text_layer).convert("RGB")

    def render(self, request: RenderRequest) -> Path:
        """Render one request and write it as PNG; returns the written path."""
        image = self.compose(request)
        path = output_path_for(request, self.output_suffix)
        image.save(path, format="PNG")
        logger.debug(f"render: wrote {path.name} size={image.size[0]}x{image.size[1]}")
        return path
