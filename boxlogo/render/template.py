from __future__ import annotations

from enum import Enum

from ..config.loader import LayerConfig, TemplateConfig
from ..models.color import ColorRole
from ..models.errors import ErrorKind, TemplateLayerError

"""Two-layer logo template lookup.

The renderer needs a ``Title`` text layer and a ``Background`` fill layer.
Missing or mistyped layers are reported with their own ErrorKind.
"""

__all__ = [
    "LayerKind",
    "find_layer",
    "require_layers",
]


class LayerKind(Enum):
    TEXT = "text"
    FILL = "fill"


def find_layer(template: TemplateConfig, name: str) -> LayerConfig | None:
    for layer in template.layers:
        if layer.name == name:
            return layer
    return None


def require_layers(template: TemplateConfig) -> tuple[LayerConfig, LayerConfig]:
    """Return (title, background) layers.

    Raises:
        TemplateLayerError: MISSING_TITLE_LAYER, MISSING_BACKGROUND_LAYER or
            TITLE_NOT_TEXT_LAYER.
    """
    title = find_layer(template, ColorRole.TITLE.value)
    if title is None:
        raise TemplateLayerError(ErrorKind.MISSING_TITLE_LAYER)
    background = find_layer(template, ColorRole.BACKGROUND.value)
    if background is None:
        raise TemplateLayerError(ErrorKind.MISSING_BACKGROUND_LAYER)
    if LayerKind(title.kind) is not LayerKind.TEXT:
        raise TemplateLayerError(ErrorKind.TITLE_NOT_TEXT_LAYER)
    return title, background
