from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""Config loader for the box logo generator.

Responsibilities:
- Load YAML config (default ``config/boxlogo.yml``)
- Validate it against ``config_schema.json`` (shipped beside this module)
- Apply defaults for every optional key
"""

SCHEMA_PATH = Path(__file__).parent / "config_schema.json"

DEFAULT_FONT = "FuturaStd-HeavyOblique.otf"
DEFAULT_FONT_SIZE = 830  # pt
DEFAULT_HORIZONTAL_PADDING = 140  # px
DEFAULT_VERTICAL_PADDING = 80  # px
DEFAULT_OUTPUT_SUFFIX = " Supreme Box Logo"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class LayerConfig:
    name: str
    kind: str  # "text" | "fill"


def _default_layers() -> list[LayerConfig]:
    return [LayerConfig(name="Title", kind="text"), LayerConfig(name="Background", kind="fill")]


@dataclass(frozen=True)
class TemplateConfig:
    layers: list[LayerConfig] = field(default_factory=_default_layers)
    font: str = DEFAULT_FONT
    font_size: int = DEFAULT_FONT_SIZE
    horizontal_padding: int = DEFAULT_HORIZONTAL_PADDING
    vertical_padding: int = DEFAULT_VERTICAL_PADDING


@dataclass(frozen=True)
class OutputConfig:
    suffix: str = DEFAULT_OUTPUT_SUFFIX


@dataclass(frozen=True)
class GeneratorConfig:
    template: TemplateConfig = field(default_factory=TemplateConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def default_config() -> GeneratorConfig:
    return GeneratorConfig()


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: If the schema file is missing or not valid JSON, or the
            config data violates the schema.
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> GeneratorConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)

    tpl_raw = data.get("template", {})
    out_raw = data.get("output", {})
    layers = tpl_raw.get("layers")
    template = TemplateConfig(
        layers=[LayerConfig(name=la["name"], kind=la["kind"]) for la in layers]
        if layers is not None
        else _default_layers(),
        font=tpl_raw.get("font", DEFAULT_FONT),
        font_size=tpl_raw.get("font_size", DEFAULT_FONT_SIZE),
        horizontal_padding=tpl_raw.get("horizontal_padding", DEFAULT_HORIZONTAL_PADDING),
        vertical_padding=tpl_raw.get("vertical_padding", DEFAULT_VERTICAL_PADDING),
    )
    return GeneratorConfig(
        template=template,
        output=OutputConfig(suffix=out_raw.get("suffix", DEFAULT_OUTPUT_SUFFIX)),
    )
