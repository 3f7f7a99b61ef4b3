from __future__ import annotations

from pathlib import Path

import pytest

from boxlogo.config.loader import (
    DEFAULT_FONT,
    DEFAULT_FONT_SIZE,
    ConfigError,
    LayerConfig,
    default_config,
    load_config,
)


def test_load_config_success(write_config: Path):
    cfg = load_config(write_config)
    assert [la.name for la in cfg.template.layers] == ["Title", "Background"]
    assert cfg.template.font == "does-not-exist.otf"
    assert cfg.template.font_size == 40
    assert cfg.template.horizontal_padding == 140
    assert cfg.template.vertical_padding == 80
    assert cfg.output.suffix == " Supreme Box Logo"


def test_load_config_defaults_for_optional_keys(temp_workdir: Path):
    cfg_path = temp_workdir / "config" / "minimal.yml"
    cfg_path.write_text("template:\n  layers:\n    - {name: Title, kind: text}\n", encoding="utf-8")
    cfg = load_config(cfg_path)
    assert cfg.template.layers == [LayerConfig("Title", "text")]
    assert cfg.template.font == DEFAULT_FONT
    assert cfg.template.font_size == DEFAULT_FONT_SIZE
    assert cfg.output.suffix == " Supreme Box Logo"


def test_empty_file_gives_defaults(temp_workdir: Path):
    cfg_path = temp_workdir / "config" / "empty.yml"
    cfg_path.write_text("", encoding="utf-8")
    assert load_config(cfg_path) == default_config()


def test_load_config_missing_file(temp_workdir: Path):
    with pytest.raises(ConfigError):
        load_config(temp_workdir / "config" / "not_exists.yml")


def test_load_config_invalid_yaml(temp_workdir: Path):
    cfg_path = temp_workdir / "config" / "broken.yml"
    cfg_path.write_text("template: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(cfg_path)
    assert "invalid yaml" in str(e.value)


def test_load_config_bad_layer_kind(write_config: Path):
    text = write_config.read_text(encoding="utf-8").replace("kind: fill", "kind: image")
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "config validation failed" in str(e.value)


def test_load_config_extra_field(write_config: Path):
    text = write_config.read_text(encoding="utf-8") + "\nextra_field: not_allowed\n"
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "config validation failed" in str(e.value)


def test_load_config_negative_padding(write_config: Path):
    text = write_config.read_text(encoding="utf-8").replace("vertical_padding: 80", "vertical_padding: -1")
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(write_config)


def test_default_config_matches_template_defaults():
    cfg = default_config()
    assert cfg.template.font == "FuturaStd-HeavyOblique.otf"
    assert cfg.template.font_size == 830
    assert (cfg.template.horizontal_padding, cfg.template.vertical_padding) == (140, 80)
