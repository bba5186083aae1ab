"""Tests for apisection.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from apisection.config import ApiSectionConfig, ConfigError, OutputConfig, RenderOptions, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, ApiSectionConfig)
    assert config.root == tmp_path.resolve()
    assert config.rendering == RenderOptions()
    assert config.output == OutputConfig()
    assert config.templates_dir is None


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".apisection.yml"
    config_file.write_text(
        """
section:
  title: Type Aliases
  heading_level: 3
rendering:
  mapping_name: Dict
  optional_label: "_optional_"
  default_tag: "@defaultValue"
templates_dir: docs/templates
output:
  marker_key: api-types
  lint: no
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.rendering == RenderOptions(
        section_title="Type Aliases",
        section_level=3,
        mapping_name="Dict",
        optional_label="_optional_",
        default_tag="defaultValue",
    )
    assert config.templates_dir == tmp_path.resolve() / "docs" / "templates"
    assert config.output.marker_key == "api-types"
    assert config.output.lint is False


def test_load_config_falls_back_on_bad_values(tmp_path: Path) -> None:
    (tmp_path / ".apisection.yml").write_text(
        "section:\n  heading_level: 9\n  title: [not, a, string]\nrendering: nope\n",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.rendering.section_level == 2
    assert config.rendering.section_title == "Types"
    assert config.rendering.mapping_name == "Record"


def test_load_config_empty_file_is_defaults(tmp_path: Path) -> None:
    (tmp_path / ".apisection.yml").write_text("\n", encoding="utf-8")
    assert load_config(tmp_path).rendering == RenderOptions()


def test_load_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    (tmp_path / ".apisection.yml").write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_reports_yaml_errors(tmp_path: Path) -> None:
    (tmp_path / ".apisection.yml").write_text("section: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)
