"""Configuration loading for apisection (.apisection.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".apisection.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class RenderOptions:
    """Knobs consumed by the shape classifier and the renderers."""

    section_title: str = "Types"
    section_level: int = 2
    mapping_name: str = "Record"
    optional_label: str = "(optional)"
    default_tag: str = "default"


@dataclass
class OutputConfig:
    """Where and how rendered markdown is written."""

    marker_key: str = "types"
    lint: bool = True


@dataclass
class ApiSectionConfig:
    """Represents the settings defined in .apisection.yml."""

    root: Path
    rendering: RenderOptions = field(default_factory=RenderOptions)
    output: OutputConfig = field(default_factory=OutputConfig)
    templates_dir: Optional[Path] = None


def load_config(config_path: Path) -> ApiSectionConfig:
    """Load configuration from disk; a missing file yields defaults."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ApiSectionConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    defaults = RenderOptions()
    section = _as_dict(data.get("section"))
    rendering = _as_dict(data.get("rendering"))
    options = RenderOptions(
        section_title=_as_str(section.get("title")) or defaults.section_title,
        section_level=_heading_level(section.get("heading_level"), defaults.section_level),
        mapping_name=_as_str(rendering.get("mapping_name")) or defaults.mapping_name,
        optional_label=_as_str(rendering.get("optional_label")) or defaults.optional_label,
        default_tag=(_as_str(rendering.get("default_tag")) or defaults.default_tag).lstrip("@"),
    )

    output_data = _as_dict(data.get("output"))
    output = OutputConfig()
    if output_data:
        output.marker_key = _as_str(output_data.get("marker_key")) or output.marker_key
        lint = _as_bool(output_data.get("lint"))
        if lint is not None:
            output.lint = lint

    templates_dir_str = _as_str(data.get("templates_dir"))
    templates_dir = root / templates_dir_str if templates_dir_str else None

    return ApiSectionConfig(
        root=root,
        rendering=options,
        output=output,
        templates_dir=templates_dir,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _heading_level(value: Any, default: int) -> int:
    level = _as_int(value)
    if level is None or not 1 <= level <= 5:
        return default
    return level


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = [
    "ApiSectionConfig",
    "CONFIG_FILENAME",
    "ConfigError",
    "OutputConfig",
    "RenderOptions",
    "load_config",
]
