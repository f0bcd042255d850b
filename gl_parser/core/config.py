"""Configuration loading."""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # Python 3.9-3.10
    import tomli as tomllib  # type: ignore[no-redef]

from gl_parser.core.models import InvalidUnitConfigurationError, ParserConfig, Unit

OUTPUT_FORMATS = ("pretty", "json", "plain")


class ConfigError(RuntimeError):
    """Raised when config file parsing fails."""


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def expand_path(path_str: str) -> Path:
    """Expand user/env vars and return absolute path."""
    return Path(os.path.expandvars(path_str)).expanduser().resolve()


def default_config_path() -> Path:
    """Get default config file path."""
    raw = os.getenv("GL_CONFIG_FILE", "~/.config/gl/config.toml")
    return expand_path(raw)


def _default_config() -> Dict[str, Any]:
    return {
        "parser": {
            "default_weight_unit": Unit.METRIC.value,
            "strict": False,
        },
        "defaults": {
            "output_format": "pretty",
        },
    }


def _read_config(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text()
    try:
        if suffix in {".toml", ""}:
            loaded = tomllib.loads(text)
        else:
            loaded = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc
    except Exception as exc:
        if suffix in {".toml", ""}:
            raise ConfigError(f"Invalid TOML in config file {path}: {exc}") from exc
        raise ConfigError(f"Failed to parse config file {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {path} must contain an object/table at the root")
    return loaded


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from disk, merged with defaults."""
    cfg_path = path or default_config_path()
    cfg = _default_config()

    if cfg_path.exists():
        cfg = _deep_merge(cfg, _read_config(cfg_path))

    return cfg


def resolve_weight_unit(config: Dict[str, Any]) -> str:
    """Resolve default weight unit from env first, then config."""
    raw = os.getenv("GL_WEIGHT_UNIT") or config.get("parser", {}).get(
        "default_weight_unit",
        Unit.METRIC.value,
    )
    return str(raw).strip()


def parser_config_from(config: Dict[str, Any]) -> ParserConfig:
    """Build the parser settings; an unsupported unit raises ConfigError."""
    unit = resolve_weight_unit(config)
    try:
        return ParserConfig(default_weight_unit=unit)
    except InvalidUnitConfigurationError as exc:
        raise ConfigError(str(exc)) from exc


def resolve_output_format(config: Dict[str, Any], json_output: bool = False, plain_output: bool = False) -> str:
    """Pick the output format: --json/--plain first, then ``defaults.output_format``."""
    if json_output:
        return "json"
    if plain_output:
        return "plain"
    value = config.get("defaults", {}).get("output_format", "pretty")
    if value not in OUTPUT_FORMATS:
        raise ConfigError(f"Unsupported output_format {value!r} (expected one of: {', '.join(OUTPUT_FORMATS)})")
    return value
