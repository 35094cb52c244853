"""Configuration loading and persistence."""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # Python 3.9-3.10
    import tomli as tomllib  # type: ignore[no-redef]

from carnet_cli.core.constants import (
    MAX_SET_INDEX,
    MIN_SET_INDEX,
    NOTE_KEYWORDS,
    OUTPUT_FORMATS,
    SUMMARY_KEYWORDS,
)


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
    raw = os.getenv("CARNET_CONFIG_FILE", "~/.config/carnet/config.toml")
    return expand_path(raw)


def _default_config() -> Dict[str, Any]:
    return {
        "parser": {
            "note_keywords": list(NOTE_KEYWORDS),
            "summary_keywords": list(SUMMARY_KEYWORDS),
        },
        "validation": {
            "min_set_index": MIN_SET_INDEX,
            "max_set_index": MAX_SET_INDEX,
        },
        "defaults": {
            "output_format": "pretty",
        },
        "export": {
            "default_directory": "./carnet",
        },
    }


DEFAULT_CONFIG: Dict[str, Any] = _default_config()


def _read_config(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
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


def _check_config(cfg: Dict[str, Any], source: Path) -> None:
    for key in ("note_keywords", "summary_keywords"):
        value = cfg["parser"].get(key)
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise ConfigError(f"parser.{key} in {source} must be a list of strings")

    bounds = cfg["validation"]
    for key in ("min_set_index", "max_set_index"):
        value = bounds.get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"validation.{key} in {source} must be an integer")
    if bounds["min_set_index"] > bounds["max_set_index"]:
        raise ConfigError(f"validation.min_set_index exceeds max_set_index in {source}")

    output_format = cfg["defaults"].get("output_format")
    if output_format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"defaults.output_format in {source} must be one of {'|'.join(OUTPUT_FORMATS)}"
        )


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from disk, merged with defaults."""
    cfg_path = path or default_config_path()
    cfg = _default_config()

    if cfg_path.exists():
        loaded = _read_config(cfg_path)
        cfg = _deep_merge(cfg, loaded)
        _check_config(cfg, cfg_path)

    return cfg


def _toml_literal(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if isinstance(value, list):
        items = ", ".join(_toml_literal(item) for item in value if item is not None)
        return f"[{items}]"
    raise TypeError(f"Unsupported TOML value type: {type(value)!r}")


def _dict_to_toml(data: Dict[str, Any], prefix: Optional[str] = None) -> str:
    lines = []
    plain_keys = []
    nested_keys = []

    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, dict):
            nested_keys.append((key, value))
        else:
            plain_keys.append((key, value))

    if prefix is not None:
        lines.append(f"[{prefix}]")

    for key, value in plain_keys:
        lines.append(f"{key} = {_toml_literal(value)}")

    if plain_keys and nested_keys:
        lines.append("")

    for index, (key, value) in enumerate(nested_keys):
        table_name = key if prefix is None else f"{prefix}.{key}"
        lines.append(_dict_to_toml(value, prefix=table_name))
        if index != len(nested_keys) - 1:
            lines.append("")

    return "\n".join(lines)


def save_config(config: Dict[str, Any], path: Optional[Path] = None) -> Path:
    """Save configuration to disk as TOML (default) or JSON."""
    cfg_path = path or default_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)

    if cfg_path.suffix.lower() == ".json":
        cfg_path.write_text(json.dumps(config, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        return cfg_path

    cfg_path.write_text(_dict_to_toml(config).strip() + "\n", encoding="utf-8")
    return cfg_path


def parser_keywords(config: Dict[str, Any]) -> Dict[str, List[str]]:
    """Return keyword vocabularies for the parser, falling back to defaults."""
    parser_cfg = config.get("parser", {})
    return {
        "note_keywords": list(parser_cfg.get("note_keywords") or NOTE_KEYWORDS),
        "summary_keywords": list(parser_cfg.get("summary_keywords") or SUMMARY_KEYWORDS),
    }


def set_index_bounds(config: Dict[str, Any]) -> Dict[str, int]:
    bounds = config.get("validation", {})
    return {
        "min_set_index": int(bounds.get("min_set_index", MIN_SET_INDEX)),
        "max_set_index": int(bounds.get("max_set_index", MAX_SET_INDEX)),
    }


def resolve_output_dir(config: Dict[str, Any], explicit: Optional[Path] = None) -> Path:
    """Resolve output directory with CLI override first."""
    if explicit is not None:
        return explicit.expanduser().resolve()
    raw = os.getenv("CARNET_OUTPUT_DIR") or config.get("export", {}).get(
        "default_directory",
        "./carnet",
    )
    return expand_path(raw)
