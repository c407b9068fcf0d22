"""Configuration loading and normalization."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from logln.config.models import Config, ConsoleConfig, FileConfig, SuccessConfig


DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "config.json"


class ConfigError(RuntimeError):
    """Raised when a config file is missing or malformed."""


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    return default


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_str(value: Any, default: str) -> str:
    if value is None:
        return default
    return str(value)


def _load_json(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Config path not found: {path}")
    if path.is_dir():
        raise ConfigError(f"Config path must be a file: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a JSON object: {path}")
    return data


def merge_sections(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay per-section override values onto the base config."""
    merged = {key: dict(value) if isinstance(value, dict) else value for key, value in base.items()}
    for section, values in overrides.items():
        current = merged.get(section)
        if isinstance(values, dict) and isinstance(current, dict):
            current.update(values)
        else:
            merged[section] = values
    return merged


def config_from_dict(raw: Dict[str, Any]) -> Config:
    """Build a Config instance from a raw dictionary."""
    file_raw = raw.get("file", {}) or {}
    console_raw = raw.get("console", {}) or {}
    success_raw = raw.get("success", {}) or {}

    file_cfg = FileConfig(
        enabled=_as_bool(file_raw.get("enabled"), False),
        directory=_as_str(file_raw.get("directory"), ""),
        name=_as_str(file_raw.get("name"), ""),
        encoding=_as_str(file_raw.get("encoding"), "utf-8") or "utf-8",
    )
    console_cfg = ConsoleConfig(
        enabled=_as_bool(console_raw.get("enabled"), True),
    )
    success_cfg = SuccessConfig(
        level=_as_int(success_raw.get("level", 0), 0),
        silent=_as_bool(success_raw.get("silent"), False),
    )
    return Config(file=file_cfg, console=console_cfg, success=success_cfg)


def load_config(path: Path | None = None) -> Config:
    """Load the packaged defaults, then overlay the file at ``path`` if given."""
    raw: Dict[str, Any] = {}
    if DEFAULT_CONFIG_PATH.exists():
        raw = _load_json(DEFAULT_CONFIG_PATH)
    if path is not None:
        raw = merge_sections(raw, _load_json(Path(path)))
    return config_from_dict(raw)
