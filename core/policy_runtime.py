"""Configuration bootstrapping."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "windows": {
        "backend": "auto",
        "on_screen_only": True,
        "exclude_desktop_elements": True,
        "include_untitled": False,
        "linux_tools": ["wmctrl", "xdotool"],
        "command_timeout_s": 5.0,
    },
    "logging": {
        "level": "WARNING",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    },
}

ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "LW_WINDOW_BACKEND": ("windows", "backend"),
    "LW_LOG_LEVEL": ("logging", "level"),
}


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def apply_env_overrides(config: dict[str, Any], environ: dict[str, str] | None = None) -> dict[str, Any]:
    """Apply LW_* environment variables on top of file configuration."""
    environ = dict(os.environ) if environ is None else environ
    result = dict(config)
    for var, (section, key) in ENV_OVERRIDES.items():
        value = environ.get(var, "").strip()
        if value:
            result[section] = {**result.get(section, {}), key: value}
    return result


def load_effective_config(root: Path, environ: dict[str, str] | None = None) -> dict[str, Any]:
    """Load defaults, merge ``config/default.yaml`` and apply env overrides."""
    file_cfg = load_yaml(root / "config" / "default.yaml")
    merged = merge_dicts(DEFAULT_CONFIG, file_cfg)
    return apply_env_overrides(merged, environ)
