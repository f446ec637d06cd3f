"""Configuration: defaults and environment overrides (no config files are read)."""

from __future__ import annotations

import os
from typing import Any, Mapping

ENV_PREFIX = "FILESCRATCH_"

# Environment variable suffix -> path into the config dict
_ENV_KEYS: dict[str, tuple[str, ...]] = {
    "ENCODING": ("encoding",),
    "LOG_LEVEL": ("logging", "level"),
    "LOG_FILE": ("logging", "file"),
}


def default_config() -> dict[str, Any]:
    """Default configuration."""
    return {
        "encoding": "utf-8",
        "logging": {
            "level": "WARNING",
            "file": None,
        },
    }


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base recursively. Mutates base; returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def env_overrides(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Collect FILESCRATCH_* variables into a nested override dict. Empty values are skipped."""
    environ = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}
    for suffix, keys in _ENV_KEYS.items():
        value = environ.get(ENV_PREFIX + suffix)
        if not value:
            continue
        target = overrides
        for key in keys[:-1]:
            target = target.setdefault(key, {})
        target[keys[-1]] = value
    return overrides


def load_config(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """
    Load merged configuration: defaults + environment overrides.

    If environ is None, os.environ is used.
    """
    return _deep_merge(default_config(), env_overrides(environ))


def default_encoding(environ: Mapping[str, str] | None = None) -> str:
    """Text encoding used by the readers when none is passed explicitly."""
    return load_config(environ)["encoding"]
