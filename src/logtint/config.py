"""XDG directory management and configuration for logtint."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w
from platformdirs import user_config_dir
from pydantic import ValidationError

from logtint.models import AppConfig


def get_config_dir() -> Path:
    """Get the logtint config directory.

    Respects LOGTINT_CONFIG_DIR environment variable if set.
    """
    if override := os.environ.get("LOGTINT_CONFIG_DIR"):
        return Path(override)
    return Path(user_config_dir("logtint"))


def get_config_path() -> Path:
    return get_config_dir() / "config.toml"


def load_config() -> AppConfig:
    """Load application config from disk, returning defaults if not found."""
    path = get_config_path()
    if not path.exists():
        return AppConfig()
    try:
        data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
        return AppConfig(**data)
    except (OSError, ValueError, TypeError, ValidationError):
        return AppConfig()


def save_config(config: AppConfig) -> Path:
    """Save application config to disk."""
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    path = get_config_path()
    path.write_bytes(tomli_w.dumps(config.model_dump()).encode())
    return path


def reset_config() -> bool:
    """Delete the config file. Returns False if there was none."""
    path = get_config_path()
    if not path.exists():
        return False
    path.unlink()
    return True
