"""Configuration path helpers for flexjson."""

import os
from pathlib import Path

CONFIG_ENV_VAR = "FLEXJSON_CONFIG"


def get_config_dir() -> Path:
    """Return XDG-compliant config directory: ~/.config/flexjson"""
    return Path.home() / ".config" / "flexjson"


def get_config_path() -> Path:
    """Return path to the user settings file.

    Priority:
    1. FLEXJSON_CONFIG environment variable (if set)
    2. ~/.config/flexjson/config.jsonc (default XDG location)
    """
    if CONFIG_ENV_VAR in os.environ:
        return Path(os.environ[CONFIG_ENV_VAR])
    return get_config_dir() / "config.jsonc"
