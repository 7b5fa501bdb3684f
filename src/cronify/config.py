"""Configuration management for cronify."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from cronify.locales import DEFAULT_LOCALE

CRONIFY_DIR = Path.home() / ".cronify"
CONFIG_FILE = CRONIFY_DIR / "config.yaml"


class ConfigError(Exception):
    """Error loading or accessing configuration."""


def get_cronify_config(config_path: Path | None = None) -> dict[str, object]:
    """Load the cronify configuration file.

    Args:
        config_path: Override for the file location (defaults to
            ~/.cronify/config.yaml).

    Returns:
        Configuration dictionary, empty if the file doesn't exist or is
        unreadable.
    """
    config_path = config_path or CONFIG_FILE
    if not config_path.exists():
        return {}

    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)
            return config if isinstance(config, dict) else {}
    except (yaml.YAMLError, OSError):
        return {}


def get_default_locale(config_path: Path | None = None) -> str:
    """Get the locale the CLI uses when none is given.

    Checks in order of priority:
    1. CRONIFY_LOCALE environment variable
    2. ``locale`` in the cronify config file
    3. English

    Raises:
        ConfigError: If the config file sets ``locale`` to a non-string.
    """
    if code := os.environ.get("CRONIFY_LOCALE"):
        return code

    config = get_cronify_config(config_path)
    value = config.get("locale")
    if value is None:
        return DEFAULT_LOCALE
    if not isinstance(value, str):
        raise ConfigError(f"Config option 'locale' must be a string, got {value!r}")
    return value
