"""Filesystem locations for recwatch (XDG via platformdirs)."""

from pathlib import Path

import platformdirs

APP_NAME = "recwatch"


def get_config_dir() -> Path:
    """Get the configuration directory."""
    return Path(platformdirs.user_config_dir(APP_NAME))


def get_data_dir() -> Path:
    """Get the data directory holding the episode table."""
    return Path(platformdirs.user_data_dir(APP_NAME))


def get_config_file() -> Path:
    """Get path to config.yaml."""
    return get_config_dir() / "config.yaml"


def get_properties_file() -> Path:
    """Get path to properties.yaml (credential store)."""
    return get_config_dir() / "properties.yaml"


def get_table_file(name: str = "main") -> Path:
    """Get path to the episode table named ``name``."""
    return get_data_dir() / f"{name}.csv"


def get_lock_file() -> Path:
    """Get path to the run lock file."""
    return get_data_dir() / ".run.lock"


def get_log_file() -> Path:
    """Get path to the default log file."""
    return Path(platformdirs.user_log_dir(APP_NAME)) / "recwatch.log"
