"""Utility functions and helpers for recwatch."""

from recwatch.utils.errors import (
    ConfigError,
    DateParseError,
    GuideAPIError,
    GuideError,
    GuideParseError,
    InvalidConfigError,
    NetworkConnectionError,
    NetworkError,
    NetworkTimeoutError,
    NotificationError,
    RecwatchError,
    TableError,
    TableFormatError,
)
from recwatch.utils.paths import (
    get_config_dir,
    get_config_file,
    get_data_dir,
    get_lock_file,
    get_log_file,
    get_properties_file,
    get_table_file,
)

__all__ = [
    # Errors
    "RecwatchError",
    "ConfigError",
    "InvalidConfigError",
    "GuideError",
    "GuideAPIError",
    "GuideParseError",
    "DateParseError",
    "NetworkError",
    "NetworkConnectionError",
    "NetworkTimeoutError",
    "TableError",
    "TableFormatError",
    "NotificationError",
    # Paths
    "get_config_dir",
    "get_data_dir",
    "get_config_file",
    "get_properties_file",
    "get_table_file",
    "get_lock_file",
    "get_log_file",
]
