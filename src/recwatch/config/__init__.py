"""Configuration loading, credentials and logging."""

from recwatch.config.manager import ConfigManager
from recwatch.config.properties import (
    RECIPIENT_EMAIL,
    SLACK_WEB_HOOK_URL,
    SMTP_PASSWORD,
    ChainedProperties,
    EnvironmentProperties,
    FileProperties,
    PropertyStore,
)
from recwatch.config.schema import GlobalConfig, GuideConfig, NotificationConfig, TableConfig

__all__ = [
    "ConfigManager",
    "GlobalConfig",
    "GuideConfig",
    "NotificationConfig",
    "TableConfig",
    "PropertyStore",
    "EnvironmentProperties",
    "FileProperties",
    "ChainedProperties",
    "RECIPIENT_EMAIL",
    "SLACK_WEB_HOOK_URL",
    "SMTP_PASSWORD",
]
