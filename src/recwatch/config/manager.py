"""Configuration manager for loading and saving recwatch config."""

from pathlib import Path

import yaml

from recwatch.config.properties import (
    ChainedProperties,
    EnvironmentProperties,
    FileProperties,
    PropertyStore,
)
from recwatch.config.schema import GlobalConfig
from recwatch.utils.errors import InvalidConfigError
from recwatch.utils.paths import get_config_dir, get_lock_file, get_table_file

PROPERTIES_TEMPLATE = """\
# recwatch credentials. Environment variables with the same names take precedence.
# RECIPIENT_EMAIL: you@example.com
# SLACK_WEB_HOOK_URL: https://hooks.slack.com/services/...
# SMTP_PASSWORD: app-password
"""


class ConfigManager:
    """Manages recwatch configuration files."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Optional custom config directory. Defaults to XDG config dir.
        """
        self.config_dir = config_dir or get_config_dir()
        self.config_file = self.config_dir / "config.yaml"
        self.properties_file = self.config_dir / "properties.yaml"

    def load_config(self) -> GlobalConfig:
        """Load and validate global configuration.

        Returns:
            Validated GlobalConfig instance (defaults are written if missing)

        Raises:
            InvalidConfigError: If config is invalid
        """
        if not self.config_file.exists():
            config = GlobalConfig()
            self.save_config(config)
            return config

        try:
            with open(self.config_file, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            return GlobalConfig(**data)
        except Exception as e:
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: {e}"
            ) from e

    def save_config(self, config: GlobalConfig) -> None:
        """Save global configuration.

        Args:
            config: GlobalConfig instance to save
        """
        data = config.model_dump(mode="json")

        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                data, f, default_flow_style=False, sort_keys=False, allow_unicode=True
            )

    def load_properties(self) -> PropertyStore:
        """Build the property store: environment first, then properties.yaml.

        Raises:
            InvalidConfigError: If properties.yaml is not a mapping
        """
        if not self.properties_file.exists():
            self.config_dir.mkdir(parents=True, exist_ok=True)
            self.properties_file.write_text(PROPERTIES_TEMPLATE, encoding="utf-8")
            self.properties_file.chmod(0o600)
            return ChainedProperties(EnvironmentProperties())

        try:
            with open(self.properties_file, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise InvalidConfigError(
                f"Invalid properties in {self.properties_file}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise InvalidConfigError(
                f"Properties in {self.properties_file} must be a mapping"
            )

        return ChainedProperties(EnvironmentProperties(), FileProperties(data))

    @staticmethod
    def table_path(config: GlobalConfig) -> Path:
        """Resolve the episode table location."""
        if config.table.path is not None:
            return config.table.path.expanduser()
        return get_table_file(config.table.name)

    @staticmethod
    def lock_path(config: GlobalConfig) -> Path:
        """Resolve the run lock location (next to the table)."""
        if config.table.path is not None:
            return config.table.path.expanduser().parent / ".run.lock"
        return get_lock_file()
