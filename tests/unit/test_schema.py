"""Tests for configuration schema models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from recwatch.config.schema import GlobalConfig, GuideConfig, NotificationConfig, TableConfig


class TestGuideConfig:
    """Tests for GuideConfig model."""

    def test_defaults(self) -> None:
        """Test the reference deployment defaults."""
        guide = GuideConfig()
        assert guide.search_url == "https://tvguide.myjcom.jp/api/mypage/get_searchresult/"
        assert guide.detail_base_url == "https://tvguide.myjcom.jp/detail/?eid="
        assert guide.keyword == "メーデー"
        assert guide.channel == "546_65406"
        assert guide.max_pages == 3
        assert guide.page_delay_seconds == 1.0

    def test_channel_may_be_none(self) -> None:
        """Test searching every channel."""
        assert GuideConfig(channel=None).channel is None

    def test_max_pages_must_be_positive(self) -> None:
        """Test that at least one page is requested."""
        with pytest.raises(ValidationError):
            GuideConfig(max_pages=0)

    def test_negative_delay_raises(self) -> None:
        """Test that the inter-page delay cannot be negative."""
        with pytest.raises(ValidationError):
            GuideConfig(page_delay_seconds=-1)


class TestTableConfig:
    """Tests for TableConfig model."""

    def test_defaults(self) -> None:
        table = TableConfig()
        assert table.name == "main"
        assert table.path is None
        assert table.public_url is None

    def test_path_is_coerced(self) -> None:
        assert TableConfig(path="/tmp/shows.csv").path == Path("/tmp/shows.csv")  # type: ignore


class TestNotificationConfig:
    """Tests for NotificationConfig model."""

    def test_defaults(self) -> None:
        notification = NotificationConfig()
        assert notification.slack_channel == "#bot"
        assert notification.slack_icon_emoji == ":robot_face:"
        assert notification.smtp_port == 587
        assert notification.smtp_use_tls is True


class TestGlobalConfig:
    """Tests for GlobalConfig model."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = GlobalConfig()
        assert config.version == "1"
        assert config.log_level == "INFO"
        assert config.horizon_days == 5
        assert config.lock_timeout_seconds == 1.0
        assert isinstance(config.guide, GuideConfig)

    def test_invalid_log_level_raises(self) -> None:
        """Test that invalid log level raises ValidationError."""
        with pytest.raises(ValidationError):
            GlobalConfig(log_level="TRACE")  # type: ignore

    def test_lock_timeout_is_short(self) -> None:
        """Test that the lock is never waited on for more than a second."""
        with pytest.raises(ValidationError):
            GlobalConfig(lock_timeout_seconds=5)

    def test_nested_sections_from_dict(self) -> None:
        """Test building from YAML-shaped data."""
        config = GlobalConfig(
            **{
                "horizon_days": 7,
                "guide": {"keyword": "Air Crash", "channel": None},
                "notification": {"subject": "Record!"},
            }
        )
        assert config.horizon_days == 7
        assert config.guide.keyword == "Air Crash"
        assert config.guide.channel is None
        assert config.guide.max_pages == 3
        assert config.notification.subject == "Record!"
