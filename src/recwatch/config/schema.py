"""Configuration schema models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class GuideConfig(BaseModel):
    """TV guide search configuration."""

    search_url: str = "https://tvguide.myjcom.jp/api/mypage/get_searchresult/"
    detail_base_url: str = "https://tvguide.myjcom.jp/detail/?eid="
    keyword: str = "メーデー"
    channel: str | None = "546_65406"  # None searches every channel
    max_pages: int = Field(default=3, ge=1)
    page_delay_seconds: float = Field(default=1.0, ge=0)
    timeout_seconds: float = Field(default=30.0, gt=0)


class TableConfig(BaseModel):
    """Episode table configuration."""

    name: str = "main"
    path: Path | None = None  # If None, stored under the user data dir
    public_url: str | None = None  # Link used in notifications
    date_format: str = "%m/%d (%a) %H:%M"


class NotificationConfig(BaseModel):
    """Email and Slack notification configuration.

    Destinations and secrets come from the property store
    (RECIPIENT_EMAIL, SLACK_WEB_HOOK_URL, SMTP_PASSWORD).
    """

    subject: str = "『メーデー！』を録画するのだ！"

    # Slack
    slack_channel: str = "#bot"
    slack_username: str = "recwatch"
    slack_icon_emoji: str = ":robot_face:"

    # Email
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_sender: str | None = None  # If None, uses smtp_username or the recipient
    smtp_username: str | None = None
    smtp_use_tls: bool = True
    timeout_seconds: float = Field(default=30.0, gt=0)


class GlobalConfig(BaseModel):
    """Global recwatch configuration."""

    version: str = "1"
    log_level: LogLevel = "INFO"
    horizon_days: int = Field(default=5, ge=0)
    lock_timeout_seconds: float = Field(default=1.0, ge=0, le=1)

    guide: GuideConfig = Field(default_factory=GuideConfig)
    table: TableConfig = Field(default_factory=TableConfig)
    notification: NotificationConfig = Field(default_factory=NotificationConfig)
