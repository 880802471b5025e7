"""Data models for guide search results and tracked episodes."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from recwatch.utils.datetime import ensure_utc


class Episode(BaseModel):
    """One broadcast of the tracked show, keyed by normalized title.

    ``recorded`` is maintained by the user and is the only field carried
    over when the same title is fetched again.
    """

    title: str
    start_date_time: datetime
    recorded: bool = False
    url: str

    @field_validator("start_date_time")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class StartDate(BaseModel):
    """Structured start date attached to a guide record."""

    model_config = ConfigDict(extra="ignore")

    date: str
    timezone_type: int | None = None
    timezone: str | None = None


class ProgramRecord(BaseModel):
    """Raw listing as returned by the search endpoint."""

    model_config = ConfigDict(extra="ignore")

    cid: str
    title: str
    start_date: StartDate
    channel_name: str | None = None

    @field_validator("cid", mode="before")
    @classmethod
    def _cid_as_str(cls, value: object) -> object:
        if isinstance(value, int):
            return str(value)
        return value


class SearchPage(BaseModel):
    """One page of search results (transient, never persisted)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    total_count: int = Field(alias="@odata.count")
    records: list[ProgramRecord] = Field(alias="value")
    offset: int = 0

    @property
    def count(self) -> int:
        """Number of records on this page."""
        return len(self.records)
