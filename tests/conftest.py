"""Shared fixtures for recwatch tests."""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import pytest

from recwatch.guide.models import Episode, ProgramRecord, SearchPage, StartDate

NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
DETAIL_BASE_URL = "https://tvguide.example.com/detail/?eid="


@pytest.fixture
def now() -> datetime:
    """Fixed reference time (2024-05-01 12:00 UTC)."""
    return NOW


@pytest.fixture
def make_episode() -> Callable[..., Episode]:
    """Factory for episodes relative to NOW."""

    def _make(
        title: str = "Mayday",
        days: float = 1,
        recorded: bool = False,
        url: str | None = None,
    ) -> Episode:
        return Episode(
            title=title,
            start_date_time=NOW + timedelta(days=days),
            recorded=recorded,
            url=url or f"{DETAIL_BASE_URL}{title.lower()}",
        )

    return _make


@pytest.fixture
def make_record() -> Callable[..., ProgramRecord]:
    """Factory for raw guide records."""

    def _make(
        cid: str = "cid-1",
        title: str = "Mayday",
        date: str = "2024-05-02 21:00:00.000000",
    ) -> ProgramRecord:
        return ProgramRecord(
            cid=cid,
            title=title,
            start_date=StartDate(date=date, timezone_type=3, timezone="Asia/Tokyo"),
        )

    return _make


@pytest.fixture
def make_page() -> Callable[..., SearchPage]:
    """Factory for search pages."""

    def _make(total_count: int, records: list[ProgramRecord]) -> SearchPage:
        return SearchPage(total_count=total_count, records=records)

    return _make


class FakeSearchSource:
    """Search source replaying canned pages and recording calls."""

    def __init__(self, pages: list[SearchPage]) -> None:
        self.pages = pages
        self.calls: list[tuple[str, str | None, int]] = []

    def search(self, keyword: str, channel: str | None, offset: int) -> SearchPage:
        self.calls.append((keyword, channel, offset))
        index = len(self.calls) - 1
        if index < len(self.pages):
            return self.pages[index]
        return SearchPage(total_count=0, records=[])


@pytest.fixture
def fake_source_factory() -> Callable[[list[SearchPage]], FakeSearchSource]:
    """Build a FakeSearchSource from a list of pages."""
    return FakeSearchSource
