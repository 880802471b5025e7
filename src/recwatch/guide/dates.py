"""Broadcast start time parsing and formatting."""

import re
from datetime import datetime, timezone

from recwatch.utils.datetime import ensure_utc
from recwatch.utils.errors import DateParseError

_NUMERIC_RUN = re.compile(r"[0-9]+")


def parse_start_date(text: str) -> datetime:
    """Parse a loosely delimited timestamp into a UTC datetime.

    The first six numeric runs are read as year, month (1-based), day,
    hour, minute and second. Anything after them, such as a UTC offset,
    is ignored and the components are taken as UTC.

    Args:
        text: Timestamp such as ``"2024-05-01 09:30:00.000000"``

    Returns:
        Aware datetime in UTC

    Raises:
        DateParseError: If fewer than six components are present or they
            do not form a valid date

    Example:
        >>> parse_start_date("2024-05-01T09:30:00+09:00")
        datetime.datetime(2024, 5, 1, 9, 30, tzinfo=datetime.timezone.utc)
    """
    parts = _NUMERIC_RUN.findall(text)[:6]
    if len(parts) < 6:
        raise DateParseError(
            f"Expected 6 numeric components in start date, got {len(parts)}: {text!r}"
        )

    year, month, day, hour, minute, second = (int(p) for p in parts)
    try:
        return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
    except ValueError as e:
        raise DateParseError(f"Invalid start date {text!r}: {e}") from e


def format_start_date(value: datetime) -> str:
    """Render a start time in the persisted ``yyyy/MM/dd H:m:s`` form (UTC)."""
    value = ensure_utc(value)
    return (
        f"{value.year:04d}/{value.month:02d}/{value.day:02d} "
        f"{value.hour}:{value.minute}:{value.second}"
    )
