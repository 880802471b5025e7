"""Select unrecorded episodes airing soon."""

from collections.abc import Callable, Iterable
from datetime import datetime, timedelta

from recwatch.guide.models import Episode
from recwatch.utils.datetime import now_utc

DEFAULT_HORIZON_DAYS = 5


def select_unrecorded(
    rows: Iterable[Episode],
    is_visible: Callable[[Episode], bool],
    horizon_days: int = DEFAULT_HORIZON_DAYS,
    now: datetime | None = None,
) -> list[Episode]:
    """Return unrecorded, visible episodes starting before ``now + horizon_days``.

    Input order is preserved.

    Args:
        rows: Candidate episodes
        is_visible: Visibility predicate from the presentation layer
        horizon_days: Look-ahead window in days
        now: Reference time (defaults to the current UTC time)
    """
    if now is None:
        now = now_utc()

    cutoff = now + timedelta(days=horizon_days)
    return [
        row
        for row in rows
        if not row.recorded and is_visible(row) and row.start_date_time < cutoff
    ]
