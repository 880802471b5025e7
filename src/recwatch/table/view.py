"""Presentation of the episode table.

The view orders episodes by start time (nearest first) and hides rows
that start on or before today. Hidden rows are still part of the table;
``is_visible`` exposes the filter state so other code can honor it.
"""

from collections.abc import Iterable
from datetime import date, datetime

from rich.console import Console
from rich.table import Table

from recwatch.guide.models import Episode
from recwatch.utils.datetime import ensure_utc, now_utc

DEFAULT_DATE_FORMAT = "%m/%d (%a) %H:%M"


class EpisodeView:
    """Sorted, filtered rendering of the episode table."""

    def __init__(
        self,
        now: datetime | None = None,
        date_format: str = DEFAULT_DATE_FORMAT,
    ) -> None:
        """Initialize the view.

        Args:
            now: Reference time for the "after today" filter (default: now, UTC)
            date_format: strftime format for the start column
        """
        self.today: date = ensure_utc(now or now_utc()).date()
        self.date_format = date_format

    def is_visible(self, episode: Episode) -> bool:
        """Whether the row passes the "starts after today" filter."""
        return episode.start_date_time.date() > self.today

    def ordered(self, episodes: Iterable[Episode]) -> list[Episode]:
        """All episodes sorted by start time ascending (stable)."""
        return sorted(episodes, key=lambda e: e.start_date_time)

    def visible(self, episodes: Iterable[Episode]) -> list[Episode]:
        """Sorted episodes that pass the filter."""
        return [e for e in self.ordered(episodes) if self.is_visible(e)]

    def build_table(self, episodes: Iterable[Episode], title: str | None = None) -> Table:
        """Build a rich table of the visible episodes."""
        table = Table(title=title, row_styles=["", "dim"])
        table.add_column("Title", style="cyan")
        table.add_column("Start", style="green", no_wrap=True)
        table.add_column("Recorded", justify="center")
        table.add_column("URL", style="blue")

        for episode in self.visible(episodes):
            table.add_row(
                episode.title,
                episode.start_date_time.strftime(self.date_format),
                "☑" if episode.recorded else "☐",
                episode.url,
            )

        return table

    def render(
        self,
        episodes: Iterable[Episode],
        console: Console | None = None,
        title: str | None = None,
    ) -> None:
        """Print the table to ``console``."""
        (console or Console()).print(self.build_table(episodes, title=title))
