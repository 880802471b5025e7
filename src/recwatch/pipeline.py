"""Run orchestration: fetch, reconcile, persist, notify.

One run:

1. take the advisory run lock (give up quietly if another run holds it)
2. load the stored episode table
3. fetch the current listings from the guide
4. merge them, keeping the user's recorded flags
5. write the merged table back
6. pick unrecorded, visible episodes airing within the horizon
7. notify when that set is non-empty
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from recwatch.config.schema import GlobalConfig
from recwatch.guide.fetcher import EpisodeFetcher
from recwatch.guide.models import Episode
from recwatch.notify.dispatcher import DispatchReport, NotificationDispatcher
from recwatch.reconcile import merge_episodes
from recwatch.selection import select_unrecorded
from recwatch.table.store import EpisodeTable
from recwatch.table.view import EpisodeView
from recwatch.utils.datetime import now_utc
from recwatch.utils.lock import RunLockHandle

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Summary of a pipeline run."""

    skipped: bool = False
    fetched_count: int = 0
    episodes: list[Episode] = field(default_factory=list)
    unrecorded: list[Episode] = field(default_factory=list)
    report: DispatchReport | None = None

    @property
    def stored_count(self) -> int:
        return len(self.episodes)

    @property
    def notified(self) -> bool:
        return self.report is not None


class Pipeline:
    """Single reconciliation/notification run over one episode table."""

    def __init__(
        self,
        config: GlobalConfig,
        table: EpisodeTable,
        fetcher: EpisodeFetcher,
        dispatcher: NotificationDispatcher,
        lock: RunLockHandle,
        clock: Callable[[], datetime] = now_utc,
    ) -> None:
        """Initialize the pipeline.

        Args:
            config: Global configuration
            table: Episode table adapter
            fetcher: Guide fetcher
            dispatcher: Notification dispatcher
            lock: Advisory run lock
            clock: Current-time source (replaced in tests)
        """
        self.config = config
        self.table = table
        self.fetcher = fetcher
        self.dispatcher = dispatcher
        self.lock = lock
        self.clock = clock

    def execute(self) -> RunResult:
        """Run once under the advisory lock.

        Returns:
            RunResult; ``skipped`` is True when the lock was busy

        Raises:
            RecwatchError: Fetch, table or email failures abort the run
        """
        if not self.lock.try_acquire(self.config.lock_timeout_seconds):
            logger.debug("Another run holds the lock, skipping")
            return RunResult(skipped=True)

        try:
            return self.update()
        finally:
            self.lock.release()

    def update(self) -> RunResult:
        """Fetch, merge, save and notify (no locking)."""
        now = self.clock()
        guide = self.config.guide

        existing = self.table.load()
        fetched = self.fetcher.fetch(guide.keyword, guide.channel, guide.max_pages)

        merged = merge_episodes(existing, fetched)
        self.table.save(merged)
        logger.info(
            f"Stored {len(merged)} episodes ({len(existing)} before, {len(fetched)} fetched)"
        )

        view = EpisodeView(now=now, date_format=self.config.table.date_format)
        unrecorded = select_unrecorded(
            view.ordered(merged),
            view.is_visible,
            horizon_days=self.config.horizon_days,
            now=now,
        )

        result = RunResult(
            fetched_count=len(fetched),
            episodes=merged,
            unrecorded=unrecorded,
        )

        if unrecorded:
            logger.info(
                f"{len(unrecorded)} unrecorded episodes air within "
                f"{self.config.horizon_days} days"
            )
            result.report = self.dispatcher.dispatch(unrecorded, self.table)
        else:
            logger.info("Nothing to record soon")

        return result
