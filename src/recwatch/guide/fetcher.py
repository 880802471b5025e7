"""Paginated episode fetching."""

import logging
import time
from collections.abc import Callable
from typing import Protocol

from recwatch.guide.dates import parse_start_date
from recwatch.guide.models import Episode, ProgramRecord, SearchPage
from recwatch.guide.titles import normalize_title

logger = logging.getLogger(__name__)

DEFAULT_DETAIL_BASE_URL = "https://tvguide.myjcom.jp/detail/?eid="


class SearchSource(Protocol):
    """Anything that can return one page of guide results."""

    def search(self, keyword: str, channel: str | None, offset: int) -> SearchPage: ...


class EpisodeFetcher:
    """Drive the search endpoint page by page and collect episodes.

    Paging stops at the first empty page, once the server-reported total
    has been consumed, or after ``max_pages`` attempts. A fixed delay
    separates consecutive requests.
    """

    def __init__(
        self,
        source: SearchSource,
        detail_base_url: str = DEFAULT_DETAIL_BASE_URL,
        page_delay_seconds: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the fetcher.

        Args:
            source: Search client
            detail_base_url: Prefix joined with a record id to form its link
            page_delay_seconds: Pause after each consumed page
            sleep: Sleep function (replaced in tests)
        """
        self.source = source
        self.detail_base_url = detail_base_url
        self.page_delay_seconds = page_delay_seconds
        self._sleep = sleep

    def fetch(self, keyword: str, channel: str | None, max_pages: int) -> list[Episode]:
        """Fetch every episode for ``keyword`` up to ``max_pages`` pages.

        Args:
            keyword: Show name to search for
            channel: Channel filter, or None for all channels
            max_pages: Maximum number of page requests

        Returns:
            Episodes in server order (usually nearest broadcast first)

        Raises:
            GuideError: Any page failed to load or parse; no partial result
            NetworkError: Transport failure on any page
        """
        episodes: list[Episode] = []

        page = 0
        offset = 0
        while page < max_pages:
            page += 1
            result = self.source.search(keyword, channel, offset)
            total_count = result.total_count
            count = result.count

            if offset >= total_count or total_count <= 0 or count <= 0:
                logger.debug(
                    f"Stopping at page {page}: offset={offset} total={total_count} count={count}"
                )
                break

            offset += count
            episodes.extend(self._to_episode(record) for record in result.records)
            logger.debug(f"Page {page}: {count} records ({offset}/{total_count})")

            self._sleep(self.page_delay_seconds)

        logger.info(f"Fetched {len(episodes)} episodes for {keyword!r}")
        return episodes

    def _to_episode(self, record: ProgramRecord) -> Episode:
        return Episode(
            title=normalize_title(record.title),
            start_date_time=parse_start_date(record.start_date.date.strip()),
            recorded=False,
            url=self.detail_base_url + record.cid,
        )
