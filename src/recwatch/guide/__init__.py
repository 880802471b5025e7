"""TV guide search, parsing and pagination."""

from recwatch.guide.client import GuideClient
from recwatch.guide.dates import format_start_date, parse_start_date
from recwatch.guide.fetcher import EpisodeFetcher
from recwatch.guide.models import Episode, ProgramRecord, SearchPage, StartDate
from recwatch.guide.titles import normalize_title

__all__ = [
    "Episode",
    "EpisodeFetcher",
    "GuideClient",
    "ProgramRecord",
    "SearchPage",
    "StartDate",
    "format_start_date",
    "normalize_title",
    "parse_start_date",
]
