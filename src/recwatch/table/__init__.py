"""Episode table persistence and presentation."""

from recwatch.table.store import HEADER, EpisodeTable
from recwatch.table.view import EpisodeView

__all__ = ["HEADER", "EpisodeTable", "EpisodeView"]
