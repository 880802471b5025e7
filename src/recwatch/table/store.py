"""CSV-backed episode table.

The table has a header row followed by one row per episode with exactly
four columns: title, start time, recorded flag and detail URL. It is read
once at the start of a run and rewritten wholesale at the end.
"""

import csv
import io
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from recwatch.guide.dates import format_start_date, parse_start_date
from recwatch.guide.models import Episode
from recwatch.guide.titles import normalize_title
from recwatch.utils.errors import DateParseError, TableError, TableFormatError

logger = logging.getLogger(__name__)

HEADER = ("Title", "Start", "Recorded", "URL")

_TRUE_VALUES = {"true", "1", "yes", "x", "✓"}


def parse_recorded(value: str) -> bool:
    """Interpret a recorded-flag cell."""
    return value.strip().lower() in _TRUE_VALUES


class EpisodeTable:
    """Episode table stored as a CSV file.

    Example:
        >>> table = EpisodeTable(Path("main.csv"))
        >>> episodes = table.load()
        >>> table.save(episodes)
    """

    def __init__(self, path: Path, name: str = "main", public_url: str | None = None):
        """Initialize the table.

        Args:
            path: CSV file location (parent directories are created on save)
            name: Display name used in notifications
            public_url: Link to the table used in notifications
                (defaults to the file URI)
        """
        self.path = path
        self.name = name
        self._public_url = public_url

    @property
    def url(self) -> str:
        """Link back to this table."""
        if self._public_url:
            return self._public_url
        return self.path.resolve().as_uri()

    def load(self) -> list[Episode]:
        """Read all episodes, header excluded.

        Titles are normalized on read and blank rows are skipped.

        Returns:
            Episodes in stored order (empty if the file does not exist)

        Raises:
            TableError: If the file cannot be read
            TableFormatError: If a row is malformed
        """
        if not self.path.exists():
            logger.info(f"Episode table {self.path} does not exist yet")
            return []

        try:
            with open(self.path, newline="", encoding="utf-8") as f:
                rows = list(csv.reader(f))
        except (OSError, csv.Error, UnicodeDecodeError) as e:
            raise TableError(f"Cannot read episode table {self.path}: {e}") from e

        episodes = []
        for line_number, row in enumerate(rows[1:], start=2):
            if not any(cell.strip() for cell in row):
                continue
            episode = self._parse_row(row, line_number)
            if episode is not None:
                episodes.append(episode)

        logger.debug(f"Loaded {len(episodes)} episodes from {self.path}")
        return episodes

    def _parse_row(self, row: list[str], line_number: int) -> Episode | None:
        if len(row) != len(HEADER):
            raise TableFormatError(
                f"{self.path}:{line_number}: expected {len(HEADER)} columns, got {len(row)}"
            )

        title_cell, start_cell, recorded_cell, url_cell = row
        title = normalize_title(title_cell)
        if not title:
            logger.debug(f"{self.path}:{line_number}: skipping row without title")
            return None

        try:
            return Episode(
                title=title,
                start_date_time=parse_start_date(start_cell),
                recorded=parse_recorded(recorded_cell),
                url=url_cell.strip(),
            )
        except (DateParseError, ValidationError) as e:
            raise TableFormatError(f"{self.path}:{line_number}: {e}") from e

    def save(self, episodes: list[Episode]) -> None:
        """Replace the table contents with ``episodes``.

        Raises:
            TableError: If the file cannot be written
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(HEADER)
        for episode in episodes:
            writer.writerow(
                [
                    episode.title,
                    format_start_date(episode.start_date_time),
                    "TRUE" if episode.recorded else "FALSE",
                    episode.url,
                ]
            )

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._write_file_atomic(buffer.getvalue())
        except OSError as e:
            raise TableError(f"Cannot write episode table {self.path}: {e}") from e

        logger.debug(f"Saved {len(episodes)} episodes to {self.path}")

    def _write_file_atomic(self, content: str) -> None:
        """Write via temp file + fsync + rename so readers never see a partial table."""
        temp_fd, temp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=".tmp_", suffix=".csv"
        )

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())

            Path(temp_path).replace(self.path)
        except Exception:
            Path(temp_path).unlink(missing_ok=True)
            raise
