"""File-based journal storage adapter."""

import logging
from datetime import date
from pathlib import Path
from typing import Iterator

from ..core.entries import DateFilter, date_from_filename

logger = logging.getLogger(__name__)

ENTRY_GLOB = "*-*-*.txt"


class FileJournalStore:
    """
    File-based journal storage.

    Implements JournalStore protocol. Each day gets a ``YYYY-MM-DD.txt`` file.
    """

    def __init__(self, journal_dir: Path | str):
        self.journal_dir = Path(journal_dir).expanduser()

    def path_for_date(self, target_date: date) -> Path:
        """Get the file path for a given date."""
        return self.journal_dir / f"{target_date.isoformat()}.txt"

    def iter_entry_files(self, date_filter: DateFilter | None = None) -> Iterator[Path]:
        """
        Yield entry files whose embedded date satisfies the filter.

        Walks the journal directory recursively. Files are ordered by
        their embedded date; directories and names without a valid
        ``YYYY-MM-DD`` token are skipped.
        """
        date_filter = date_filter or DateFilter()
        if not self.journal_dir.is_dir():
            logger.debug(f"journal directory {self.journal_dir} does not exist")
            return

        dated = []
        for path in self.journal_dir.rglob(ENTRY_GLOB):
            if not path.is_file():
                continue
            entry_date = date_from_filename(path.name)
            if entry_date is None:
                logger.debug(f"skipping {path}: no date in file name")
                continue
            dated.append((entry_date, path))

        for entry_date, path in sorted(dated):
            if date_filter.matches(entry_date):
                yield path

    def read(self, path: Path) -> str | None:
        """Read an entry file. Returns None if it cannot be read."""
        try:
            return path.read_text()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"skipping {path}: {e}")
            return None

    def append(self, target_date: date, content: str) -> Path:
        """Append raw text to the entry file for a date, creating it if needed."""
        path = self.path_for_date(target_date)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a") as f:
            f.write(content)
        return path
