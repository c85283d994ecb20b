"""Journal storage interface."""

from datetime import date
from pathlib import Path
from typing import Iterator, Protocol

from ..core.entries import DateFilter


class JournalStore(Protocol):
    """Interface for locating, reading and appending entry files."""

    def path_for_date(self, target_date: date) -> Path:
        """Get the entry file path for a date."""
        ...

    def iter_entry_files(self, date_filter: DateFilter | None = None) -> Iterator[Path]:
        """Yield entry files whose date satisfies the filter, oldest first."""
        ...

    def read(self, path: Path) -> str | None:
        """Read an entry file. Returns None if it cannot be read."""
        ...

    def append(self, target_date: date, content: str) -> Path:
        """Append raw text to the entry file for a date."""
        ...
