"""Pure entry logic - timestamps, date filters, extraction and search."""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterator

import click

TIMESTAMP_FORMAT = "%a %m/%d/%y %H:%M:%S"
TIMESTAMP_PATTERN = r"\w+ \d+/\d+/\d+ \d+:\d+:\d+"

_TIMESTAMP_RE = re.compile(rf"({TIMESTAMP_PATTERN})\n")
# An entry runs from its timestamp line up to the next blank line or end of file.
_ENTRY_RE = re.compile(rf"({TIMESTAMP_PATTERN})\n(.*?)(?:^$|\Z)", re.MULTILINE | re.DOTALL)
_FILE_DATE_RE = re.compile(r"(\d+-\d+-\d+)\.txt$")


class SearchPatternError(ValueError):
    """The search term is not a valid regular expression."""


@dataclass
class Entry:
    """A single timestamped journal record."""

    timestamp: str
    body: str

    def render(self) -> str:
        return f"{self.timestamp}\n{self.body}"


@dataclass
class DateFilter:
    """
    Date constraints for selecting entry files.

    ``on`` takes precedence: when set, ``since`` and ``until`` are ignored.
    Otherwise every bound that is set must hold, both inclusive.
    """

    since: date | None = None
    until: date | None = None
    on: date | None = None

    @property
    def is_empty(self) -> bool:
        return self.since is None and self.until is None and self.on is None

    def matches(self, entry_date: date) -> bool:
        if self.on is not None:
            return entry_date == self.on
        if self.since is not None and entry_date < self.since:
            return False
        if self.until is not None and entry_date > self.until:
            return False
        return True


def format_timestamp(moment: datetime) -> str:
    """Format a timestamp header, e.g. ``Fri 01/05/24 09:30:00``."""
    return moment.strftime(TIMESTAMP_FORMAT)


def format_entry(moment: datetime, text: str | None = None) -> str:
    """Build the block appended to an entry file.

    Without text only the header is produced; the body is then typed
    into the editor.
    """
    block = f"\n{format_timestamp(moment)}\n"
    if text:
        block += f"- {text}\n"
    return block


def date_from_filename(name: str) -> date | None:
    """Extract the ``YYYY-MM-DD`` date from an entry file name."""
    match = _FILE_DATE_RE.search(name)
    if not match:
        return None
    try:
        return date.fromisoformat(match.group(1))
    except ValueError:
        return None


def extract_entries(content: str) -> list[Entry]:
    """Split file content into entries separated by blank lines."""
    return [Entry(timestamp=m.group(1), body=m.group(2)) for m in _ENTRY_RE.finditer(content)]


def compile_search(term: str, smartcase: bool = True) -> re.Pattern:
    """
    Compile a search term as a regular expression.

    With smartcase, a term whose first character is lowercase matches
    case-insensitively; anything else matches case-sensitively. Only the
    first character decides, like vim's smartcase.
    """
    flags = 0
    if smartcase and term[:1].islower():
        flags = re.IGNORECASE
    try:
        return re.compile(term, flags)
    except re.error as e:
        raise SearchPatternError(f"invalid search term {term!r}: {e}") from e


def search_entries(content: str, pattern: re.Pattern) -> Iterator[Entry]:
    """Yield entries whose body matches the pattern."""
    for entry in extract_entries(content):
        if pattern.search(entry.body):
            yield entry


def highlight_timestamps(text: str) -> str:
    """Wrap every timestamp header in a bright magenta escape sequence."""
    return _TIMESTAMP_RE.sub(lambda m: click.style(m.group(1), fg="bright_magenta") + "\n", text)
