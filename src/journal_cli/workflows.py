"""Journal workflows - the print, write and edit operations."""

import logging
from datetime import date, datetime
from enum import Enum
from typing import Iterator

from .adapters.file_journal import FileJournalStore
from .config import Config
from .core.dates import is_resolved, resolve_date
from .core.entries import (
    DateFilter,
    compile_search,
    format_entry,
    highlight_timestamps,
    search_entries,
)
from .ports.editor import Editor
from .ports.journal_store import JournalStore

logger = logging.getLogger(__name__)


class Mode(Enum):
    """What a single invocation does."""

    PRINT = "print"
    EDIT = "edit"
    WRITE = "write"


def select_mode(
    since: str | None = None,
    until: str | None = None,
    on: str | None = None,
    search: str | None = None,
    edit: str | None = None,
) -> Mode:
    """Viewing flags win over --edit, which wins over writing."""
    if since or until or on or search:
        return Mode.PRINT
    if edit:
        return Mode.EDIT
    return Mode.WRITE


def get_journal(config: Config) -> FileJournalStore:
    """Resolve journal store from config."""
    return FileJournalStore(config.journal_dir)


def _resolve_bound(flag: str, text: str | None, now: datetime | None) -> date | None:
    if not text:
        return None
    resolved = resolve_date(text, now=now)
    if not is_resolved(resolved):
        logger.warning(f"could not understand --{flag} {text!r}, ignoring it")
        return None
    return resolved.date()


def build_filter(
    since: str | None = None,
    until: str | None = None,
    on: str | None = None,
    now: datetime | None = None,
) -> DateFilter:
    """Resolve the viewing flags. Unresolvable dates impose no constraint."""
    return DateFilter(
        since=_resolve_bound("since", since, now),
        until=_resolve_bound("until", until, now),
        on=_resolve_bound("on", on, now),
    )


def _resolve_target(text: str | None, now: datetime) -> datetime:
    if not text:
        return now
    resolved = resolve_date(text, now=now)
    if not is_resolved(resolved):
        logger.warning(f"could not understand date {text!r}, using today")
        return now
    return resolved


def view_entries(
    journal: JournalStore,
    date_filter: DateFilter | None = None,
    search: str | None = None,
    smartcase: bool = True,
) -> Iterator[str]:
    """
    Render entries for display, oldest file first.

    Without a search term each matching file is yielded whole; with one,
    only the matching entry blocks are yielded. Unreadable files are skipped.
    Nothing is written.
    """
    pattern = compile_search(search, smartcase=smartcase) if search else None
    logger.debug(f"searching for entries to print: filter={date_filter} search={search!r}")

    for path in journal.iter_entry_files(date_filter):
        content = journal.read(path)
        if content is None:
            continue

        if pattern is None:
            yield highlight_timestamps(content)
            continue

        for entry in search_entries(content, pattern):
            yield highlight_timestamps(entry.render()) + "\n"


def write_entry(
    journal: JournalStore,
    editor: Editor,
    words: list[str] | tuple[str, ...] = (),
    date_text: str | None = None,
    now: datetime | None = None,
):
    """
    Append a new entry for now, or for the date given by date_text.

    With words the entry is written directly. Otherwise only the timestamp
    header is written and the editor is opened at the end of the file.
    """
    now = now or datetime.now()
    moment = _resolve_target(date_text, now)
    text = " ".join(words)

    path = journal.append(moment.date(), format_entry(moment, text or None))
    logger.debug(f"appended entry header to {path}")

    if not text:
        editor.open(path, at_end=True)
    return path


def edit_entry(
    journal: JournalStore,
    editor: Editor,
    date_text: str,
    now: datetime | None = None,
):
    """Open the entry file for a date in the editor."""
    now = now or datetime.now()
    moment = _resolve_target(date_text, now)
    path = journal.path_for_date(moment.date())
    editor.open(path)
    return path
