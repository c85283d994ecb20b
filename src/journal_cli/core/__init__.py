"""Functional core - pure journal logic with no I/O."""

from .dates import (
    DEFAULT_PARSERS,
    UNRESOLVED,
    DateParser,
    NaturalDateParser,
    StrictDateParser,
    is_resolved,
    resolve_date,
)
from .entries import (
    DateFilter,
    Entry,
    SearchPatternError,
    compile_search,
    extract_entries,
    format_entry,
    format_timestamp,
    highlight_timestamps,
    search_entries,
)

__all__ = [
    # Dates
    "DEFAULT_PARSERS",
    "UNRESOLVED",
    "DateParser",
    "NaturalDateParser",
    "StrictDateParser",
    "is_resolved",
    "resolve_date",
    # Entries
    "DateFilter",
    "Entry",
    "SearchPatternError",
    "compile_search",
    "extract_entries",
    "format_entry",
    "format_timestamp",
    "highlight_timestamps",
    "search_entries",
]
