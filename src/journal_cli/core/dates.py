"""Free-form date resolution - no I/O dependencies.

Resolution is an ordered chain: the strict parser (dateutil) gets the
first try, then the natural-language parser (parsedatetime, ``en_US``
phrase rules, seeded with a fixed "now"). When every parser fails the
result is ``UNRESOLVED``, which callers read as "no date constraint"
rather than an error. Ambiguous input therefore never crashes a command;
it silently drops the constraint.
"""

from datetime import datetime
from typing import Protocol, Sequence

import parsedatetime
from dateutil import parser as dtparser

# Zero value returned when no parser understood the input.
UNRESOLVED = datetime.min


class DateParser(Protocol):
    """A single date parsing strategy."""

    def parse(self, text: str, now: datetime) -> datetime | None:
        """Parse text relative to now. Returns None on failure."""
        ...


class StrictDateParser:
    """Common absolute formats such as ``2024-01-05`` or ``Jan 5 2024``."""

    def parse(self, text: str, now: datetime) -> datetime | None:
        try:
            return dtparser.parse(text, default=midnight(now))
        except (dtparser.ParserError, ValueError, OverflowError):
            return None


class NaturalDateParser:
    """Relative English phrases such as ``yesterday`` or ``2 days ago``."""

    def __init__(self, locale: str = "en_US"):
        self._calendar = parsedatetime.Calendar(
            parsedatetime.Constants(locale, usePyICU=False),
            version=parsedatetime.VERSION_CONTEXT_STYLE,
        )

    def parse(self, text: str, now: datetime) -> datetime | None:
        result, context = self._calendar.parseDT(text, sourceTime=now)
        if not context.hasDateOrTime:
            return None
        return result


DEFAULT_PARSERS: tuple[DateParser, ...] = (StrictDateParser(), NaturalDateParser())


def midnight(value: datetime) -> datetime:
    """Drop the time-of-day component."""
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def is_resolved(value: datetime) -> bool:
    return value != UNRESOLVED


def resolve_date(
    text: str | None,
    now: datetime | None = None,
    parsers: Sequence[DateParser] = DEFAULT_PARSERS,
) -> datetime:
    """
    Turn a free-form date expression into a calendar date at midnight.

    Args:
        text: Expression like "today", "2 days ago" or "2024-01-05"
        now: Reference time for relative phrases (defaults to the current time)
        parsers: Strategies tried in order; the first success wins

    Returns:
        The resolved date at 00:00:00, or UNRESOLVED if no parser succeeded
    """
    if not text or not text.strip():
        return UNRESOLVED

    now = now or datetime.now()
    for date_parser in parsers:
        result = date_parser.parse(text.strip(), now)
        if result is not None:
            return midnight(result.replace(tzinfo=None))

    return UNRESOLVED
