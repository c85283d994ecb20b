"""Ports - interfaces/protocols for external dependencies."""

from .journal_store import JournalStore
from .editor import Editor

__all__ = [
    "JournalStore",
    "Editor",
]
