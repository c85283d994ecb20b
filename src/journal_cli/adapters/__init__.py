"""Adapters - I/O implementations of ports."""

from .file_journal import FileJournalStore
from .editor import EditorError, EditorNotFoundError, TerminalEditor

__all__ = [
    "FileJournalStore",
    "EditorError",
    "EditorNotFoundError",
    "TerminalEditor",
]
