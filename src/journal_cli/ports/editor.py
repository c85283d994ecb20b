"""External editor interface."""

from pathlib import Path
from typing import Protocol


class Editor(Protocol):
    """Interface for handing a file to an interactive editor."""

    def open(self, path: Path, at_end: bool = False) -> None:
        """Block until the user has finished editing the file."""
        ...
