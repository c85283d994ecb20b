"""Terminal editor adapter - blocking subprocess wrapper for $EDITOR."""

import logging
import os
import shlex
import shutil
import subprocess
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)

DEFAULT_EDITOR = "vim"
VIM_FAMILY = {"vi", "vim", "nvim", "gvim"}


class EditorError(RuntimeError):
    """The editor could not be run to completion."""


class EditorNotFoundError(EditorError):
    """No executable matches the configured editor."""


@contextmanager
def preserved_terminal() -> Iterator[None]:
    """Restore the terminal attributes after the block, however it exits."""
    if os.name != "posix" or not sys.stdin.isatty():
        yield
        return

    import termios

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


class TerminalEditor:
    """
    Interactive editor subprocess.

    Implements Editor protocol. The child inherits stdin, stdout and
    stderr so it owns the terminal until it exits.
    """

    def __init__(self, command: str | None = None):
        self.command = command or os.environ.get("EDITOR") or DEFAULT_EDITOR

    def build_command(self, path: Path, at_end: bool = False) -> list[str]:
        """Resolve the editor executable and build its argv."""
        parts = shlex.split(self.command)
        executable = shutil.which(parts[0]) if parts else None
        if executable is None:
            raise EditorNotFoundError(f"could not find an appropriate editor ({self.command!r})")

        argv = [executable, *parts[1:]]
        if at_end and Path(parts[0]).name in VIM_FAMILY:
            # Cursor on the last line, appending
            argv.append("+normal Ga")
        argv.append(str(path))
        return argv

    def open(self, path: Path, at_end: bool = False) -> None:
        """Open a file and block until the editor exits."""
        argv = self.build_command(path, at_end=at_end)
        logger.debug(f"launching editor: {argv}")

        try:
            with preserved_terminal():
                proc = subprocess.run(argv)
        except FileNotFoundError as e:
            raise EditorNotFoundError(f"could not find an appropriate editor ({self.command!r})") from e

        if proc.returncode != 0:
            logger.error(f"Editor exited with status {proc.returncode}")
            raise EditorError(f"editor exited with status {proc.returncode}")
