"""Tests for the terminal editor adapter."""

import os
from pathlib import Path
from unittest.mock import patch, MagicMock

import pytest

from journal_cli.adapters.editor import (
    DEFAULT_EDITOR,
    EditorError,
    EditorNotFoundError,
    TerminalEditor,
)


class TestEditorSelection:
    def test_uses_editor_env(self, monkeypatch):
        monkeypatch.setenv("EDITOR", "nano")
        assert TerminalEditor().command == "nano"

    def test_defaults_to_vim(self, monkeypatch):
        monkeypatch.delenv("EDITOR", raising=False)
        assert TerminalEditor().command == DEFAULT_EDITOR

    def test_explicit_command_wins(self, monkeypatch):
        monkeypatch.setenv("EDITOR", "nano")
        assert TerminalEditor("emacs -nw").command == "emacs -nw"


class TestBuildCommand:
    @patch("journal_cli.adapters.editor.shutil.which", return_value="/usr/bin/vim")
    def test_vim_positioned_at_end(self, mock_which):
        argv = TerminalEditor("vim").build_command(Path("/j/2024-01-05.txt"), at_end=True)
        assert argv == ["/usr/bin/vim", "+normal Ga", "/j/2024-01-05.txt"]

    @patch("journal_cli.adapters.editor.shutil.which", return_value="/usr/bin/vim")
    def test_vim_without_positioning(self, mock_which):
        argv = TerminalEditor("vim").build_command(Path("/j/2024-01-05.txt"))
        assert argv == ["/usr/bin/vim", "/j/2024-01-05.txt"]

    @patch("journal_cli.adapters.editor.shutil.which", return_value="/usr/bin/code")
    def test_keeps_editor_arguments(self, mock_which):
        argv = TerminalEditor("code --wait").build_command(Path("/j/x.txt"), at_end=True)
        mock_which.assert_called_once_with("code")
        assert argv == ["/usr/bin/code", "--wait", "/j/x.txt"]

    @patch("journal_cli.adapters.editor.shutil.which", return_value=None)
    def test_missing_editor(self, mock_which):
        with pytest.raises(EditorNotFoundError):
            TerminalEditor("nonexistent-editor").build_command(Path("/j/x.txt"))


class TestOpen:
    @patch("journal_cli.adapters.editor.subprocess.run")
    @patch("journal_cli.adapters.editor.shutil.which", return_value="/usr/bin/nano")
    def test_runs_attached_to_terminal(self, mock_which, mock_run):
        mock_run.return_value = MagicMock(returncode=0)

        TerminalEditor("nano").open(Path("/j/x.txt"))

        mock_run.assert_called_once_with(["/usr/bin/nano", "/j/x.txt"])

    @patch("journal_cli.adapters.editor.subprocess.run")
    @patch("journal_cli.adapters.editor.shutil.which", return_value="/usr/bin/nano")
    def test_nonzero_exit_raises(self, mock_which, mock_run):
        mock_run.return_value = MagicMock(returncode=2)

        with pytest.raises(EditorError, match="status 2"):
            TerminalEditor("nano").open(Path("/j/x.txt"))

    @patch("journal_cli.adapters.editor.subprocess.run", side_effect=FileNotFoundError)
    @patch("journal_cli.adapters.editor.shutil.which", return_value="/usr/bin/nano")
    def test_vanished_executable(self, mock_which, mock_run):
        with pytest.raises(EditorNotFoundError) as exc_info:
            TerminalEditor("nano").open(Path("/j/x.txt"))

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)


@pytest.mark.skipif(os.name != "posix", reason="termios is POSIX only")
class TestTerminalRestore:
    @pytest.fixture
    def tty_stdin(self):
        stdin = MagicMock()
        stdin.isatty.return_value = True
        stdin.fileno.return_value = 0
        with patch("journal_cli.adapters.editor.sys.stdin", stdin):
            yield stdin

    @patch("termios.tcsetattr")
    @patch("termios.tcgetattr", return_value=["saved", "attrs"])
    @patch("journal_cli.adapters.editor.subprocess.run", side_effect=KeyboardInterrupt)
    @patch("journal_cli.adapters.editor.shutil.which", return_value="/usr/bin/vim")
    def test_restored_when_editor_interrupted(self, mock_which, mock_run, mock_get, mock_set, tty_stdin):
        import termios

        with pytest.raises(KeyboardInterrupt):
            TerminalEditor("vim").open(Path("/j/x.txt"))

        mock_get.assert_called_once_with(0)
        mock_set.assert_called_once_with(0, termios.TCSADRAIN, ["saved", "attrs"])

    @patch("termios.tcsetattr")
    @patch("termios.tcgetattr", return_value=["saved", "attrs"])
    @patch("journal_cli.adapters.editor.subprocess.run")
    @patch("journal_cli.adapters.editor.shutil.which", return_value="/usr/bin/vim")
    def test_restored_when_editor_fails(self, mock_which, mock_run, mock_get, mock_set, tty_stdin):
        mock_run.return_value = MagicMock(returncode=1)

        with pytest.raises(EditorError):
            TerminalEditor("vim").open(Path("/j/x.txt"))

        mock_set.assert_called_once()

    @patch("termios.tcgetattr")
    @patch("journal_cli.adapters.editor.subprocess.run")
    @patch("journal_cli.adapters.editor.shutil.which", return_value="/usr/bin/vim")
    def test_untouched_without_tty(self, mock_which, mock_run, mock_get):
        mock_run.return_value = MagicMock(returncode=0)

        with patch("journal_cli.adapters.editor.sys.stdin") as stdin:
            stdin.isatty.return_value = False
            TerminalEditor("vim").open(Path("/j/x.txt"))

        mock_get.assert_not_called()
