"""Configuration management for journal-cli."""

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "JOURNAL_CONFIG"
DEFAULT_CONFIG_FILES = (
    Path.home() / ".journalrc",
    Path.home() / ".journalrc.toml",
)


class ConfigError(Exception):
    """Base class for fatal configuration problems."""


class ConfigNotFoundError(ConfigError):
    """No config file exists at any of the searched locations."""


class ConfigReadError(ConfigError):
    """The config file exists but could not be read or parsed."""


class JournalNotFoundError(ConfigError):
    """The selected journal has no location configured."""


@dataclass
class Journal:
    """A named, directory-backed collection of entry files."""

    name: str
    location: Path


@dataclass
class Config:
    """Resolved settings for a single invocation."""

    journal: Journal
    config_file: Path | None = None

    @property
    def journal_dir(self) -> Path:
        return self.journal.location


def find_config_file(explicit: str | Path | None = None) -> Path:
    """Locate the config file.

    An explicit path (``-c/--config``) wins, then ``$JOURNAL_CONFIG``,
    then ``~/.journalrc`` and ``~/.journalrc.toml`` in that order.
    """
    if explicit:
        candidates = [Path(explicit).expanduser()]
    elif os.environ.get(CONFIG_ENV_VAR):
        candidates = [Path(os.environ[CONFIG_ENV_VAR]).expanduser()]
    else:
        candidates = list(DEFAULT_CONFIG_FILES)

    for candidate in candidates:
        if candidate.is_file():
            return candidate

    raise ConfigNotFoundError("config not found")


def read_config_file(path: Path) -> dict:
    """Parse the TOML config file into a plain dict."""
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigReadError(f"config could not be read in: {e}") from e


def load_config(config_file: str | Path | None = None, journal: str | None = None) -> Config:
    """Load the config file and select the active journal.

    The journal is ``journal`` when given, otherwise ``[journal] default``.
    Its directory comes from the ``location`` key of the table named after it.
    """
    path = find_config_file(config_file)
    data = read_config_file(path)

    journals = {}
    for name, table in data.items():
        if isinstance(table, dict) and isinstance(table.get("location"), str):
            journals[name] = Path(table["location"]).expanduser()

    name = journal
    if not name:
        defaults = data.get("journal", {})
        name = defaults.get("default", "") if isinstance(defaults, dict) else ""
    if not name:
        raise JournalNotFoundError(f"no journal selected and no default set in {path}")

    if name not in journals:
        known = ", ".join(sorted(journals)) or "none"
        raise JournalNotFoundError(f"journal '{name}' has no location in {path} (configured: {known})")

    selected = Journal(name=name, location=journals[name])
    logger.debug(f"default journal found: name={selected.name} location={selected.location}")
    return Config(journal=selected, config_file=path)
