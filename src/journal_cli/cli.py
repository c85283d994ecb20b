"""journal-cli - command line journaling."""

import logging
import sys

import click

from .adapters.editor import EditorError, TerminalEditor
from .config import ConfigError, load_config
from .core.entries import SearchPatternError
from .workflows import (
    Mode,
    build_filter,
    edit_entry,
    get_journal,
    select_mode,
    view_entries,
    write_entry,
)

logger = logging.getLogger(__name__)

OPTION_SECTIONS = {
    "General Options": ["config_file", "debug", "version", "help"],
    "Entry Options": ["journal", "date_text"],
    "Viewing Options": ["since", "until", "on", "search", "smartcase"],
    "Editing Options": ["edit"],
}


class SectionedCommand(click.Command):
    """Command whose --help lists options under headed sections."""

    def format_options(self, ctx, formatter):
        params = {p.name: p for p in self.get_params(ctx)}
        for title, names in OPTION_SECTIONS.items():
            rows = [params[n].get_help_record(ctx) for n in names if n in params]
            rows = [r for r in rows if r]
            if rows:
                with formatter.section(click.style(title, fg="magenta", bold=True)):
                    formatter.write_dl(rows)


@click.command(
    cls=SectionedCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(package_name="journal-cli")
@click.option("-c", "--config", "config_file", metavar="CONFIG_FILE", default=None,
              help="Load config from CONFIG_FILE instead of ~/.journalrc")
@click.option("--debug", is_flag=True, help="Turn on debug info")
@click.option("-j", "--journal", metavar="JOURNAL", default=None, help="Add entry to JOURNAL")
@click.option("--date", "date_text", metavar="DATE", default=None, help="Add the entry under DATE")
@click.option("--since", metavar="DATE", default=None, help="View entries added on or after DATE")
@click.option("--until", metavar="DATE", default=None, help="View entries added on or before DATE")
@click.option("--on", metavar="DATE", default=None, help="View entries added on DATE")
@click.option("-s", "--search", metavar="TERM", default=None, help="View entries containing TERM")
@click.option("--smartcase/--no-smartcase", default=True, show_default=True,
              help="Perform vim-style smartcase search")
@click.option("-e", "--edit", metavar="DATE", default=None, help="Edit entries added on DATE")
@click.argument("entry", nargs=-1)
def main(config_file, debug, journal, date_text, since, until, on, search, smartcase, edit, entry):
    """Command line journaling application.

    With no viewing or editing options, ENTRY is appended to today's
    entry file. Without ENTRY, $EDITOR is opened to type it.
    """
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
        stream=sys.stderr,
    )

    try:
        config = load_config(config_file, journal=journal)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    store = get_journal(config)
    mode = select_mode(since=since, until=until, on=on, search=search, edit=edit)
    logger.debug(f"config={config.config_file} journal={config.journal.name} mode={mode.value}")

    match mode:
        case Mode.PRINT:
            date_filter = build_filter(since=since, until=until, on=on)
            try:
                for chunk in view_entries(store, date_filter, search=search, smartcase=smartcase):
                    click.echo(chunk, nl=False)
            except SearchPatternError as e:
                click.echo(f"Error: {e}", err=True)
                sys.exit(1)
        case Mode.EDIT:
            try:
                edit_entry(store, TerminalEditor(), edit)
            except EditorError as e:
                click.echo(f"Error: {e}", err=True)
                sys.exit(1)
        case Mode.WRITE:
            try:
                write_entry(store, TerminalEditor(), entry, date_text=date_text)
            except EditorError as e:
                click.echo(f"Error: {e}", err=True)
                sys.exit(1)


if __name__ == "__main__":
    main()
