"""Journal CLI - daily entries and reminders."""

import logging
import os
import sys
from datetime import date

import click

from .config import load_config
from .core.dates import parse_interval, parse_specific_date
from .errors import JournalError
from .workflows import compile_entry, get_reminders, new_entry

NO_REMINDERS = "No reminder configuration set. Please add it first"


def _setup_logging(debug: bool) -> None:
    level_name = "DEBUG" if debug else os.environ.get("JOURNAL_LOG_LEVEL", "").upper()
    level = logging.getLevelName(level_name) if level_name else logging.WARNING
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level,
    )


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Journal - daily entries that carry your work forward."""
    _setup_logging(debug)


@main.command()
@click.argument("title")
@click.option("--stdout", "-s", "write_to_stdout", is_flag=True, help="Print the entry instead of saving it")
def new(title: str, write_to_stdout: bool):
    """Create today's entry."""
    try:
        config = load_config()
        if write_to_stdout:
            click.echo(compile_entry(config, title), nl=False)
            return
        path = new_entry(config, title)
    except JournalError as e:
        _fail(e)

    click.echo(f"✓ Entry saved to {path}")
    click.launch(str(path))


@main.group()
def reminder():
    """Manage reminders."""
    pass


@reminder.command("add")
@click.argument("text")
@click.option("--on", "on_spec", default=None, help="Date: 15.Jan.2022, 12.Feb or a weekday")
@click.option("--every", "every_spec", default=None, help="Recurrence: a weekday, 3.days or 2.weeks")
def reminder_add(text: str, on_spec: str | None, every_spec: str | None):
    """Add a reminder on a date or on a recurrence."""
    if (on_spec is None) == (every_spec is None):
        click.echo("Error: pass exactly one of --on or --every", err=True)
        sys.exit(1)

    try:
        config = load_config()
        repo = get_reminders(config)
        if repo is None:
            click.echo(NO_REMINDERS)
            return

        today = date.today()
        store = repo.load()
        if on_spec is not None:
            added = store.add_on_date(parse_specific_date(on_spec).resolve(today), text)
        else:
            added = store.add_recurring(today, parse_interval(every_spec), text)
        repo.save(store)
    except JournalError as e:
        _fail(e)

    click.echo(f"Added reminder for {added.describe()}: {text}")


@reminder.command("list")
def reminder_list():
    """List all reminders."""
    try:
        config = load_config()
        repo = get_reminders(config)
        if repo is None:
            click.echo(NO_REMINDERS)
            return
        rows = repo.load().listing()
    except JournalError as e:
        _fail(e)

    if not rows:
        click.echo("No reminders.")
        return

    width = max(len(row.when) for row in rows)
    for row in rows:
        click.echo(f"{row.position:>3}  {row.when:{width}}  {row.text}")


@reminder.command("delete")
@click.argument("number", type=int)
def reminder_delete(number: int):
    """Delete a reminder by the number shown in 'reminder list'."""
    try:
        config = load_config()
        repo = get_reminders(config)
        if repo is None:
            click.echo(NO_REMINDERS)
            return
        store = repo.load()
        removed = store.delete(number)
        repo.save(store)
    except JournalError as e:
        _fail(e)

    click.echo(f"Deleted reminder {number}: {removed.text}")


@main.group()
def config():
    """Inspect configuration."""
    pass


@config.command("show")
def config_show():
    """Show the configuration currently loaded."""
    try:
        loaded = load_config()
    except JournalError as e:
        _fail(e)

    for line in loaded.to_lines():
        click.echo(line)


if __name__ == "__main__":
    main()
