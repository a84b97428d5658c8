"""days CLI - personal event log."""

import json
import logging
import sys

import click

from .adapters.csv_store import CsvEventStore, StorageError
from .config import Config, ConfigError, load_config
from .core import (
    DateValue,
    DaysError,
    ListOptions,
    MissingParameterError,
    build_add_row,
    build_predicate,
    format_line,
    load_records,
    select,
    to_rows,
)
from .ports import EventStore


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """days - keep a log of dated, categorized events."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    else:
        logging.basicConfig(format="%(message)s", level=logging.WARNING)


def _load_config() -> Config:
    try:
        return load_config()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _open_store(config: Config) -> EventStore:
    """Store for the configured events file. The data directory must exist."""
    if not config.data_dir.exists():
        click.echo(f"{config.data_dir} does not exist, please create it (run 'days init')", err=True)
        sys.exit(1)
    return CsvEventStore(config.events_path)


@main.command()
def init():
    """Create the data directory and an empty events file."""
    config = _load_config()
    store = CsvEventStore(config.events_path)
    if store.exists():
        click.echo(f"{store.path} already exists.")
        return
    store.create()
    click.echo(f"Created {store.path}")


# Date options may be given without a value so that a missing date can be
# reported as such instead of as a usage error.
def _date_option(name: str, dest: str, help_text: str):
    return click.option(name, dest, is_flag=False, flag_value="", default=None, metavar="YYYY-MM-DD", help=help_text)


@main.command("list")
@click.option("--today", "today_only", is_flag=True, help="Only events dated today")
@_date_option("--before-date", "before_date", "Events strictly before this date")
@_date_option("--after-date", "after_date", "Events on or after this date")
@_date_option("--date", "on_date", "Events on exactly this date")
@click.option("--categories", default=None, help="Comma-separated categories to include")
@click.option("--exclude", is_flag=True, help="Exclude --categories instead of including them")
@click.option("--no-category", is_flag=True, help="Only uncategorized events")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_events(
    today_only: bool,
    before_date: str | None,
    after_date: str | None,
    on_date: str | None,
    categories: str | None,
    exclude: bool,
    no_category: bool,
    as_json: bool,
):
    """List events, optionally filtered by date or category."""
    options = ListOptions(
        today=today_only,
        before_date=before_date,
        after_date=after_date,
        on_date=on_date,
        categories=categories,
        exclude=exclude,
        no_category=no_category,
    )
    try:
        predicate = build_predicate(options)
    except DaysError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    config = _load_config()
    store = _open_store(config)
    today = DateValue.today()

    try:
        columns = store.read_columns() if store.exists() else ([], [], [])
    except StorageError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    records = load_records(*columns)

    try:
        if as_json:
            click.echo(json.dumps(to_rows(select(records, predicate, today), today), indent=2))
            return
        for record in select(records, predicate, today):
            click.echo(format_line(record, today))
    except MissingParameterError as e:
        click.echo(str(e))
        sys.exit(1)


@main.command()
@click.option("--date", "event_date", default=None, metavar="YYYY-MM-DD", help="Event date, defaults to today")
@click.option("--category", default=None, help="Event category (may be empty)")
@click.option("--description", default=None, help="What happened")
def add(event_date: str | None, category: str | None, description: str | None):
    """Add an event."""
    try:
        row = build_add_row(DateValue.today(), category, description, date=event_date)
    except DaysError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    config = _load_config()
    store = _open_store(config)
    store.append(row)
    click.echo(f"Added {row[0]}: {row[2]} ({row[1]})")


@main.command()
@_date_option("--date", "event_date", "Delete every row containing this date")
@click.option("--dry-run", is_flag=True, help="Show what would be deleted without changing the file")
def delete(event_date: str | None, dry_run: bool):
    """Delete events by date.

    Any stored row whose text contains the date is removed, wherever it
    appears in the row.
    """
    config = _load_config()
    store = _open_store(config)

    try:
        removed = store.delete_matching(event_date, dry_run=dry_run)
    except MissingParameterError as e:
        click.echo(str(e))
        sys.exit(1)
    except StorageError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if dry_run:
        click.echo("Dry run, would delete:")
    else:
        click.echo(f"Deleted {len(removed)} event(s).")
    for line in removed:
        click.echo(f"  {line}")


if __name__ == "__main__":
    main()
