"""List query engine - applies a predicate to records and formats output."""

from collections.abc import Iterable, Iterator

from .dates import DateValue, days_between
from .events import EventRecord
from .filters import FilterPredicate


def format_delta(delta: int) -> str:
    """Relative description of a day delta."""
    if delta < 0:
        return f"{abs(delta)} days ago"
    if delta > 0:
        return f"in {delta} days"
    return "today"


def format_line(record: EventRecord, today: DateValue) -> str:
    """Display line for a record, e.g. '2024-06-10: standup (work) - 5 days ago'."""
    delta = days_between(today, record.timestamp)
    return f"{record.format()} - {format_delta(delta)}"


def select(
    records: Iterable[EventRecord],
    predicate: FilterPredicate,
    today: DateValue,
) -> Iterator[EventRecord]:
    """
    Yield records the predicate keeps, in storage order.

    MissingParameterError from the predicate propagates and ends the listing.
    """
    for record in records:
        if predicate.keep(record, today):
            yield record


def list_lines(
    records: Iterable[EventRecord],
    predicate: FilterPredicate,
    today: DateValue,
) -> Iterator[str]:
    """Formatted lines for every selected record."""
    for record in select(records, predicate, today):
        yield format_line(record, today)


def to_rows(records: Iterable[EventRecord], today: DateValue) -> list[dict]:
    """JSON-serializable rows for records."""
    return [
        {
            "date": r.timestamp.format(),
            "category": r.category,
            "description": r.description,
            "delta": days_between(today, r.timestamp),
        }
        for r in records
    ]
