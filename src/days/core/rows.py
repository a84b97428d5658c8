"""Row-level rules for the add and delete commands - no I/O dependencies."""

from collections.abc import Iterable

from .dates import DateValue
from .errors import InvalidOptionsError, MissingParameterError


def build_add_row(
    today: DateValue,
    category: str | None,
    description: str | None,
    date: str | None = None,
) -> list[str]:
    """
    Build a new [date, category, description] row.

    Without `date` the row is stamped with today. An explicit date must be a
    valid YYYY-MM-DD. Category may be empty but must be given.
    """
    if category is None or description is None:
        raise InvalidOptionsError("Invalid options")

    timestamp = today if date is None else DateValue.from_string(date)
    return [timestamp.format(), category, description]


def partition_lines(lines: Iterable[str], needle: str | None) -> tuple[list[str], list[str]]:
    """
    Split raw stored lines into (kept, removed).

    Matching is a plain substring test on the serialized line, not a date
    comparison: a line is removed if `needle` appears anywhere in it,
    including inside the description.
    """
    if not needle:
        raise MissingParameterError("Missing date.")

    kept, removed = [], []
    for line in lines:
        if needle in line:
            removed.append(line)
        else:
            kept.append(line)
    return kept, removed
