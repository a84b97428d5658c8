"""Functional core - pure business logic with no I/O."""

from .errors import DaysError, MalformedDateError, MissingParameterError, InvalidOptionsError
from .dates import DateValue, days_between
from .events import EventRecord, load_records
from .filters import FilterPredicate, ListOptions, build_predicate
from .query import format_delta, format_line, list_lines, select, to_rows
from .rows import build_add_row, partition_lines

__all__ = [
    # Errors
    "DaysError",
    "MalformedDateError",
    "MissingParameterError",
    "InvalidOptionsError",
    # Dates
    "DateValue",
    "days_between",
    # Events
    "EventRecord",
    "load_records",
    # Filters
    "FilterPredicate",
    "ListOptions",
    "build_predicate",
    # Query
    "format_delta",
    "format_line",
    "list_lines",
    "select",
    "to_rows",
    # Rows
    "build_add_row",
    "partition_lines",
]
