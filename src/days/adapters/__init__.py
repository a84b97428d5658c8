"""Adapters - I/O implementations of ports."""

from .csv_store import CsvEventStore, StorageError

__all__ = [
    "CsvEventStore",
    "StorageError",
]
