"""Event storage interface."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class EventStore(Protocol):
    """Interface for the flat file holding event rows."""

    def exists(self) -> bool:
        """Check if the storage file exists."""
        ...

    def create(self) -> None:
        """Create an empty store with just a header."""
        ...

    def read_columns(self) -> tuple[list[str], list[str], list[str]]:
        """Return the (date, category, description) columns."""
        ...

    def append(self, row: list[str]) -> None:
        """Append one [date, category, description] row."""
        ...

    def delete_matching(self, needle: str, dry_run: bool = False) -> list[str]:
        """Drop every row whose raw text contains needle. Returns the dropped lines."""
        ...
