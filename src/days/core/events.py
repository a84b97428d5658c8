"""Event records built from raw storage columns - no I/O dependencies."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .dates import DateValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventRecord:
    """A dated, categorized event. An empty category means uncategorized."""

    timestamp: DateValue
    category: str
    description: str

    def format(self) -> str:
        """Format the event for display."""
        return f"{self.timestamp.format()}: {self.description} ({self.category})"


def load_records(
    dates: Sequence[str],
    categories: Sequence[str],
    descriptions: Sequence[str],
) -> list[EventRecord]:
    """
    Build records from parallel date/category/description columns.

    Rows whose date does not parse are skipped with a warning naming the
    row index and raw value. Row order is preserved.
    """
    if not len(dates) == len(categories) == len(descriptions):
        raise ValueError(
            f"Column lengths differ: {len(dates)} dates, "
            f"{len(categories)} categories, {len(descriptions)} descriptions"
        )

    records = []
    for i, raw_date in enumerate(dates):
        timestamp = DateValue.parse(raw_date)
        if timestamp is None:
            logger.warning(f"bad date at row {i}: {raw_date}")
            continue

        records.append(
            EventRecord(
                timestamp=timestamp,
                category=categories[i],
                description=descriptions[i],
            )
        )
    return records
