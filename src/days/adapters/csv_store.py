"""CSV file event storage adapter."""

import csv
import io
import logging
import os
import tempfile
from pathlib import Path

from days.core.rows import partition_lines

logger = logging.getLogger(__name__)

COLUMNS = ("date", "category", "description")


class StorageError(Exception):
    """The events file is missing, unreadable or has the wrong columns."""


class CsvEventStore:
    """
    CSV-backed event storage.

    Implements EventStore protocol. Columns are looked up by header name, so
    their order in the file does not matter.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def exists(self) -> bool:
        return self.path.exists()

    def create(self) -> None:
        """Create the file with just a header. Existing files are left alone."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if self.path.exists():
            return
        self.path.write_text(",".join(COLUMNS) + "\n", encoding="utf-8")
        logger.info(f"Created {self.path}")

    def read_columns(self) -> tuple[list[str], list[str], list[str]]:
        """Read the date, category and description columns."""
        if not self.path.exists():
            raise StorageError(f"{self.path} does not exist")

        with open(self.path, newline="", encoding="utf-8") as handle:
            reader = csv.DictReader(handle)
            if not reader.fieldnames:
                return [], [], []

            missing = [c for c in COLUMNS if c not in reader.fieldnames]
            if missing:
                raise StorageError(f"{self.path}: missing column(s) {', '.join(missing)}")

            dates, categories, descriptions = [], [], []
            for row in reader:
                dates.append(row["date"] or "")
                categories.append(row["category"] or "")
                descriptions.append(row["description"] or "")

        logger.debug(f"Read {len(dates)} rows from {self.path}")
        return dates, categories, descriptions

    def append(self, row: list[str]) -> None:
        """Append one row, creating the file with a header if needed."""
        if not self.path.exists():
            self.create()

        existing = self.path.read_text(encoding="utf-8")
        prefix = "" if not existing or existing.endswith("\n") else "\n"
        with open(self.path, "a", encoding="utf-8", newline="") as handle:
            handle.write(f"{prefix}{_serialize(row)}\n")

    def delete_matching(self, needle: str, dry_run: bool = False) -> list[str]:
        """
        Remove data rows containing `needle` and return them.

        Each row is matched on its serialized CSV text, so a quoted field that
        spans several physical lines is kept or dropped as a whole. The header
        row is always kept. Surviving rows go to a temporary file next to the
        original, which replaces it unless this is a dry run.
        """
        if not self.path.exists():
            raise StorageError(f"{self.path} does not exist")

        with open(self.path, newline="", encoding="utf-8") as handle:
            rows = [_serialize(row) for row in csv.reader(handle) if row]
        header, data = rows[:1], rows[1:]
        kept, removed = partition_lines(data, needle)

        tmp = tempfile.NamedTemporaryFile(
            "w",
            dir=self.path.parent,
            prefix=".events-",
            suffix=".csv",
            delete=False,
            encoding="utf-8",
            newline="",
        )
        tmp_path = Path(tmp.name)
        try:
            with tmp:
                _write_lines(tmp, header + kept)
            if not dry_run:
                tmp_path.replace(self.path)
                logger.info(f"Deleted {len(removed)} row(s) from {self.path}")
        finally:
            if tmp_path.exists():
                os.remove(tmp_path)

        return removed


def _serialize(row: list[str]) -> str:
    """CSV text of one row as append() writes it, without the line terminator."""
    buf = io.StringIO()
    csv.writer(buf, lineterminator="\n").writerow(row)
    return buf.getvalue().removesuffix("\n")


def _write_lines(handle, lines: list[str]) -> None:
    handle.write("".join(f"{line}\n" for line in lines))
