"""Calendar dates with strict parsing and exact day arithmetic."""

import logging
from dataclasses import dataclass
from datetime import date

from .errors import MalformedDateError

logger = logging.getLogger(__name__)

DATE_LENGTH = len("YYYY-MM-DD")

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


@dataclass(frozen=True, order=True)
class DateValue:
    """
    A validated (year, month, day) calendar date.

    Ordering compares year, then month, then day. Construction fails with
    MalformedDateError for anything that is not a real date.
    """

    year: int
    month: int
    day: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise MalformedDateError(f"month out of range: {self.month}")
        if not 1 <= self.day <= days_in_month(self.year, self.month):
            raise MalformedDateError(
                f"day out of range for {self.year}-{self.month:02d}: {self.day}"
            )

    @classmethod
    def parse(cls, text: str) -> "DateValue | None":
        """Parse YYYY-MM-DD. Returns None if text is not a valid date."""
        if len(text) != DATE_LENGTH:
            return None

        parts = text.split("-")
        if len(parts) != 3:
            return None

        if not all(part.isdigit() and part.isascii() for part in parts):
            logger.debug(f"conversion error: {text!r}")
            return None

        year, month, day = (int(part) for part in parts)
        try:
            return cls(year, month, day)
        except MalformedDateError as e:
            logger.debug(f"conversion error: {e}")
            return None

    @classmethod
    def from_string(cls, text: str) -> "DateValue":
        """Strict variant of parse()."""
        value = cls.parse(text)
        if value is None:
            raise MalformedDateError(f"Invalid date '{text}', expected YYYY-MM-DD")
        return value

    @classmethod
    def from_date(cls, d: date) -> "DateValue":
        return cls(d.year, d.month, d.day)

    @classmethod
    def today(cls) -> "DateValue":
        """Current date from the system clock."""
        return cls.from_date(date.today())

    def format(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.format()

    def to_ordinal(self) -> int:
        """
        Day number in the proleptic Gregorian calendar.

        Integer-only days-from-civil conversion, so it is exact for any year,
        including years before 1 and after 9999. 1970-01-01 is day 0.
        """
        y = self.year - (1 if self.month <= 2 else 0)
        era = y // 400
        yoe = y - era * 400
        mp = (self.month + 9) % 12
        doy = (153 * mp + 2) // 5 + self.day - 1
        doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
        return era * 146097 + doe - 719468


def days_between(a: DateValue, b: DateValue) -> int:
    """Signed number of days from a to b (positive if b is later)."""
    return b.to_ordinal() - a.to_ordinal()


# Comparisons where either side may be a date that failed to parse.
# Anything compared against None is False.


def date_eq(a: DateValue | None, b: DateValue | None) -> bool:
    if a is None or b is None:
        return False
    return a == b


def date_lt(a: DateValue | None, b: DateValue | None) -> bool:
    if a is None or b is None:
        return False
    return a < b


def date_gt(a: DateValue | None, b: DateValue | None) -> bool:
    if a is None or b is None:
        return False
    return a > b
