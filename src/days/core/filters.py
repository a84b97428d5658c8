"""List-time filter predicates and the option parser that selects one.

Each predicate is a pure function of (record, today, its own parameters).
Date parameters that fail to parse are stored as None and compared with the
guarded helpers, so they never match rather than raising.
"""

from dataclasses import dataclass

from .dates import DateValue, date_eq, date_gt, date_lt, days_between
from .errors import InvalidOptionsError, MissingParameterError
from .events import EventRecord


@dataclass(frozen=True)
class KeepAll:
    """No filter option given."""

    def keep(self, record: EventRecord, today: DateValue) -> bool:
        return True


@dataclass(frozen=True)
class IsToday:
    def keep(self, record: EventRecord, today: DateValue) -> bool:
        return days_between(today, record.timestamp) == 0


@dataclass(frozen=True)
class OnDate:
    date: DateValue | None

    def keep(self, record: EventRecord, today: DateValue) -> bool:
        return date_eq(record.timestamp, self.date)


@dataclass(frozen=True)
class DateBefore:
    """Strictly before the cutoff."""

    cutoff: DateValue | None

    def keep(self, record: EventRecord, today: DateValue) -> bool:
        return date_lt(record.timestamp, self.cutoff)


@dataclass(frozen=True)
class DateAfter:
    """On or after the cutoff."""

    cutoff: DateValue | None

    def keep(self, record: EventRecord, today: DateValue) -> bool:
        return not date_gt(self.cutoff, record.timestamp)


@dataclass(frozen=True)
class DateRange:
    """after <= timestamp < before."""

    before: DateValue | None
    after: DateValue | None

    def keep(self, record: EventRecord, today: DateValue) -> bool:
        if not date_lt(record.timestamp, self.before):
            return False
        return not date_gt(self.after, record.timestamp)


@dataclass(frozen=True)
class CategoryIs:
    categories: frozenset[str]
    exclude: bool = False

    @classmethod
    def from_list(cls, value: str, exclude: bool = False) -> "CategoryIs":
        """
        Build from a comma-separated list. A value without commas is one
        category. A trailing comma does not add the empty category.
        """
        if "," not in value:
            return cls(frozenset([value]), exclude)
        return cls(frozenset(value.removesuffix(",").split(",")), exclude)

    def keep(self, record: EventRecord, today: DateValue) -> bool:
        found = record.category in self.categories
        return found != self.exclude


@dataclass(frozen=True)
class NoCategory:
    def keep(self, record: EventRecord, today: DateValue) -> bool:
        return record.category == ""


@dataclass(frozen=True)
class MissingDate:
    """A date option was given without a value. Evaluating it stops the listing."""

    option: str

    def keep(self, record: EventRecord, today: DateValue) -> bool:
        raise MissingParameterError("Missing date.")


FilterPredicate = (
    KeepAll
    | IsToday
    | OnDate
    | DateBefore
    | DateAfter
    | DateRange
    | CategoryIs
    | NoCategory
    | MissingDate
)


@dataclass(frozen=True)
class ListOptions:
    """
    Options accepted by `days list`.

    Date options hold the raw text the user typed. None means the option was
    not given; an empty string means it was given without a value.
    """

    today: bool = False
    before_date: str | None = None
    after_date: str | None = None
    on_date: str | None = None
    categories: str | None = None
    exclude: bool = False
    no_category: bool = False

    def given(self) -> list[str]:
        """Names of the primary options that were supplied."""
        names = []
        if self.today:
            names.append("--today")
        if self.before_date is not None:
            names.append("--before-date")
        if self.after_date is not None:
            names.append("--after-date")
        if self.on_date is not None:
            names.append("--date")
        if self.categories is not None:
            names.append("--categories")
        if self.no_category:
            names.append("--no-category")
        return names


def build_predicate(options: ListOptions) -> FilterPredicate:
    """
    Select the single predicate for a list invocation.

    Only one primary option may be given, except --before-date together with
    --after-date, which forms a range.
    """
    given = options.given()

    if options.exclude and options.categories is None:
        raise InvalidOptionsError("--exclude requires --categories")

    if not given:
        return KeepAll()

    if given == ["--before-date", "--after-date"]:
        if not options.before_date:
            return MissingDate("--before-date")
        if not options.after_date:
            return MissingDate("--after-date")
        return DateRange(
            before=DateValue.parse(options.before_date),
            after=DateValue.parse(options.after_date),
        )

    if len(given) > 1:
        raise InvalidOptionsError(f"Options cannot be combined: {', '.join(given)}")

    if options.today:
        return IsToday()
    if options.before_date is not None:
        if not options.before_date:
            return MissingDate("--before-date")
        return DateBefore(DateValue.parse(options.before_date))
    if options.after_date is not None:
        if not options.after_date:
            return MissingDate("--after-date")
        return DateAfter(DateValue.parse(options.after_date))
    if options.on_date is not None:
        if not options.on_date:
            return MissingDate("--date")
        return OnDate(DateValue.parse(options.on_date))
    if options.categories is not None:
        return CategoryIs.from_list(options.categories, options.exclude)
    return NoCategory()
