"""Pure date logic - calendar helpers and date/recurrence parsing."""

import re
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum, IntEnum

from journal.errors import DateConstructionError, ParseError


class Weekday(IntEnum):
    """Day of the week, numbered like date.weekday()."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, raw: str) -> "Weekday | None":
        """Full name or 3-letter abbreviation, any case. None if not a weekday."""
        name = raw.strip().lower()
        for day in cls:
            full = day.name.lower()
            if name == full or name == full[:3]:
                return day
        return None


MONTHS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")

_DAY_MONTH_YEAR = re.compile(r"^(\d{1,2})\.([A-Za-z]{3})\.(\d{4})$")
_DAY_MONTH = re.compile(r"^(\d{1,2})\.([A-Za-z]{3})$")
_AMOUNT = re.compile(r"^[0-9]+$")

SPECIFIC_DATE_GRAMMAR = "day.month.year (15.Jan.2022), day.month (12.Feb) or a weekday (Wednesday)"
INTERVAL_GRAMMAR = "a weekday (Wednesday) or <amount>.<unit> with unit days or weeks (2.weeks)"


def next_occurrence(from_date: date, weekday: Weekday) -> date:
    """The first date on or after from_date that falls on weekday."""
    return from_date + timedelta(days=(weekday - from_date.weekday()) % 7)


def day_distance(a: date, b: date) -> int:
    """Signed number of days from b to a."""
    return a.toordinal() - b.toordinal()


def _month_number(token: str) -> int | None:
    try:
        return MONTHS.index(token.lower()) + 1
    except ValueError:
        return None


# ============== Specific dates ==============


@dataclass(frozen=True)
class OnDate:
    """A fully specified calendar date."""

    date: date

    def resolve(self, reference: date) -> date:
        return self.date


@dataclass(frozen=True)
class OnDayMonth:
    """Day and month; the year comes from the reference date."""

    day: int
    month: int

    def resolve(self, reference: date) -> date:
        try:
            return date(reference.year, self.month, self.day)
        except ValueError as e:
            raise DateConstructionError(
                f"{self.day}.{MONTHS[self.month - 1].capitalize()} does not exist in {reference.year}: {e}"
            ) from e


@dataclass(frozen=True)
class Next:
    """The next occurrence of a weekday, counting the reference day itself."""

    weekday: Weekday

    def resolve(self, reference: date) -> date:
        return next_occurrence(reference, self.weekday)


SpecificDate = OnDate | OnDayMonth | Next


def parse_specific_date(raw: str) -> SpecificDate:
    """
    Parse a one-off date expression.

    Accepted forms, tried in order:
        15.Jan.2022  -> OnDate
        12.Feb       -> OnDayMonth
        wednesday    -> Next
    """
    text = raw.strip()

    if match := _DAY_MONTH_YEAR.match(text):
        day, month_token, year = match.groups()
        month = _month_number(month_token)
        if month is not None:
            try:
                return OnDate(date(int(year), month, int(day)))
            except ValueError as e:
                raise ParseError(raw, f"'{raw}' is not a valid date: {e}") from e

    if match := _DAY_MONTH.match(text):
        day, month_token = match.groups()
        month = _month_number(month_token)
        if month is not None:
            if not 1 <= int(day) <= 31:
                raise ParseError(raw, f"'{day}' is not a valid day of the month")
            return OnDayMonth(int(day), month)

    weekday = Weekday.parse(text)
    if weekday is not None:
        return Next(weekday)

    raise ParseError(raw, f"Could not parse '{raw}' as a date. Expected {SPECIFIC_DATE_GRAMMAR}")


# ============== Intervals ==============


class Unit(Enum):
    """Unit of a periodic interval."""

    DAYS = "days"
    WEEKS = "weeks"

    @property
    def length_in_days(self) -> int:
        return 7 if self is Unit.WEEKS else 1


@dataclass(frozen=True)
class WeekdayInterval:
    """Every occurrence of a weekday."""

    weekday: Weekday

    def describe(self) -> str:
        return f"every {self.weekday.label}"


@dataclass(frozen=True)
class Periodic:
    """Every `amount` days or weeks, counted from the reminder's start date."""

    amount: int
    unit: Unit

    @property
    def period_in_days(self) -> int:
        return self.amount * self.unit.length_in_days

    def describe(self) -> str:
        singular = self.unit.value[:-1]
        if self.amount == 1:
            return f"every {singular}"
        return f"every {self.amount} {self.unit.value}"


Interval = WeekdayInterval | Periodic


def parse_interval(raw: str) -> Interval:
    """
    Parse a recurrence expression.

    Accepted forms: a weekday name (`wednesday`, `Wed`) or `<amount>.<unit>`
    where amount is a positive integer and unit is `days` or `weeks`.
    """
    text = raw.strip()

    weekday = Weekday.parse(text)
    if weekday is not None:
        return WeekdayInterval(weekday)

    amount_token, sep, unit_token = text.partition(".")
    if not sep:
        raise ParseError(raw, f"Could not parse '{raw}' as an interval. Expected {INTERVAL_GRAMMAR}")

    if not _AMOUNT.match(amount_token) or int(amount_token) == 0:
        raise ParseError(amount_token, f"'{amount_token}' is not a valid amount, it must be a positive number")

    try:
        unit = Unit(unit_token)
    except ValueError:
        raise ParseError(unit_token, f"'{unit_token}' is not a known unit, use 'days' or 'weeks'") from None

    return Periodic(int(amount_token), unit)
