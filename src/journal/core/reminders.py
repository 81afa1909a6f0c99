"""Pure reminder logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date
from typing import Iterator

from journal.errors import NotFoundError, StorageError

from .dates import Interval, Periodic, Unit, Weekday, WeekdayInterval, day_distance


@dataclass(frozen=True)
class Concrete:
    """A reminder that fires once, on a specific date."""

    date: date
    text: str

    def is_due(self, on: date) -> bool:
        return on == self.date

    def describe(self) -> str:
        return self.date.isoformat()


@dataclass(frozen=True)
class Recurring:
    """A reminder that fires on a schedule anchored at start_date."""

    start_date: date
    interval: Interval
    text: str

    def is_due(self, on: date) -> bool:
        match self.interval:
            case WeekdayInterval(weekday=weekday):
                return on.weekday() == weekday
            case Periodic() as periodic:
                # Floor modulo: dates before the anchor count too when evenly divisible.
                return day_distance(on, self.start_date) % periodic.period_in_days == 0

    def describe(self) -> str:
        return self.interval.describe()


Reminder = Concrete | Recurring


@dataclass(frozen=True)
class ReminderRow:
    """One line of a reminder listing."""

    position: int
    when: str
    text: str


class ReminderStore:
    """
    Ordered collection of reminders.

    Order is insertion order. The 1-based position in that order is the
    number users see and delete by; it is recomputed on every listing.
    """

    def __init__(self, reminders: list[Reminder] | None = None):
        self._reminders: list[Reminder] = list(reminders or [])

    def __len__(self) -> int:
        return len(self._reminders)

    def __iter__(self) -> Iterator[Reminder]:
        return iter(self._reminders)

    def add_on_date(self, on: date, text: str) -> Concrete:
        reminder = Concrete(date=on, text=text)
        self._reminders.append(reminder)
        return reminder

    def add_recurring(self, anchor: date, interval: Interval, text: str) -> Recurring:
        reminder = Recurring(start_date=anchor, interval=interval, text=text)
        self._reminders.append(reminder)
        return reminder

    def due_on(self, on: date) -> list[str]:
        """Texts of all reminders due on a date, in store order."""
        return [r.text for r in self._reminders if r.is_due(on)]

    def listing(self) -> list[ReminderRow]:
        return [
            ReminderRow(position=i, when=r.describe(), text=r.text)
            for i, r in enumerate(self._reminders, start=1)
        ]

    def delete(self, position: int) -> Reminder:
        """Remove the reminder shown as `position` (1-based)."""
        if not 1 <= position <= len(self._reminders):
            raise NotFoundError(position)
        return self._reminders.pop(position - 1)

    # ============== Persisted shape ==============

    def to_records(self) -> list[dict]:
        return [_reminder_to_record(r) for r in self._reminders]

    @classmethod
    def from_records(cls, records: object, source: str) -> "ReminderStore":
        """Build a store from its persisted shape. `source` names where it came from."""
        if not isinstance(records, list):
            raise StorageError(source, "expected a list of reminders")

        reminders = []
        for index, record in enumerate(records, start=1):
            try:
                reminders.append(_reminder_from_record(record))
            except (KeyError, TypeError, ValueError) as e:
                raise StorageError(source, f"reminder {index} is malformed: {e!r}") from e
        return cls(reminders)


def _interval_to_record(interval: Interval) -> dict:
    match interval:
        case WeekdayInterval(weekday=weekday):
            return {"kind": "weekday", "value": weekday.label}
        case Periodic(amount=amount, unit=unit):
            return {"kind": "periodic", "amount": amount, "unit": unit.value}


def _string(record: dict, key: str) -> str:
    value = record[key]
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {value!r}")
    return value


def _interval_from_record(record: dict) -> Interval:
    match record["kind"]:
        case "weekday":
            weekday = Weekday.parse(_string(record, "value"))
            if weekday is None:
                raise ValueError(f"unknown weekday {record['value']!r}")
            return WeekdayInterval(weekday)
        case "periodic":
            amount = record["amount"]
            if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
                raise ValueError(f"invalid amount {amount!r}")
            return Periodic(amount, Unit(record["unit"]))
        case other:
            raise ValueError(f"unknown interval kind {other!r}")


def _reminder_to_record(reminder: Reminder) -> dict:
    match reminder:
        case Concrete():
            return {"kind": "concrete", "date": reminder.date.isoformat(), "text": reminder.text}
        case Recurring():
            return {
                "kind": "recurring",
                "start_date": reminder.start_date.isoformat(),
                "interval": _interval_to_record(reminder.interval),
                "text": reminder.text,
            }


def _reminder_from_record(record: dict) -> Reminder:
    match record["kind"]:
        case "concrete":
            return Concrete(date=date.fromisoformat(record["date"]), text=_string(record, "text"))
        case "recurring":
            return Recurring(
                start_date=date.fromisoformat(record["start_date"]),
                interval=_interval_from_record(record["interval"]),
                text=_string(record, "text"),
            )
        case other:
            raise ValueError(f"unknown reminder kind {other!r}")
