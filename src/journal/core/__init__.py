"""Functional core - pure business logic with no I/O."""

from .dates import (
    Interval,
    Next,
    OnDate,
    OnDayMonth,
    Periodic,
    SpecificDate,
    Unit,
    Weekday,
    WeekdayInterval,
    day_distance,
    next_occurrence,
    parse_interval,
    parse_specific_date,
)
from .reminders import Concrete, Recurring, Reminder, ReminderRow, ReminderStore
from .todos import Phase, TodoExtractor, collect_open_todos, transition
from .entry import entry_filename, normalize_filename, render_entry
from .pull_requests import PrSelector, PullRequest
from .issues import Issue

__all__ = [
    # Dates
    "Interval",
    "Next",
    "OnDate",
    "OnDayMonth",
    "Periodic",
    "SpecificDate",
    "Unit",
    "Weekday",
    "WeekdayInterval",
    "day_distance",
    "next_occurrence",
    "parse_interval",
    "parse_specific_date",
    # Reminders
    "Concrete",
    "Recurring",
    "Reminder",
    "ReminderRow",
    "ReminderStore",
    # Todos
    "Phase",
    "TodoExtractor",
    "collect_open_todos",
    "transition",
    # Entry
    "entry_filename",
    "normalize_filename",
    "render_entry",
    # Trackers
    "PrSelector",
    "PullRequest",
    "Issue",
]
