"""Reminder persistence interface."""

from typing import Protocol

from journal.core.reminders import ReminderStore


class ReminderRepository(Protocol):
    """Interface for loading and saving the full set of reminders."""

    def load(self) -> ReminderStore:
        """Load every reminder."""
        ...

    def save(self, store: ReminderStore) -> None:
        """Replace the persisted reminders with the contents of store."""
        ...
