"""Journal storage interface."""

from pathlib import Path
from typing import Protocol


class JournalStore(Protocol):
    """Interface for reading the previous entry and writing new ones."""

    def latest_entry(self) -> str | None:
        """Markdown of the most recent entry. Returns None if there is none."""
        ...

    def add_entry(self, name: str, content: str) -> Path:
        """Write a new entry and return where it was stored."""
        ...
