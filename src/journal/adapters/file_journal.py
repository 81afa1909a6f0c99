"""File-based journal storage adapter."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileJournalStore:
    """
    File-based journal storage.

    Implements JournalStore protocol. Each entry is a markdown file whose name
    starts with its date, so the lexicographically last file is the latest.
    """

    def __init__(self, journal_dir: Path | str):
        self.journal_dir = Path(journal_dir).expanduser()

    def _entries(self) -> list[Path]:
        if not self.journal_dir.exists():
            return []
        return sorted(p for p in self.journal_dir.iterdir() if p.is_file() and p.suffix == ".md")

    def latest_entry(self) -> str | None:
        """Read the most recent entry. Returns None if the journal is empty."""
        entries = self._entries()
        if not entries:
            logger.info(f"No journal entries found in {self.journal_dir}")
            return None

        latest = entries[-1]
        logger.info(f"Latest entry found at {latest}")
        return latest.read_text()

    def add_entry(self, name: str, content: str) -> Path:
        """Write/overwrite an entry and return its path."""
        self.journal_dir.mkdir(parents=True, exist_ok=True)
        path = self.journal_dir / name
        path.write_text(content)
        logger.info(f"Wrote entry to {path}")
        return path
