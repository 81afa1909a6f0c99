"""File-based reminder storage adapter."""

import json
import logging
from pathlib import Path

from journal.core.reminders import ReminderStore
from journal.errors import StorageError

logger = logging.getLogger(__name__)


class FileReminderStore:
    """
    JSON file holding every reminder.

    Implements ReminderRepository protocol. The whole file is rewritten on
    every save.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> ReminderStore:
        """Load reminders. A file that does not exist yet is an empty store."""
        if not self.path.exists():
            logger.info(f"No reminders at {self.path} yet")
            return ReminderStore()

        try:
            data = json.loads(self.path.read_text())
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(str(self.path), f"could not be read: {e}") from e
        except json.JSONDecodeError as e:
            raise StorageError(str(self.path), f"is not valid JSON: {e}") from e

        store = ReminderStore.from_records(data, source=str(self.path))
        logger.info(f"Loaded {len(store)} reminders from {self.path}")
        return store

    def save(self, store: ReminderStore) -> None:
        """Overwrite the file with the full store."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(store.to_records(), indent=2))
        except OSError as e:
            raise StorageError(str(self.path), f"could not be written: {e}") from e
        logger.info(f"Saved {len(store)} reminders to {self.path}")
