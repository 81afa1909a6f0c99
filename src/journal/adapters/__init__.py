"""Adapters - I/O implementations of ports."""

from .file_journal import FileJournalStore
from .file_reminders import FileReminderStore
from .github_api import GitHubAdapter
from .jira_api import JiraAdapter

__all__ = [
    "FileJournalStore",
    "FileReminderStore",
    "GitHubAdapter",
    "JiraAdapter",
]
