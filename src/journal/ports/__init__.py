"""Ports - interfaces/protocols for external dependencies."""

from .journal_store import JournalStore
from .reminder_repo import ReminderRepository
from .pull_request_repo import PullRequestRepository
from .issue_repo import IssueRepository

__all__ = [
    "JournalStore",
    "ReminderRepository",
    "PullRequestRepository",
    "IssueRepository",
]
