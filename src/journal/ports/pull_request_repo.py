"""Pull request repository interface."""

from typing import Protocol

from journal.core.pull_requests import PrSelector, PullRequest


class PullRequestRepository(Protocol):
    """Interface for fetching open pull requests from any code host."""

    def fetch_open(self, selector: PrSelector) -> list[PullRequest]:
        """Fetch all open pull requests matching a selector."""
        ...
