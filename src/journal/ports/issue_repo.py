"""Issue repository interface."""

from typing import Protocol

from journal.core.issues import Issue


class IssueRepository(Protocol):
    """Interface for fetching open issues from any tracker."""

    def fetch_matching(self, query: dict[str, str]) -> list[Issue]:
        """Fetch issues matching a field -> value query."""
        ...
