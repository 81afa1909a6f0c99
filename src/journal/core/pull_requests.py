"""Pure pull request domain logic - no I/O dependencies."""

from dataclasses import dataclass, field


@dataclass
class PullRequest:
    """An open pull request."""

    title: str
    repo: str
    url: str
    author: str
    labels: set[str] = field(default_factory=set)

    @classmethod
    def from_api(cls, data: dict, repo: str = "") -> "PullRequest":
        """Create PullRequest from a GitHub API response item."""
        base_repo = (data.get("base") or {}).get("repo") or {}
        return cls(
            title=data["title"],
            repo=repo or base_repo.get("full_name", ""),
            url=data.get("html_url", ""),
            author=(data.get("user") or {}).get("login", ""),
            labels={label["name"] for label in data.get("labels", [])},
        )


@dataclass
class PrSelector:
    """Which pull requests of a repository to show."""

    repo: str
    authors: set[str] = field(default_factory=set)
    labels: set[str] = field(default_factory=set)

    @property
    def owner(self) -> str:
        return self.repo.split("/")[0]

    @property
    def name(self) -> str:
        return self.repo.split("/")[1]

    def matches(self, pr: PullRequest) -> bool:
        """
        Empty filters match everything. Authors match if any is the PR author;
        labels match if the PR carries at least one of them.
        """
        if self.authors and pr.author not in self.authors:
            return False
        if self.labels and not (self.labels & pr.labels):
            return False
        return True


def filter_pull_requests(prs: list[PullRequest], selector: PrSelector) -> list[PullRequest]:
    return [pr for pr in prs if selector.matches(pr)]
