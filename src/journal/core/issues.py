"""Pure issue tracker domain logic - no I/O dependencies."""

from dataclasses import dataclass


@dataclass
class Issue:
    """An open issue from the tracker."""

    summary: str
    href: str

    @classmethod
    def from_api(cls, data: dict) -> "Issue | None":
        """Create Issue from a Jira search result. None if summary or link is missing."""
        summary = (data.get("fields") or {}).get("summary")
        href = data.get("self")
        if not isinstance(summary, str) or not isinstance(href, str):
            return None
        return cls(summary=summary, href=href)


def build_jql(query: dict[str, str]) -> str:
    """Turn {"project": "EOPS"} into project="EOPS", joined with 'and'."""
    return " and ".join(f'{key}="{value}"' for key, value in query.items())
