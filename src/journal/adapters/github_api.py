"""GitHub API adapter - HTTP client for open pull requests."""

import logging

import requests

from journal.core.pull_requests import PrSelector, PullRequest, filter_pull_requests

logger = logging.getLogger(__name__)

API_BASE = "https://api.github.com"
PAGE_SIZE = 50


class GitHubAdapter:
    """
    GitHub REST adapter.

    Implements PullRequestRepository protocol. Follows pagination links and
    applies the selector's local filters. No business logic beyond that.
    """

    def __init__(self, token: str, api_base: str = API_BASE):
        self.api_base = api_base.rstrip("/")
        self._session = requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"token {token}",
                "Accept": "application/vnd.github+json",
            }
        )

    def _get_pages(self, url: str, params: dict | None = None) -> list[dict]:
        """Collect every item across all pages of a list endpoint."""
        items = []
        while url:
            resp = self._session.get(url, params=params)
            resp.raise_for_status()
            items.extend(resp.json())
            url = resp.links.get("next", {}).get("url")
            # The next link already carries the query string
            params = None
        return items

    def fetch_open(self, selector: PrSelector) -> list[PullRequest]:
        """Fetch all open pull requests of the selector's repo that pass its filters."""
        logger.info(f"Getting PRs for org={selector.owner} repo={selector.name}")
        raw = self._get_pages(
            f"{self.api_base}/repos/{selector.owner}/{selector.name}/pulls",
            params={"state": "open", "per_page": PAGE_SIZE},
        )
        prs = [PullRequest.from_api(item, selector.repo) for item in raw]
        return filter_pull_requests(prs, selector)
