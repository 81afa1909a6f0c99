"""Jira API adapter - HTTP client for open issues."""

import logging

import requests

from journal.core.issues import Issue, build_jql

logger = logging.getLogger(__name__)

MAX_RESULTS = 50


class JiraAdapter:
    """
    Jira search adapter.

    Implements IssueRepository protocol. `base_url` is the full search
    endpoint, e.g. https://example.atlassian.net/rest/api/2/search.
    """

    def __init__(self, base_url: str, user: str, token: str):
        self.base_url = base_url
        self._session = requests.Session()
        self._session.auth = (user, token)

    def fetch_matching(self, query: dict[str, str]) -> list[Issue]:
        """Fetch issues matching every field in query."""
        jql = build_jql(query)
        logger.info(f"Searching Jira with jql={jql}")
        resp = self._session.get(self.base_url, params={"jql": jql, "maxResults": MAX_RESULTS})
        resp.raise_for_status()

        issues = []
        for item in resp.json().get("issues", []):
            issue = Issue.from_api(item)
            if issue is not None:
                issues.append(issue)
            else:
                logger.warning(f"Skipping issue without summary or link: {item.get('key', '?')}")
        return issues
