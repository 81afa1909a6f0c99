"""Pure entry assembly logic - no I/O dependencies."""

import re
from datetime import date

from .issues import Issue
from .pull_requests import PullRequest

DEFAULT_NOTES_TEMPLATE = """## Notes

> This is where your notes will go!
"""

DEFAULT_TODOS_TEMPLATE = """## TODOs

{{TODOS}}
"""

DEFAULT_REMINDERS_TEMPLATE = """## Your reminders for today:

{{REMINDERS}}
"""

DEFAULT_PRS_TEMPLATE = """## Pull Requests:

{{PRS}}
"""

DEFAULT_TASKS_TEMPLATE = """## Open tasks

{{TASKS}}
"""

_FILENAME_NOISE = re.compile(r"[()\[\]?']")


def normalize_filename(title: str) -> str:
    """Lowercase, dash-separated title safe to use in a filename."""
    return _FILENAME_NOISE.sub("", title.lower().replace(" ", "-"))


def entry_filename(title: str, today: date) -> str:
    return f"{today.isoformat()}-{normalize_filename(title)}.md"


def fill_template(template: str, **values: str) -> str:
    """Replace each {{KEY}} placeholder with its value."""
    for key, value in values.items():
        template = template.replace("{{" + key + "}}", value)
    return template


def format_todos(todos: list[str]) -> str:
    return "\n".join(todo.strip("\n") for todo in todos)


def format_reminders(reminders: list[str]) -> str:
    return "\n".join(f"* [ ] {text}" for text in reminders)


def format_pull_request_line(pr: PullRequest) -> str:
    return f"* [ ] `{pr.title}` on [{pr.repo}]({pr.url}) by {pr.author}"


def format_issue_line(issue: Issue) -> str:
    return f"* [ ] {issue.summary} [here]({issue.href})"


def render_entry(title: str, today: date, sections: dict[str, str], order: list[str]) -> str:
    """
    Assemble the final document.

    Sections are placed in `order`; names without a rendered section are skipped.
    """
    parts = [f"# {title} on {today.isoformat()}"]
    parts.extend(sections[name].strip() for name in order if name in sections)
    return "\n\n".join(parts) + "\n"
