"""Shared workflow layer between the CLI commands.

compile_entry renders every enabled section and assembles the new entry;
new_entry additionally stores it in the journal directory.
"""

import logging
from datetime import date
from pathlib import Path

from .adapters.file_journal import FileJournalStore
from .adapters.file_reminders import FileReminderStore
from .adapters.github_api import GitHubAdapter
from .adapters.jira_api import JiraAdapter
from .config import (
    Config,
    JiraConfig,
    NotesConfig,
    PullRequestConfig,
    ReminderConfig,
    SectionConfig,
    TodoConfig,
)
from .core.entry import (
    entry_filename,
    fill_template,
    format_issue_line,
    format_pull_request_line,
    format_reminders,
    format_todos,
    render_entry,
)
from .core.todos import TodoExtractor
from .ports import IssueRepository, JournalStore, PullRequestRepository, ReminderRepository

logger = logging.getLogger(__name__)


def get_journal(config: Config) -> FileJournalStore:
    """Resolve journal directory from config."""
    return FileJournalStore(config.dir)


def get_reminders(config: Config) -> FileReminderStore | None:
    """Reminder file from config, or None when reminders are not configured."""
    if config.reminders is None:
        return None
    return FileReminderStore(config.reminders.file)


# ============== Sections ==============


def render_todos(section: TodoConfig, journal: JournalStore) -> str:
    latest = journal.latest_entry()
    todos = TodoExtractor().process(latest) if latest is not None else []
    logger.info(f"Carrying over {len(todos)} open TODOs")
    return fill_template(section.template, TODOS=format_todos(todos))


def render_reminders(section: ReminderConfig, repo: ReminderRepository, today: date) -> str:
    due = repo.load().due_on(today)
    return fill_template(section.template, REMINDERS=format_reminders(due))


def render_pull_requests(section: PullRequestConfig, repo: PullRequestRepository) -> str:
    prs = []
    for selector in section.select:
        prs.extend(repo.fetch_open(selector))
    lines = "\n".join(format_pull_request_line(pr) for pr in prs)
    return fill_template(section.template, PRS=lines)


def render_tasks(section: JiraConfig, repo: IssueRepository) -> str:
    issues = repo.fetch_matching(section.query)
    lines = "\n".join(format_issue_line(issue) for issue in issues)
    return fill_template(section.template, TASKS=lines)


def render_section(section: SectionConfig, journal: JournalStore, today: date) -> str:
    """Render one section. Errors propagate to the caller."""
    match section:
        case NotesConfig():
            return section.template
        case TodoConfig():
            return render_todos(section, journal)
        case ReminderConfig():
            return render_reminders(section, FileReminderStore(section.file), today)
        case PullRequestConfig():
            return render_pull_requests(section, GitHubAdapter(section.token))
        case JiraConfig():
            return render_tasks(section, JiraAdapter(section.base_url, section.user, section.token))
    raise TypeError(f"Unknown section type: {type(section).__name__}")


def build_sections(config: Config, journal: JournalStore, today: date) -> dict[str, str]:
    """Render every enabled section, keyed by section name."""
    sections = {}
    for name, section in config.enabled_sections():
        logger.debug(f"Rendering section '{name}'")
        sections[name] = render_section(section, journal, today)
    return sections


def compile_entry(config: Config, title: str, today: date | None = None) -> str:
    """Assemble the markdown of a new entry."""
    today = today or date.today()
    journal = get_journal(config)
    sections = build_sections(config, journal, today)
    return render_entry(title, today, sections, config.sections)


def new_entry(config: Config, title: str, today: date | None = None) -> Path:
    """Compile a new entry and store it in the journal. Returns its path."""
    today = today or date.today()
    content = compile_entry(config, title, today)
    return get_journal(config).add_entry(entry_filename(title, today), content)
