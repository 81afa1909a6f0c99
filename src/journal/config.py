"""Configuration management for journal."""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .core.entry import (
    DEFAULT_NOTES_TEMPLATE,
    DEFAULT_PRS_TEMPLATE,
    DEFAULT_REMINDERS_TEMPLATE,
    DEFAULT_TASKS_TEMPLATE,
    DEFAULT_TODOS_TEMPLATE,
)
from .core.pull_requests import PrSelector
from .errors import ConfigError

logger = logging.getLogger(__name__)

JOURNAL_HOME = Path(os.environ.get("JOURNAL_HOME", Path.home() / "journal"))
CONFIG_FILE = JOURNAL_HOME / "config" / "journal.conf"
TEMPLATES_DIR = JOURNAL_HOME / "templates"
ENV_PREFIX = "JOURNAL_"

DEFAULT_SECTIONS = ["notes", "todos", "reminders", "prs", "tasks"]


@dataclass
class NotesConfig:
    """Static notes section."""

    template: str = DEFAULT_NOTES_TEMPLATE


@dataclass
class TodoConfig:
    """Open TODOs carried over from the latest entry."""

    template: str = DEFAULT_TODOS_TEMPLATE


@dataclass
class ReminderConfig:
    """Reminders due today."""

    file: Path = JOURNAL_HOME / "data" / "reminders.json"
    template: str = DEFAULT_REMINDERS_TEMPLATE


@dataclass
class PullRequestConfig:
    """Open pull requests on GitHub."""

    token: str
    select: list[PrSelector] = field(default_factory=list)
    template: str = DEFAULT_PRS_TEMPLATE


@dataclass
class JiraConfig:
    """Open Jira issues."""

    base_url: str
    user: str
    token: str
    query: dict[str, str] = field(default_factory=dict)
    template: str = DEFAULT_TASKS_TEMPLATE


SectionConfig = NotesConfig | TodoConfig | ReminderConfig | PullRequestConfig | JiraConfig


@dataclass
class Config:
    """Journal configuration."""

    dir: Path = JOURNAL_HOME / "entries"
    sections: list[str] = field(default_factory=lambda: list(DEFAULT_SECTIONS))
    notes: NotesConfig | None = field(default_factory=NotesConfig)
    todos: TodoConfig | None = field(default_factory=TodoConfig)
    reminders: ReminderConfig | None = None
    pull_requests: PullRequestConfig | None = None
    jira: JiraConfig | None = None

    def section_config(self, name: str) -> SectionConfig | None:
        match name:
            case "notes":
                return self.notes
            case "todos":
                return self.todos
            case "reminders":
                return self.reminders
            case "prs":
                return self.pull_requests
            case "tasks":
                return self.jira
            case _:
                logger.warning(f"Unknown section '{name}' in configuration")
                return None

    def enabled_sections(self) -> list[tuple[str, SectionConfig]]:
        """Configured sections, in order, that have their settings present."""
        enabled = []
        for name in self.sections:
            section = self.section_config(name)
            if section is not None:
                enabled.append((name, section))
        return enabled

    def to_lines(self) -> list[str]:
        """Effective configuration as conf lines, secrets masked."""
        lines = [
            f"dir = {self.dir}",
            f"sections = {','.join(self.sections)}",
            f"notes_enabled = {str(self.notes is not None).lower()}",
            f"todos_enabled = {str(self.todos is not None).lower()}",
            f"reminders_enabled = {str(self.reminders is not None).lower()}",
        ]
        if self.reminders:
            lines.append(f"reminders_file = {self.reminders.file}")
        if self.pull_requests:
            lines.append("github_token = ***")
            repos = [
                {"repo": s.repo, "authors": sorted(s.authors), "labels": sorted(s.labels)}
                for s in self.pull_requests.select
            ]
            lines.append(f"github_repos = {json.dumps(repos)}")
        if self.jira:
            lines.append(f"jira_base_url = {self.jira.base_url}")
            lines.append(f"jira_user = {self.jira.user}")
            lines.append("jira_token = ***")
            lines.append(f"jira_query = {json.dumps(self.jira.query)}")
        return lines


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_repos(value: str) -> list[PrSelector]:
    # JSON format: [{"repo": "owner/name", "authors": [...], "labels": [...]}]
    try:
        data = json.loads(value)
        selectors = [
            PrSelector(
                repo=item["repo"],
                authors=set(item.get("authors", [])),
                labels=set(item.get("labels", [])),
            )
            for item in data
        ]
    except (json.JSONDecodeError, KeyError, TypeError) as e:
        raise ConfigError(f"Failed to parse GITHUB_REPOS: {e}") from e

    for selector in selectors:
        if len(selector.repo.split("/")) != 2:
            raise ConfigError(f'GITHUB_REPOS: "{selector.repo}" did not have exactly 2 components')
    return selectors


def _parse_query(value: str) -> dict[str, str]:
    try:
        data = json.loads(value)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Failed to parse JIRA_QUERY: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError("JIRA_QUERY must be a JSON object")
    return {str(k): str(v) for k, v in data.items()}


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def read_config_values(path: Path = CONFIG_FILE) -> dict[str, str]:
    """Raw key -> value pairs from the conf file, overridden by JOURNAL_<KEY> env vars."""
    values: dict[str, str] = {}

    if path.exists():
        for line in path.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            values[key.strip().lower()] = _unquote(value.strip())

    for env_key, value in os.environ.items():
        if env_key.startswith(ENV_PREFIX) and env_key != "JOURNAL_HOME":
            values[env_key[len(ENV_PREFIX) :].lower()] = value

    return values


def _template(name: str, default: str, templates_dir: Path) -> str:
    """User template from the templates directory, or the built-in default."""
    override = templates_dir / f"{name}.md"
    if override.exists():
        logger.info(f"Using template {override}")
        return override.read_text()
    return default


def load_config(path: Path = CONFIG_FILE, templates_dir: Path = TEMPLATES_DIR) -> Config:
    """Load configuration from journal.conf and the environment."""
    values = read_config_values(path)
    config = Config()

    if "dir" in values:
        config.dir = Path(values["dir"]).expanduser()
    if "sections" in values:
        config.sections = [s.strip() for s in values["sections"].split(",") if s.strip()]

    if _parse_bool(values.get("notes_enabled", "true")):
        config.notes = NotesConfig(template=_template("notes", DEFAULT_NOTES_TEMPLATE, templates_dir))
    else:
        config.notes = None

    if _parse_bool(values.get("todos_enabled", "true")):
        config.todos = TodoConfig(template=_template("todos", DEFAULT_TODOS_TEMPLATE, templates_dir))
    else:
        config.todos = None

    if _parse_bool(values.get("reminders_enabled", "false")):
        reminders = ReminderConfig(template=_template("reminders", DEFAULT_REMINDERS_TEMPLATE, templates_dir))
        if values.get("reminders_file"):
            reminders.file = Path(values["reminders_file"]).expanduser()
        config.reminders = reminders

    if values.get("github_token"):
        config.pull_requests = PullRequestConfig(
            token=values["github_token"],
            select=_parse_repos(values.get("github_repos", "[]")),
            template=_template("prs", DEFAULT_PRS_TEMPLATE, templates_dir),
        )

    if values.get("jira_base_url"):
        config.jira = JiraConfig(
            base_url=values["jira_base_url"],
            user=values.get("jira_user", ""),
            token=values.get("jira_token", ""),
            query=_parse_query(values.get("jira_query", "{}")),
            template=_template("tasks", DEFAULT_TASKS_TEMPLATE, templates_dir),
        )

    return config
