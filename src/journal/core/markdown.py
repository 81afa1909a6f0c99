"""Flatten a markdown document into structural events with source offsets."""

import re
from dataclasses import dataclass
from typing import Iterator

from markdown_it import MarkdownIt
from markdown_it.token import Token
from mdit_py_plugins.tasklists import tasklists_plugin

_NEWLINE = re.compile(r"\r\n?|\n")


@dataclass(frozen=True)
class Span:
    """Character range [start, end) in the source document."""

    start: int
    end: int


@dataclass(frozen=True)
class HeadingStart:
    level: int
    span: Span


@dataclass(frozen=True)
class HeadingEnd:
    level: int
    span: Span


@dataclass(frozen=True)
class Text:
    text: str
    span: Span


@dataclass(frozen=True)
class ListStart:
    span: Span


@dataclass(frozen=True)
class ListEnd:
    span: Span


@dataclass(frozen=True)
class ListItemStart:
    span: Span


@dataclass(frozen=True)
class ListItemEnd:
    span: Span


@dataclass(frozen=True)
class TaskMarker:
    done: bool
    span: Span


MarkdownEvent = HeadingStart | HeadingEnd | Text | ListStart | ListEnd | ListItemStart | ListItemEnd | TaskMarker


def _parser() -> MarkdownIt:
    return MarkdownIt("commonmark").use(tasklists_plugin)


class _Lines:
    """Maps markdown-it line numbers back to offsets in the original text."""

    def __init__(self, source: str):
        self.source = source
        self.starts = [0]
        self.ends = []
        for match in _NEWLINE.finditer(source):
            self.ends.append(match.start())
            self.starts.append(match.end())
        self.ends.append(len(source))

    def span(self, line_map: list[int] | None) -> Span:
        """Span of lines [first, last), not counting trailing blank lines or the final line break."""
        if not line_map:
            return Span(0, 0)
        first, last = line_map
        last = min(last, len(self.starts)) - 1
        while last > first and not self.source[self.starts[last] : self.ends[last]].strip():
            last -= 1
        return Span(self.starts[first], self.ends[last])


def _task_marker(token: Token, span: Span) -> TaskMarker | None:
    """The checkbox the tasklists plugin put in front of an item's first paragraph."""
    if not token.children:
        return None
    first = token.children[0]
    if first.type != "html_inline" or "task-list-item-checkbox" not in first.content:
        return None
    return TaskMarker(done='checked="checked"' in first.content, span=span)


def markdown_events(markdown: str) -> Iterator[MarkdownEvent]:
    """
    Yield the structural events of a markdown document in document order.

    Closing events carry the same span as their opening event. Lists inside
    block quotes are quoted text, so they yield no list or task events.
    """
    lines = _Lines(markdown)
    open_spans: list[Span] = []
    quote_depth = 0

    for token in _parser().parse(markdown):
        if token.type == "blockquote_open":
            quote_depth += 1
            continue
        if token.type == "blockquote_close":
            quote_depth -= 1
            continue
        if quote_depth and token.type.startswith(("bullet_list", "ordered_list", "list_item")):
            continue
        match token.type:
            case "heading_open":
                span = lines.span(token.map)
                open_spans.append(span)
                yield HeadingStart(level=int(token.tag[1:]), span=span)
            case "heading_close":
                yield HeadingEnd(level=int(token.tag[1:]), span=open_spans.pop())
            case "bullet_list_open" | "ordered_list_open":
                span = lines.span(token.map)
                open_spans.append(span)
                yield ListStart(span=span)
            case "bullet_list_close" | "ordered_list_close":
                yield ListEnd(span=open_spans.pop())
            case "list_item_open":
                span = lines.span(token.map)
                open_spans.append(span)
                yield ListItemStart(span=span)
            case "list_item_close":
                yield ListItemEnd(span=open_spans.pop())
            case "inline":
                span = lines.span(token.map)
                marker = None if quote_depth else _task_marker(token, span)
                if marker is not None:
                    yield marker
                for child in token.children or []:
                    if child.type == "text":
                        yield Text(text=child.content, span=span)
