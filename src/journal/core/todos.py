"""Carry open TODOs forward from the previous journal entry.

The extractor is a finite-state automaton over markdown events. It looks for
the level-2 "TODOs" heading, then collects every open top-level checklist item
(with everything nested under it) until the next heading starts.

Items checked off at the top level are dropped together with their children;
nested items are never carried on their own.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable

from .markdown import (
    HeadingEnd,
    HeadingStart,
    ListItemEnd,
    ListItemStart,
    MarkdownEvent,
    Span,
    TaskMarker,
    Text,
    markdown_events,
)

logger = logging.getLogger(__name__)

TODO_HEADING = "TODOs"
TODO_HEADING_LEVEL = 2


class Phase(Enum):
    SEARCHING = "searching"  # Looking for the TODOs heading
    COLLECTING = "collecting"  # Inside the TODOs section
    FINISHED = "finished"  # A later heading ended the section


class HeadingMatch(Enum):
    NONE = "none"
    AWAITING_TITLE = "awaiting_title"
    TITLE_CONFIRMED = "title_confirmed"


@dataclass(frozen=True)
class ExtractorState:
    phase: Phase = Phase.SEARCHING
    heading: HeadingMatch = HeadingMatch.NONE
    depth: int = 0
    pending_start: int | None = None
    capturing: bool = False


def _search(state: ExtractorState, event: MarkdownEvent) -> ExtractorState:
    match event:
        case HeadingStart(level=level) if level == TODO_HEADING_LEVEL:
            return replace(state, heading=HeadingMatch.AWAITING_TITLE)
        case Text(text=text) if state.heading is HeadingMatch.AWAITING_TITLE:
            if text == TODO_HEADING:
                return replace(state, heading=HeadingMatch.TITLE_CONFIRMED)
            return replace(state, heading=HeadingMatch.NONE)
        case HeadingEnd(level=level) if level == TODO_HEADING_LEVEL and state.heading is HeadingMatch.TITLE_CONFIRMED:
            return replace(state, phase=Phase.COLLECTING, heading=HeadingMatch.NONE)
    return state


def _collect(state: ExtractorState, event: MarkdownEvent) -> tuple[ExtractorState, Span | None]:
    match event:
        case HeadingStart():
            return replace(state, phase=Phase.FINISHED), None
        case ListItemStart(span=span) if state.depth == 0:
            return replace(state, depth=1, pending_start=span.start, capturing=False), None
        case ListItemStart():
            return replace(state, depth=state.depth + 1), None
        case ListItemEnd(span=span):
            depth = state.depth - 1
            if depth > 0:
                return replace(state, depth=depth), None
            emitted = None
            if state.capturing and state.pending_start is not None:
                emitted = Span(state.pending_start, span.end)
            return replace(state, depth=0, pending_start=None, capturing=False), emitted
        case TaskMarker(done=done) if state.pending_start is not None and state.depth == 1 and not state.capturing:
            if done:
                return replace(state, pending_start=None), None
            return replace(state, capturing=True), None
    return state, None


def transition(state: ExtractorState, event: MarkdownEvent) -> tuple[ExtractorState, Span | None]:
    """
    Advance the automaton by one event.

    Returns the next state and, when a top-level item closes while being
    captured, the span of that item.
    """
    match state.phase:
        case Phase.SEARCHING:
            return _search(state, event), None
        case Phase.COLLECTING:
            return _collect(state, event)
        case Phase.FINISHED:
            return state, None


def collect_open_todos(events: Iterable[MarkdownEvent]) -> tuple[ExtractorState, list[Span]]:
    """Run the automaton over an event stream. Stops at the first FINISHED state."""
    state = ExtractorState()
    spans = []
    for event in events:
        previous = state.phase
        state, emitted = transition(state, event)
        if state.phase is not previous:
            logger.debug(f"TODO extraction: {previous.value} -> {state.phase.value}")
        if emitted is not None:
            logger.debug(f"Carrying forward open TODO at {emitted.start}-{emitted.end}")
            spans.append(emitted)
        if state.phase is Phase.FINISHED:
            break

    if state.phase is Phase.SEARCHING:
        logger.debug(f"No '{TODO_HEADING}' section found")
        state = replace(state, phase=Phase.FINISHED)
    return state, spans


class TodoExtractor:
    """Finds the open TODO items of a markdown document."""

    def __init__(self):
        self.phase = Phase.SEARCHING

    def process(self, markdown: str) -> list[str]:
        """Verbatim text of each open top-level TODO item, in document order."""
        state, spans = collect_open_todos(markdown_events(markdown))
        self.phase = state.phase
        return [markdown[span.start : span.end] for span in spans]
