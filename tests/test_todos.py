"""Tests for carrying open TODOs forward."""

from journal.core.markdown import (
    HeadingEnd,
    HeadingStart,
    ListItemEnd,
    ListItemStart,
    ListStart,
    Span,
    TaskMarker,
    Text,
)
from journal.core.todos import (
    ExtractorState,
    HeadingMatch,
    Phase,
    TodoExtractor,
    collect_open_todos,
    transition,
)

NO_SPAN = Span(0, 0)


def collecting(**kwargs) -> ExtractorState:
    return ExtractorState(phase=Phase.COLLECTING, **kwargs)


class TestTransitionSearching:
    def test_level_two_heading_arms_title_check(self):
        state, emitted = transition(ExtractorState(), HeadingStart(2, NO_SPAN))
        assert state.heading is HeadingMatch.AWAITING_TITLE
        assert emitted is None

    def test_other_heading_levels_are_ignored(self):
        state, _ = transition(ExtractorState(), HeadingStart(1, NO_SPAN))
        assert state == ExtractorState()

    def test_title_must_match_exactly(self):
        armed = ExtractorState(heading=HeadingMatch.AWAITING_TITLE)
        assert transition(armed, Text("TODOs", NO_SPAN))[0].heading is HeadingMatch.TITLE_CONFIRMED
        assert transition(armed, Text("todos", NO_SPAN))[0].heading is HeadingMatch.NONE
        assert transition(armed, Text("TODOs later", NO_SPAN))[0].heading is HeadingMatch.NONE

    def test_text_outside_heading_is_ignored(self):
        state, _ = transition(ExtractorState(), Text("TODOs", NO_SPAN))
        assert state.heading is HeadingMatch.NONE

    def test_heading_end_after_confirmed_title_starts_collecting(self):
        confirmed = ExtractorState(heading=HeadingMatch.TITLE_CONFIRMED)
        state, _ = transition(confirmed, HeadingEnd(2, NO_SPAN))
        assert state.phase is Phase.COLLECTING

    def test_heading_end_without_title_keeps_searching(self):
        armed = ExtractorState(heading=HeadingMatch.AWAITING_TITLE)
        state, _ = transition(armed, HeadingEnd(2, NO_SPAN))
        assert state.phase is Phase.SEARCHING


class TestTransitionCollecting:
    def test_any_heading_finishes(self):
        for level in range(1, 7):
            state, _ = transition(collecting(), HeadingStart(level, NO_SPAN))
            assert state.phase is Phase.FINISHED

    def test_top_level_item_becomes_candidate(self):
        state, _ = transition(collecting(), ListItemStart(Span(10, 20)))
        assert state.depth == 1
        assert state.pending_start == 10

    def test_nested_item_only_tracks_depth(self):
        state, _ = transition(collecting(depth=1, pending_start=10), ListItemStart(Span(15, 20)))
        assert state.depth == 2
        assert state.pending_start == 10

    def test_done_marker_drops_candidate(self):
        state, _ = transition(collecting(depth=1, pending_start=10), TaskMarker(True, NO_SPAN))
        assert state.pending_start is None
        assert not state.capturing

    def test_open_marker_starts_capture(self):
        state, _ = transition(collecting(depth=1, pending_start=10), TaskMarker(False, NO_SPAN))
        assert state.capturing

    def test_nested_marker_does_not_revive_dropped_parent(self):
        state, _ = transition(collecting(depth=2, pending_start=None), TaskMarker(False, NO_SPAN))
        assert not state.capturing

    def test_nested_marker_does_not_affect_open_parent(self):
        parent = collecting(depth=2, pending_start=10, capturing=True)
        state, _ = transition(parent, TaskMarker(True, NO_SPAN))
        assert state == parent

    def test_capture_emitted_when_top_level_item_closes(self):
        state, emitted = transition(collecting(depth=1, pending_start=10, capturing=True), ListItemEnd(Span(10, 42)))
        assert emitted == Span(10, 42)
        assert state == collecting()

    def test_nested_item_end_does_not_emit(self):
        state, emitted = transition(collecting(depth=2, pending_start=10, capturing=True), ListItemEnd(Span(15, 30)))
        assert emitted is None
        assert state.depth == 1

    def test_item_without_marker_is_not_emitted(self):
        _, emitted = transition(collecting(depth=1, pending_start=10), ListItemEnd(Span(10, 20)))
        assert emitted is None

    def test_finished_ignores_everything(self):
        finished = ExtractorState(phase=Phase.FINISHED)
        assert transition(finished, ListItemStart(Span(0, 5))) == (finished, None)


class TestCollectOpenTodos:
    def test_stops_at_first_heading(self):
        events = [
            HeadingStart(2, NO_SPAN),
            Text("TODOs", NO_SPAN),
            HeadingEnd(2, NO_SPAN),
            ListStart(NO_SPAN),
            ListItemStart(Span(10, 20)),
            TaskMarker(False, Span(10, 20)),
            ListItemEnd(Span(10, 20)),
            HeadingStart(2, NO_SPAN),
            ListItemStart(Span(30, 40)),
            TaskMarker(False, Span(30, 40)),
            ListItemEnd(Span(30, 40)),
        ]
        state, spans = collect_open_todos(events)
        assert state.phase is Phase.FINISHED
        assert spans == [Span(10, 20)]

    def test_missing_section_finishes_empty(self):
        state, spans = collect_open_todos([HeadingStart(1, NO_SPAN), Text("Something", NO_SPAN)])
        assert state.phase is Phase.FINISHED
        assert spans == []


class TestTodoExtractor:
    def test_there_were_no_todos(self):
        extractor = TodoExtractor()
        todos = extractor.process("# Something\n\n")

        assert extractor.phase is Phase.FINISHED
        assert todos == []

    def test_empty_document(self):
        assert TodoExtractor().process("") == []

    def test_knows_when_it_found_the_todo_header(self):
        extractor = TodoExtractor()
        extractor.process("# Something\n\n## TODOs\n\nabc\n")

        assert extractor.phase is Phase.COLLECTING

    def test_single_todo(self):
        extractor = TodoExtractor()
        todos = extractor.process("# Something\n\n## TODOs\n\n* [ ] abc\n")

        assert extractor.phase is Phase.COLLECTING
        assert todos == ["* [ ] abc"]

    def test_knows_when_its_done_with_todos(self):
        extractor = TodoExtractor()
        todos = extractor.process("# Something\n\n## TODOs\n\n## Not TODOs\n\n")

        assert extractor.phase is Phase.FINISHED
        assert todos == []

    def test_finds_multiple_todos(self):
        markdown = "# Something\n\n## TODOs\n\n* [ ] first\n\n* [ ] second\n\n* [ ] third\n\n## Other thing\n"
        assert TodoExtractor().process(markdown) == ["* [ ] first", "* [ ] second", "* [ ] third"]

    def test_skips_completed_todos(self):
        markdown = "# Something\n\n## TODOs\n\n* [ ] first\n\n* [x] second\n\n* [ ] third\n\n## Other thing\n"
        assert TodoExtractor().process(markdown) == ["* [ ] first", "* [ ] third"]

    def test_ignores_todos_beneath_a_completed_one(self):
        markdown = "## TODOs\n\n* [ ] first\n\n* [x] second\n  * [ ] second.dot.one\n\n* [ ] third\n\n## Other"
        todos = TodoExtractor().process(markdown)

        assert todos == ["* [ ] first", "* [ ] third"]
        assert not any("second.dot.one" in todo for todo in todos)

    def test_ignores_bullets_within_completed_ones(self):
        markdown = "## TODOs\n\n* [ ] first\n\n* [x] second\n    * second.dot.one\n\n* [ ] third\n\n## Other thing\n"
        assert TodoExtractor().process(markdown) == ["* [ ] first", "* [ ] third"]

    def test_keeps_nested_items_of_open_todo_verbatim(self):
        markdown = (
            "## TODOs\n\n"
            "* [ ] parent\n"
            "  * [x] done child\n"
            "  * [ ] open child\n"
            "  * plain note\n"
            "* [ ] sibling\n"
        )
        todos = TodoExtractor().process(markdown)

        assert todos == [
            "* [ ] parent\n  * [x] done child\n  * [ ] open child\n  * plain note",
            "* [ ] sibling",
        ]

    def test_uppercase_x_counts_as_done(self):
        assert TodoExtractor().process("## TODOs\n\n* [X] done\n* [ ] open\n") == ["* [ ] open"]

    def test_plain_bullets_are_not_todos(self):
        assert TodoExtractor().process("## TODOs\n\n* just a note\n* [ ] real\n") == ["* [ ] real"]

    def test_items_in_later_sections_are_never_captured(self):
        markdown = "## TODOs\n\n* [ ] mine\n\n### Details\n\n* [ ] not mine\n"
        assert TodoExtractor().process(markdown) == ["* [ ] mine"]

    def test_items_before_the_section_are_ignored(self):
        markdown = "## Notes\n\n* [ ] earlier\n\n## TODOs\n\n* [ ] later\n"
        assert TodoExtractor().process(markdown) == ["* [ ] later"]

    def test_heading_title_is_case_sensitive(self):
        assert TodoExtractor().process("## todos\n\n* [ ] nope\n") == []

    def test_level_one_todos_heading_does_not_count(self):
        assert TodoExtractor().process("# TODOs\n\n* [ ] nope\n") == []

    def test_ordered_lists(self):
        assert TodoExtractor().process("## TODOs\n\n1. [ ] one\n2. [x] two\n") == ["1. [ ] one"]

    def test_crlf_line_endings(self):
        markdown = "## TODOs\r\n\r\n* [ ] first\r\n  * sub\r\n* [x] second\r\n"
        assert TodoExtractor().process(markdown) == ["* [ ] first\r\n  * sub"]

    def test_quoted_items_are_not_todos(self):
        assert TodoExtractor().process("## TODOs\n> * [ ] quoted\n* [ ] top\n") == ["* [ ] top"]

    def test_quote_nested_in_open_item_stays_verbatim(self):
        markdown = "## TODOs\n\n* [ ] parent\n  > * [ ] quoted\n* [ ] sibling\n"
        assert TodoExtractor().process(markdown) == ["* [ ] parent\n  > * [ ] quoted", "* [ ] sibling"]

    def test_quoted_heading_still_ends_section(self):
        assert TodoExtractor().process("## TODOs\n\n* [ ] mine\n\n> ## Quoted\n\n* [ ] later\n") == ["* [ ] mine"]
