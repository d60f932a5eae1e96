from __future__ import annotations

from append_engine.buffer import Buffer, BufferDocument, EditorHandle
from append_engine.selection import (
    SelectAction,
    SelectAll,
    SelectRange,
    SelectionState,
    SelectionStateTracker,
    apply,
)

TEXT = "alpha\nbeta\n\ngamma\ndelta\n\n\nomega"


def make_buffer(cursor: tuple[int, int] = (3, 1), *, name: str = "note") -> Buffer:
    buffer = Buffer.from_text(TEXT, name=name)
    buffer.set_cursor(*cursor)
    return buffer


def trigger(tracker: SelectionStateTracker, buffer: Buffer) -> SelectAction:
    action = tracker.on_trigger(
        buffer.handle, buffer.get_cursor(), buffer.get_selection(), buffer
    )
    apply(action, buffer)
    return action


def test_first_trigger_selects_paragraph() -> None:
    tracker = SelectionStateTracker()
    buffer = make_buffer()

    action = trigger(tracker, buffer)

    assert isinstance(action, SelectRange)
    assert action.range == ((3, 0), (4, 5))
    assert buffer.get_selection() == ((3, 0), (4, 5))
    assert tracker.state.paragraph == (3, 4)
    assert tracker.state.editor is buffer.handle


def test_second_trigger_escalates_to_select_all() -> None:
    tracker = SelectionStateTracker()
    buffer = make_buffer()

    trigger(tracker, buffer)
    action = trigger(tracker, buffer)

    assert isinstance(action, SelectAll)
    assert buffer.get_selection() == ((0, 0), (7, 5))
    assert tracker.state.is_idle


def test_third_trigger_starts_over_from_paragraph() -> None:
    tracker = SelectionStateTracker()
    buffer = make_buffer()

    trigger(tracker, buffer)
    trigger(tracker, buffer)
    action = trigger(tracker, buffer)

    assert isinstance(action, SelectRange)


def test_manual_selection_change_makes_state_stale() -> None:
    tracker = SelectionStateTracker()
    buffer = make_buffer()
    trigger(tracker, buffer)

    buffer.set_selection((3, 0), (4, 3))
    action = trigger(tracker, buffer)

    assert isinstance(action, SelectRange)
    assert action.range == ((3, 0), (4, 5))


def test_selection_moved_to_other_paragraph_recomputes() -> None:
    tracker = SelectionStateTracker()
    buffer = make_buffer()
    trigger(tracker, buffer)

    buffer.set_selection((0, 0), (1, 4))
    action = trigger(tracker, buffer)

    assert isinstance(action, SelectRange)
    assert action.range == ((0, 0), (1, 4))


def test_reversed_live_selection_still_matches() -> None:
    tracker = SelectionStateTracker()
    buffer = make_buffer()
    trigger(tracker, buffer)

    buffer.set_selection((4, 5), (3, 0))
    action = trigger(tracker, buffer)

    assert isinstance(action, SelectAll)


def test_other_editor_never_escalates() -> None:
    tracker = SelectionStateTracker()
    first = make_buffer(name="same")
    second = make_buffer(name="same")
    trigger(tracker, first)

    second.set_selection((3, 0), (4, 5))
    action = trigger(tracker, second)

    assert isinstance(action, SelectRange)
    assert tracker.state.editor is second.handle


def test_reset_forces_fresh_paragraph() -> None:
    tracker = SelectionStateTracker()
    buffer = make_buffer()
    trigger(tracker, buffer)

    tracker.reset()
    action = trigger(tracker, buffer)

    assert isinstance(action, SelectRange)


def test_blank_line_selects_only_itself() -> None:
    tracker = SelectionStateTracker()
    buffer = make_buffer(cursor=(2, 0))

    action = trigger(tracker, buffer)

    assert action.range == ((2, 0), (2, 0))


def test_blank_line_paragraph_does_not_escalate() -> None:
    tracker = SelectionStateTracker()
    buffer = make_buffer(cursor=(5, 0))

    trigger(tracker, buffer)
    action = trigger(tracker, buffer)

    assert isinstance(action, SelectRange)
    assert action.range == ((5, 0), (5, 0))


def test_tracker_works_on_plain_line_sources() -> None:
    state = SelectionState()
    tracker = SelectionStateTracker(state)
    lines = BufferDocument.from_text("a\nb\n\nc")
    handle = EditorHandle("plain")

    first = tracker.on_trigger(handle, (1, 0), None, lines)
    second = tracker.on_trigger(handle, (1, 1), first.range, lines)

    assert first.range == ((0, 0), (1, 1))
    assert isinstance(second, SelectAll)
    assert second.range == ((0, 0), (3, 1))
    assert state.is_idle


def test_stored_paragraph_past_document_end_is_stale() -> None:
    tracker = SelectionStateTracker()
    handle = EditorHandle()
    tracker.on_trigger(handle, (3, 0), None, BufferDocument.from_text("a\n\nb\nc"))

    shorter = BufferDocument.from_text("a\n\nb")
    action = tracker.on_trigger(handle, (2, 0), ((2, 0), (3, 1)), shorter)

    assert isinstance(action, SelectRange)
    assert action.range == ((2, 0), (2, 1))


def test_editor_handles_compare_by_identity() -> None:
    handle = EditorHandle("x")

    assert EditorHandle("x") != EditorHandle("x")
    assert handle == handle
