"""Two-stage select-all: current paragraph first, whole document second."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from append_engine.buffer import (
    Cursor,
    EditorHandle,
    EditorSurface,
    LineSource,
    Selection,
    normalize_selection,
)
from append_engine.runtime import telemetry

from .paragraph import document_selection, full_line_range, locate_paragraph


@dataclass(slots=True)
class SelectionState:
    """Session-scoped memory of the last paragraph picked by the tracker.

    Idle when ``paragraph`` is ``None``. A stored paragraph is the
    ``(start_line, end_line)`` pair of a full-line range.
    """

    paragraph: Optional[tuple[int, int]] = None
    editor: Optional[EditorHandle] = None

    @property
    def is_idle(self) -> bool:
        return self.paragraph is None

    def remember(self, paragraph: tuple[int, int], editor: EditorHandle) -> None:
        self.paragraph = paragraph
        self.editor = editor

    def reset(self) -> None:
        self.paragraph = None
        self.editor = None


@dataclass(frozen=True, slots=True)
class SelectRange:
    """Select ``range``; the tracker now remembers it as the paragraph."""

    range: Selection
    status: str = "paragraph"


@dataclass(frozen=True, slots=True)
class SelectAll:
    """Select the whole document; the tracker is idle again."""

    range: Selection
    status: str = "select_all"


SelectAction = Union[SelectRange, SelectAll]


class SelectionStateTracker:
    """Decides, on every trigger, between a paragraph pick and select-all."""

    def __init__(self, state: Optional[SelectionState] = None) -> None:
        self.state = state if state is not None else SelectionState()

    def on_trigger(
        self,
        editor: EditorHandle,
        cursor: Cursor,
        selection: Optional[Selection],
        lines: LineSource,
    ) -> SelectAction:
        if self._still_selected(editor, selection, lines):
            self.state.reset()
            action: SelectAction = SelectAll(document_selection(lines))
        else:
            start, end = locate_paragraph(cursor[0], lines)
            self.state.remember((start, end), editor)
            action = SelectRange(full_line_range(start, end, lines))
        telemetry.record_event(
            "selection.trigger",
            level="debug",
            data={"action": action.status, "range": action.range, "editor": editor},
        )
        return action

    def reset(self) -> None:
        self.state.reset()

    def _still_selected(
        self,
        editor: EditorHandle,
        selection: Optional[Selection],
        lines: LineSource,
    ) -> bool:
        stored = self.state.paragraph
        if stored is None or self.state.editor is not editor:
            return False
        if selection is None:
            return False
        start, end = normalize_selection(selection)
        if start == end:
            return False
        first, last = stored
        if last >= lines.line_count:
            return False
        return (start, end) == full_line_range(first, last, lines)


def apply(action: SelectAction, surface: EditorSurface) -> None:
    """Push ``action``'s range onto ``surface``."""

    surface.set_selection(*action.range)


__all__ = [
    "SelectAction",
    "SelectAll",
    "SelectRange",
    "SelectionState",
    "SelectionStateTracker",
    "apply",
]
