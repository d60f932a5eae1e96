"""Cursor, selection, and editor identity types for buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import Optional, Tuple

Cursor = Tuple[int, int]  # (line, column)
Selection = Tuple[Cursor, Cursor]

_HANDLE_IDS = count(1)


def normalize_selection(selection: Selection) -> Selection:
    """Return ``selection`` ordered so that ``from <= to`` in document order."""

    start, end = selection
    if start <= end:
        return start, end
    return end, start


@dataclass(eq=False, slots=True)
class EditorHandle:
    """Opaque identity of one editing surface instance.

    Compared by identity only; two surfaces with identical content still
    have distinct handles.
    """

    label: str = "editor"
    serial: int = field(default_factory=lambda: next(_HANDLE_IDS))

    def __repr__(self) -> str:
        return f"EditorHandle({self.label!r}#{self.serial})"


@dataclass(slots=True)
class BufferState:
    """Mutable cursor + selection info tied to a BufferDocument."""

    cursor: Cursor = (0, 0)
    selection: Optional[Selection] = None

    def set_cursor(self, line: int, col: int) -> None:
        self.cursor = (line, col)

    def clear_selection(self) -> None:
        self.selection = None

    def set_selection(self, start: Cursor, end: Cursor) -> None:
        self.selection = (start, end)
