"""Protocols describing what the engine needs from a host editing surface."""

from __future__ import annotations

from typing import Optional, Protocol

from .state import Cursor, EditorHandle, Selection


class LineSource(Protocol):
    """Read-only line access used by paragraph detection."""

    @property
    def line_count(self) -> int: ...

    def get_line(self, index: int) -> str: ...


class EditorSurface(LineSource, Protocol):
    """Editing surface accessor consumed by the engine's actions."""

    @property
    def handle(self) -> EditorHandle:
        """Stable identity of this surface instance."""
        ...

    @property
    def source_path(self) -> Optional[str]:
        """Path of the document being edited, when the host knows it."""
        ...

    def get_cursor(self) -> Cursor: ...

    def get_selection(self) -> Optional[Selection]:
        """Return the live selection as ``(from, to)`` or ``None``."""
        ...

    def set_selection(self, start: Cursor, end: Cursor) -> None: ...

    def selected_text(self) -> str: ...

    def replace_selection(self, text: str) -> None: ...

    def get_text_range(self, start: Cursor, end: Cursor) -> str: ...

    def replace_range(self, start: Cursor, end: Cursor, text: str) -> object:
        """Replace ``start``..``end`` regardless of the live selection."""
        ...


class BufferValidationError(RuntimeError):
    """Raised when a cursor falls outside the buffer."""

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor
