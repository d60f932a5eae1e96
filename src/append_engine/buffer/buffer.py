"""In-memory editing surface combining a document, cursor state, and identity."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Optional

from append_engine.runtime import telemetry

from .document import BufferDocument
from .state import BufferState, Cursor, EditorHandle, Selection, normalize_selection
from .validation import ensure_cursor


class Buffer:
    """Reference ``EditorSurface`` backed by a ``BufferDocument``."""

    def __init__(
        self,
        *,
        name: str = "default",
        path: Optional[str] = None,
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
    ) -> None:
        self.name = name
        self.path = path
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        self._handle = EditorHandle(label=name)

    @classmethod
    def from_text(
        cls, text: str, *, name: str = "default", path: Optional[str] = None
    ) -> "Buffer":
        return cls(name=name, path=path, document=BufferDocument.from_text(text))

    @property
    def handle(self) -> EditorHandle:
        return self._handle

    @property
    def source_path(self) -> Optional[str]:
        return self.path

    @property
    def text(self) -> str:
        return self.document.text

    @property
    def line_count(self) -> int:
        return self.document.line_count

    def get_line(self, index: int) -> str:
        return self.document.get_line(index)

    def get_cursor(self) -> Cursor:
        return self.state.cursor

    def set_cursor(self, line: int, col: int) -> None:
        ensure_cursor(self.document, (line, col))
        self.state.set_cursor(line, col)
        self.state.clear_selection()

    def get_selection(self) -> Optional[Selection]:
        selection = self.state.selection
        if selection is None:
            return None
        return normalize_selection(selection)

    def set_selection(self, start: Cursor, end: Cursor) -> None:
        """Select ``start``..``end``; the cursor follows the head (``end``)."""

        ensure_cursor(self.document, start)
        ensure_cursor(self.document, end)
        self.state.set_selection(start, end)
        self.state.set_cursor(*end)

    def selected_text(self) -> str:
        selection = self.get_selection()
        if selection is None:
            return ""
        return self.get_text_range(*selection)

    def replace_selection(self, text: str) -> None:
        selection = self.get_selection()
        if selection is None:
            start = end = self.state.cursor
        else:
            start, end = selection
        self.replace_range(start, end, text, label="replace_selection")

    def get_text_range(self, start: Cursor, end: Cursor) -> str:
        start = ensure_cursor(self.document, start)
        end = ensure_cursor(self.document, end)
        start, end = normalize_selection((start, end))
        text = self.document.text
        return text[
            _offset_for_cursor(self.document, start) : _offset_for_cursor(
                self.document, end
            )
        ]

    def replace_range(
        self, start: Cursor, end: Cursor, text: str, *, label: str = "replace_range"
    ) -> str:
        """Replace ``start``..``end`` with ``text`` and drop any live selection."""

        start = ensure_cursor(self.document, start)
        end = ensure_cursor(self.document, end)
        start, end = normalize_selection((start, end))
        with Transaction(self, label):
            before = self.document.text
            start_offset = _offset_for_cursor(self.document, start)
            end_offset = _offset_for_cursor(self.document, end)
            after = before[:start_offset] + text + before[end_offset:]
            self.document = BufferDocument.from_text(
                after, version=self.document.version + 1
            )
            self.state.set_cursor(
                *_cursor_from_offset(self.document, start_offset + len(text))
            )
            self.state.clear_selection()
        return after


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps a buffer mutation in a telemetry span."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


def _offset_for_cursor(document: BufferDocument, cursor: Cursor) -> int:
    lines = document.snapshot()
    line, col = cursor
    return sum(len(lines[i]) + 1 for i in range(line)) + col


def _cursor_from_offset(document: BufferDocument, offset: int) -> Cursor:
    lines = document.snapshot()
    running = 0
    for line, content in enumerate(lines):
        if offset <= running + len(content):
            return (line, offset - running)
        running += len(content) + 1
    return (len(lines) - 1, len(lines[-1]))
