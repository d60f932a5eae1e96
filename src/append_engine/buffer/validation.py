"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import BufferDocument
from .state import Cursor
from .sync import BufferValidationError


def ensure_cursor(document: BufferDocument, cursor: Cursor) -> Cursor:
    line, col = cursor
    if line < 0 or line >= document.line_count:
        raise BufferValidationError("Line out of range", cursor=cursor)
    if col < 0 or col > len(document.get_line(line)):
        raise BufferValidationError("Column out of range", cursor=cursor)
    return cursor
