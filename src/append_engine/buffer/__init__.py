"""Buffer abstractions and the editing-surface protocol."""

from .buffer import Buffer, Transaction
from .document import BufferDocument
from .state import BufferState, Cursor, EditorHandle, Selection, normalize_selection
from .sync import BufferValidationError, EditorSurface, LineSource
from .validation import ensure_cursor

__all__ = [
    "Buffer",
    "BufferDocument",
    "BufferState",
    "BufferValidationError",
    "Cursor",
    "EditorHandle",
    "EditorSurface",
    "LineSource",
    "Selection",
    "Transaction",
    "ensure_cursor",
    "normalize_selection",
]
