"""Paragraph detection and the custom select-all state machine."""

from .paragraph import (
    document_selection,
    full_line_range,
    locate_paragraph,
    paragraph_selection,
)
from .tracker import (
    SelectAction,
    SelectAll,
    SelectRange,
    SelectionState,
    SelectionStateTracker,
    apply,
)

__all__ = [
    "SelectAction",
    "SelectAll",
    "SelectRange",
    "SelectionState",
    "SelectionStateTracker",
    "apply",
    "document_selection",
    "full_line_range",
    "locate_paragraph",
    "paragraph_selection",
]
