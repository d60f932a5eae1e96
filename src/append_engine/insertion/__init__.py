"""Regex gate, metadata prefix, and the content insertion algorithm."""

from .engine import ENTRY_SEPARATOR, find_marker_line, insert_entry
from .filter import FilterOutcome, evaluate
from .metadata import UNKNOWN_SOURCE, format_entry, source_label_for
from .policy import InsertionMode, InsertionPolicy

__all__ = [
    "ENTRY_SEPARATOR",
    "FilterOutcome",
    "InsertionMode",
    "InsertionPolicy",
    "UNKNOWN_SOURCE",
    "evaluate",
    "find_marker_line",
    "format_entry",
    "insert_entry",
    "source_label_for",
]
