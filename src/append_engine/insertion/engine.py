"""Splice a new entry into the target document's text."""

from __future__ import annotations

from typing import Optional, Sequence

from .policy import InsertionMode, InsertionPolicy

ENTRY_SEPARATOR = "\n\n"


def find_marker_line(lines: Sequence[str], marker: Optional[str]) -> Optional[int]:
    """Index of the first line whose trimmed text equals the trimmed marker."""

    if not marker:
        return None
    wanted = marker.strip()
    for index, line in enumerate(lines):
        if line.strip() == wanted:
            return index
    return None


def _prepend(existing_text: str, entry: str, marker: Optional[str]) -> str:
    lines = existing_text.split("\n")
    index = find_marker_line(lines, marker)
    if index is None:
        return f"{entry}{ENTRY_SEPARATOR}{existing_text}".strip()
    header = lines[: index + 1]
    rest = lines[index + 1 :]
    return "\n".join([*header, *entry.split("\n"), "", *rest]).strip()


def insert_entry(existing_text: str, entry: str, policy: InsertionPolicy) -> str:
    """Return the target document text with ``entry`` inserted per ``policy``.

    * append: ``existing + "\\n\\n" + entry``.
    * prepend without a matching marker: entry on top, result stripped.
    * prepend with a marker line: entry right after the marker, then one
      blank line, then the rest of the document; result stripped.

    An empty document always becomes exactly ``entry``.
    """

    if not existing_text:
        return entry
    if policy.mode is InsertionMode.APPEND:
        return f"{existing_text}{ENTRY_SEPARATOR}{entry}"
    return _prepend(existing_text, entry, policy.marker)


__all__ = ["ENTRY_SEPARATOR", "find_marker_line", "insert_entry"]
