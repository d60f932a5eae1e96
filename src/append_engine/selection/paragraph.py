"""Paragraph boundary detection over a line source."""

from __future__ import annotations

from typing import Tuple

from append_engine.buffer import LineSource, Selection


def _is_blank(lines: LineSource, index: int) -> bool:
    return lines.get_line(index).strip() == ""


def locate_paragraph(cursor_line: int, lines: LineSource) -> Tuple[int, int]:
    """Return the ``(start_line, end_line)`` of the paragraph at ``cursor_line``.

    A paragraph is a maximal run of non-blank lines. A blank cursor line is
    its own one-line paragraph and never merges with its neighbours.
    """

    if _is_blank(lines, cursor_line):
        return cursor_line, cursor_line

    start = cursor_line
    while start > 0 and not _is_blank(lines, start - 1):
        start -= 1

    end = cursor_line
    last = lines.line_count - 1
    while end < last and not _is_blank(lines, end + 1):
        end += 1

    return start, end


def full_line_range(start_line: int, end_line: int, lines: LineSource) -> Selection:
    """Span column 0 of ``start_line`` to the end of ``end_line``."""

    return (start_line, 0), (end_line, len(lines.get_line(end_line)))


def paragraph_selection(cursor_line: int, lines: LineSource) -> Selection:
    return full_line_range(*locate_paragraph(cursor_line, lines), lines)


def document_selection(lines: LineSource) -> Selection:
    return full_line_range(0, lines.line_count - 1, lines)


__all__ = [
    "document_selection",
    "full_line_range",
    "locate_paragraph",
    "paragraph_selection",
]
