from __future__ import annotations

import pytest

from append_engine.insertion import (
    InsertionMode,
    InsertionPolicy,
    find_marker_line,
    insert_entry,
)

ENTRY = "<sub>[[Note]] | 2025-01-01 | 09:00:</sub>\nHello"


@pytest.mark.parametrize(
    "policy",
    [
        InsertionPolicy.append(),
        InsertionPolicy.prepend(),
        InsertionPolicy.prepend("---"),
        InsertionPolicy(InsertionMode.APPEND, marker="---"),
    ],
)
def test_empty_document_becomes_entry(policy: InsertionPolicy) -> None:
    assert insert_entry("", ENTRY, policy) == ENTRY
    assert insert_entry("", "  padded  ", policy) == "  padded  "


def test_append_joins_with_blank_line() -> None:
    assert insert_entry("line1\nline2", "E", InsertionPolicy.append()) == (
        "line1\nline2\n\nE"
    )


def test_append_ignores_existing_trailing_whitespace() -> None:
    result = insert_entry("old\n\n", "E", InsertionPolicy.append())

    assert result == "old\n\n\n\nE"
    assert result.endswith("\n\nE")


def test_append_ignores_marker() -> None:
    policy = InsertionPolicy(InsertionMode.APPEND, marker="---")

    assert insert_entry("---\nold", "new", policy) == "---\nold\n\nnew"


def test_prepend_after_marker_line() -> None:
    policy = InsertionPolicy.prepend("---")

    assert insert_entry("---\nold", "new", policy) == "---\nnew\n\nold"


def test_prepend_without_marker_match_goes_to_top() -> None:
    policy = InsertionPolicy.prepend("---")

    assert insert_entry("old", "new", policy) == "new\n\nold"


def test_prepend_without_marker_strips_result() -> None:
    result = insert_entry("\n\nold\n\n", "new", InsertionPolicy.prepend())

    assert result == "new\n\n\n\nold"


def test_marker_match_uses_trimmed_line_equality() -> None:
    existing = "# Journal\n  ## Entries  \nfirst"

    result = insert_entry(existing, "new", InsertionPolicy.prepend(" ## Entries"))

    assert result == "# Journal\n  ## Entries  \nnew\n\nfirst"


def test_marker_is_not_a_substring_match() -> None:
    existing = "## Entries list\nold"

    result = insert_entry(existing, "new", InsertionPolicy.prepend("## Entries"))

    assert result == "new\n\n## Entries list\nold"


def test_first_marker_wins() -> None:
    result = insert_entry("---\na\n---\nb", "new", InsertionPolicy.prepend("---"))

    assert result == "---\nnew\n\na\n---\nb"


def test_multiline_entry_is_spliced_line_by_line() -> None:
    result = insert_entry("---\nold", ENTRY, InsertionPolicy.prepend("---"))

    assert result == "---\n" + ENTRY + "\n\nold"


def test_marker_on_last_line_drops_trailing_blank() -> None:
    result = insert_entry("head\n---", "new", InsertionPolicy.prepend("---"))

    assert result == "head\n---\nnew"


def test_header_lines_are_preserved_verbatim() -> None:
    existing = "# Title\nintro  \n---\nolder\n\noldest"

    result = insert_entry(existing, "new\nentry", InsertionPolicy.prepend("---"))

    assert result.split("\n")[:3] == existing.split("\n")[:3]
    assert result == "# Title\nintro  \n---\nnew\nentry\n\nolder\n\noldest"


def test_find_marker_line() -> None:
    lines = ["a", " --- ", "b", "---"]

    assert find_marker_line(lines, "---") == 1
    assert find_marker_line(lines, "missing") is None
    assert find_marker_line(lines, None) is None
    assert find_marker_line(lines, "") is None
