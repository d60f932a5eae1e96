from __future__ import annotations

import pytest

from append_engine.buffer import Buffer, BufferValidationError


def test_selection_is_normalized_and_cursor_follows_head() -> None:
    buffer = Buffer.from_text("one\ntwo\nthree")

    buffer.set_selection((2, 3), (0, 1))

    assert buffer.get_selection() == ((0, 1), (2, 3))
    assert buffer.get_cursor() == (0, 1)
    assert buffer.selected_text() == "ne\ntwo\nthr"


def test_empty_selection_reads_as_empty_text() -> None:
    buffer = Buffer.from_text("abc")

    buffer.set_selection((0, 1), (0, 1))

    assert buffer.selected_text() == ""


def test_replace_selection_deletes_and_clears() -> None:
    buffer = Buffer.from_text("keep\ndrop\nkeep")
    buffer.set_selection((1, 0), (2, 0))
    version = buffer.document.version

    buffer.replace_selection("")

    assert buffer.text == "keep\nkeep"
    assert buffer.get_selection() is None
    assert buffer.get_cursor() == (1, 0)
    assert buffer.document.version == version + 1


def test_set_cursor_clears_selection() -> None:
    buffer = Buffer.from_text("abc\ndef")
    buffer.set_selection((0, 0), (1, 3))

    buffer.set_cursor(1, 1)

    assert buffer.get_selection() is None


@pytest.mark.parametrize("cursor", [(2, 0), (0, 4), (-1, 0)])
def test_out_of_range_cursor_is_rejected(cursor: tuple[int, int]) -> None:
    buffer = Buffer.from_text("abc\ndef")

    with pytest.raises(BufferValidationError) as excinfo:
        buffer.set_selection((0, 0), cursor)

    assert excinfo.value.cursor == cursor


def test_handles_are_unique_per_buffer() -> None:
    first = Buffer.from_text("x", name="same")
    second = Buffer.from_text("x", name="same")

    assert first.handle is not second.handle
    assert first.handle != second.handle


def test_replace_range_ignores_and_clears_live_selection() -> None:
    buffer = Buffer.from_text("one\ntwo")
    buffer.set_selection((1, 0), (1, 3))

    buffer.replace_range((0, 0), (0, 3), "")

    assert buffer.text == "\ntwo"
    assert buffer.get_selection() is None
    assert buffer.get_text_range((1, 0), (1, 3)) == "two"
