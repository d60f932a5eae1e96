from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from append_engine.actions import extract_selection
from append_engine.store import LocalDocumentStore

from conftest import STAMP, make_buffer, make_session


def test_write_creates_parent_directories(tmp_path: Path) -> None:
    store = LocalDocumentStore(tmp_path)

    asyncio.run(store.write("journal/2025/today.md", "hi\n"))

    assert (tmp_path / "journal" / "2025" / "today.md").read_bytes() == b"hi\n"


def test_read_returns_exact_text(tmp_path: Path) -> None:
    (tmp_path / "note.md").write_bytes("a\n\n  b  \n".encode("utf-8"))
    store = LocalDocumentStore(tmp_path)

    assert asyncio.run(store.exists("note.md")) is True
    assert asyncio.run(store.exists("missing.md")) is False
    assert asyncio.run(store.read("note.md")) == "a\n\n  b  \n"


@pytest.mark.parametrize("path", ["../outside.md", "notes/../../outside.md"])
def test_paths_cannot_escape_root(tmp_path: Path, path: str) -> None:
    store = LocalDocumentStore(tmp_path / "vault")

    with pytest.raises(PermissionError):
        store.resolve(path)


def test_extract_into_vault(tmp_path: Path) -> None:
    (tmp_path / "output.md").write_text("existing", encoding="utf-8")
    session = make_session(store=LocalDocumentStore(tmp_path))
    buffer = make_buffer("take this")
    buffer.set_selection((0, 0), (0, 9))

    result = asyncio.run(extract_selection(session, buffer))

    assert result.status == "extracted"
    assert (tmp_path / "output.md").read_text(encoding="utf-8") == (
        f"existing\n\n{STAMP}\ntake this"
    )
    assert buffer.text == ""


def test_missing_target_is_created(tmp_path: Path) -> None:
    session = make_session(store=LocalDocumentStore(tmp_path), target_file="new/out.md")
    buffer = make_buffer("fresh")
    buffer.set_selection((0, 0), (0, 5))

    asyncio.run(extract_selection(session, buffer))

    assert (tmp_path / "new" / "out.md").read_text(encoding="utf-8") == (
        f"{STAMP}\nfresh"
    )


def test_undecodable_target_is_reported(tmp_path: Path) -> None:
    (tmp_path / "output.md").write_bytes(b"\xff\xfe bad")
    notices: list[str] = []
    session = make_session(store=LocalDocumentStore(tmp_path), notices=notices)
    buffer = make_buffer("keep me")
    buffer.set_selection((0, 0), (0, 4))

    result = asyncio.run(extract_selection(session, buffer))

    assert result.status == "store_read_error"
    assert notices[0].startswith("Error appending to file: ")
    assert buffer.text == "keep me"
    assert (tmp_path / "output.md").read_bytes() == b"\xff\xfe bad"


def test_unencodable_entry_is_reported(tmp_path: Path) -> None:
    session = make_session(store=LocalDocumentStore(tmp_path, encoding="ascii"))
    buffer = make_buffer("café")
    buffer.set_selection((0, 0), (0, 4))

    result = asyncio.run(extract_selection(session, buffer))

    assert result.status == "store_write_error"
    assert buffer.text == "café"
    assert not (tmp_path / "output.md").exists()
