from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from append_engine.buffer import Buffer
from append_engine.config import AppendSettings
from append_engine.session import PluginSession
from append_engine.store import DocumentStore, MemoryDocumentStore

FIXED_NOW = datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)
STAMP = "<sub>[[Note]] | 2025-01-01 | 09:00:</sub>"


def make_session(
    documents: Optional[Mapping[str, str]] = None,
    *,
    store: Optional[DocumentStore] = None,
    notices: Optional[list[str]] = None,
    **settings: Any,
) -> PluginSession:
    sink = notices if notices is not None else []
    return PluginSession(
        store if store is not None else MemoryDocumentStore(documents),
        settings=AppendSettings(**settings),
        notifier=sink.append,
        clock=lambda: FIXED_NOW,
    )


def make_buffer(text: str, *, path: Optional[str] = "notes/Note.md") -> Buffer:
    return Buffer.from_text(text, name="source", path=path)
