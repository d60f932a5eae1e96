"""Move the selected text into the target document with a metadata prefix."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from append_engine.buffer import EditorSurface, Selection
from append_engine.config import AppendSettings
from append_engine.errors import (
    AppendEngineError,
    EmptySelectionError,
    FilterRejectedError,
    InvalidFilterPatternError,
    SourceChangedError,
    StoreReadError,
    StoreWriteError,
)
from append_engine.insertion import (
    evaluate,
    format_entry,
    insert_entry,
    source_label_for,
)
from append_engine.runtime import telemetry

from .base import ActionResult

if TYPE_CHECKING:  # pragma: no cover
    from append_engine.session import PluginSession


def _check_filter(pattern: str, text: str) -> None:
    outcome = evaluate(pattern, text)
    if outcome.status == "invalid":
        raise InvalidFilterPatternError(pattern, outcome.message or "")
    if outcome.status == "reject":
        raise FilterRejectedError(pattern)


async def _splice(
    session: "PluginSession", settings: AppendSettings, entry: str
) -> None:
    path = settings.target_file
    store = session.store
    async with session.locks.locked(path):
        try:
            existing = await store.read(path) if await store.exists(path) else ""
        except (OSError, UnicodeError) as exc:
            raise StoreReadError(path, str(exc)) from exc
        updated = insert_entry(existing, entry, settings.policy)
        try:
            await store.write(path, updated)
        except (OSError, UnicodeError) as exc:
            raise StoreWriteError(path, str(exc)) from exc


def _range_holds(editor: EditorSurface, selection: Selection, text: str) -> bool:
    for line, col in selection:
        if line >= editor.line_count or col > len(editor.get_line(line)):
            return False
    return editor.get_text_range(*selection) == text


def _delete_source(
    editor: EditorSurface, selection: Selection, text: str, target: str
) -> None:
    # the host keeps editing while the store is awaited
    if not _range_holds(editor, selection, text):
        raise SourceChangedError(target)
    editor.replace_range(*selection, "")


async def extract_selection(
    session: "PluginSession",
    editor: EditorSurface,
    *,
    now: Optional[datetime] = None,
) -> ActionResult:
    """Filter, stamp, and splice the selection into the target document.

    The range selected when the command started is deleted only after the
    target was written, and only if it still holds the extracted text. Every
    failure becomes a single notification; nothing is raised to the host.
    """

    settings = session.settings.current
    with telemetry.span("actions::extract", component="actions"):
        try:
            selection = editor.get_selection()
            text = editor.selected_text() if selection is not None else ""
            if selection is None or not text:
                raise EmptySelectionError()
            _check_filter(settings.regex_condition, text)
            entry = format_entry(
                source_label_for(editor.source_path), text, now or session.clock()
            )
            await _splice(session, settings, entry)
            _delete_source(editor, selection, text, settings.target_file)
        except AppendEngineError as exc:
            telemetry.record_event(
                "extract.aborted",
                level="warning",
                data={"status": exc.status, "target": settings.target_file},
            )
            session.notify(exc.user_message)
            return ActionResult(
                consumed=True, status=exc.status, message=exc.user_message
            )

    session.tracker.reset()
    message = f"Text appended to {settings.target_file} and deleted from editor"
    telemetry.record_event(
        "extract.done",
        data={"target": settings.target_file, "chars": len(text)},
    )
    session.notify(message)
    return ActionResult(consumed=True, status="extracted", message=message)


__all__ = ["extract_selection"]
