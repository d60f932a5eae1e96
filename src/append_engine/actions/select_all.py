"""Custom select-all: paragraph on the first press, document on the second."""

from __future__ import annotations

from typing import TYPE_CHECKING

from append_engine.buffer import EditorSurface
from append_engine.selection import apply

from .base import ActionResult

if TYPE_CHECKING:  # pragma: no cover
    from append_engine.session import PluginSession


def custom_select_all(session: "PluginSession", editor: EditorSurface) -> ActionResult:
    action = session.tracker.on_trigger(
        editor.handle,
        editor.get_cursor(),
        editor.get_selection(),
        editor,
    )
    apply(action, editor)
    return ActionResult(consumed=True, status=action.status)


__all__ = ["custom_select_all"]
