"""Adapter wiring a PluginSession to Textual-style UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from append_engine.actions import ActionResult
from append_engine.buffer import EditorSurface
from append_engine.commands import KeyInput
from append_engine.session import PluginSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter uses to update host widgets."""

    notify: Callable[[str], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualSpoolAdapter:
    """Translates host key/click events into session calls."""

    def __init__(self, session: PluginSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        session.notifier = self._notify

    async def handle_textual_key(
        self,
        key: str,
        editor: EditorSurface,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ActionResult:
        normalized = tuple(str(mod).lower() for mod in modifiers)
        self._log_state("key ->", editor, key=key, mods=normalized)
        result = await self.session.handle_key(
            KeyInput(key=key, modifiers=normalized, text=text), editor
        )
        self._after_result(result, editor)
        return result

    async def run_command(self, command_id: str, editor: EditorSurface) -> ActionResult:
        self._log_state("command ->", editor, command=command_id)
        result = await self.session.run_command(command_id, editor)
        self._after_result(result, editor)
        return result

    def handle_click(self, editor: Optional[EditorSurface] = None) -> None:
        self.session.handle_click()
        self._log_state("click ->", editor)

    def _after_result(self, result: ActionResult, editor: EditorSurface) -> None:
        if result.consumed:
            self.hooks.update_status(result.status)
        self._log_state(
            "result <-", editor, status=result.status, message=result.message
        )

    def _notify(self, message: str) -> None:
        self._log_state("notice ->", None, message=message)
        self.hooks.notify(message)

    def _log_state(
        self, prefix: str, editor: Optional[EditorSurface], **fields: object
    ) -> None:
        snapshot = self._state_metadata(editor)
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix, *(f"{key}={value!r}" for key, value in snapshot.items())]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self, editor: Optional[EditorSurface]) -> Dict[str, object]:
        state = self.session.selection
        data: Dict[str, object] = {
            "paragraph": state.paragraph,
            "target": self.session.settings.current.target_file,
        }
        if editor is not None:
            data["cursor"] = editor.get_cursor()
            data["selection"] = editor.get_selection()
        return data


__all__ = ["TextualSpoolAdapter", "TextualUIHooks"]
