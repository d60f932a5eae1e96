"""Plugin session owning settings, selection state, store, and commands."""

from __future__ import annotations

import inspect
from datetime import datetime, timezone
from typing import Callable, Optional

from append_engine.actions import ActionResult
from append_engine.buffer import EditorSurface
from append_engine.commands import (
    SELECT_ALL_COMMAND_ID,
    CommandRegistry,
    KeyInput,
    load_default_commands,
)
from append_engine.config import AppendSettings, SettingsProvider
from append_engine.runtime import telemetry
from append_engine.selection import SelectionState, SelectionStateTracker
from append_engine.store import DocumentStore, PathLocks

Notifier = Callable[[str], None]
Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PluginSession:
    """Routes host triggers to commands and owns all session-scoped state.

    Reset rules for the select-all tracker: any pointer click, any key that
    is not a select-all hotkey, and a successful extract.
    """

    def __init__(
        self,
        store: DocumentStore,
        *,
        settings: Optional[SettingsProvider | AppendSettings] = None,
        notifier: Optional[Notifier] = None,
        registry: Optional[CommandRegistry] = None,
        load_defaults: bool = True,
        clock: Clock = _utc_now,
    ) -> None:
        if isinstance(settings, AppendSettings) or settings is None:
            settings = SettingsProvider(settings)
        self.settings = settings
        self.store = store
        self.locks = PathLocks()
        self.selection = SelectionState()
        self.tracker = SelectionStateTracker(self.selection)
        self.clock = clock
        self.notifier = notifier
        self.commands = registry or CommandRegistry(
            logger_name="append_engine.commands"
        )
        if load_defaults and registry is None:
            load_default_commands(self.commands)

    def notify(self, message: str) -> None:
        telemetry.record_event("notice", data={"message": message})
        if self.notifier is not None:
            self.notifier(message)

    def reset_selection(self) -> None:
        self.tracker.reset()

    def handle_click(self) -> None:
        self.reset_selection()

    async def run_command(self, command_id: str, editor: EditorSurface) -> ActionResult:
        command = self.commands.get(command_id)
        with telemetry.span(f"command::{command.id}", component="commands"):
            outcome = command(self, editor)
            if inspect.isawaitable(outcome):
                outcome = await outcome
        if isinstance(outcome, ActionResult):
            return outcome
        return ActionResult(consumed=True)

    async def handle_key(self, key: KeyInput, editor: EditorSurface) -> ActionResult:
        """Reset the tracker unless ``key`` triggers select-all, then dispatch."""

        command = self.commands.match_hotkey(key.stroke)
        if command is None or command.id != SELECT_ALL_COMMAND_ID:
            self.reset_selection()
        if command is None:
            return ActionResult(consumed=False, status="unbound")
        return await self.run_command(command.id, editor)


__all__ = ["Clock", "Notifier", "PluginSession"]
