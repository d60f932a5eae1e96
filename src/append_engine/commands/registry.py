"""Command registry with hotkey lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional

from append_engine.runtime.telemetry import span

from .models import Command, KeyStroke


@dataclass(slots=True)
class RegistryStats:
    command_count: int
    hotkey_count: int


class CommandConflictError(RuntimeError):
    """Raised when a command id or hotkey is already taken."""

    def __init__(self, command: Command, conflicts: Iterable[str]):
        conflicts_tuple = tuple(conflicts)
        message = f"Command '{command.id}' conflicts with {list(conflicts_tuple)}"
        super().__init__(message)
        self.command = command
        self.conflicts = conflicts_tuple


class CommandRegistry:
    """Owns commands and the hotkey -> command index."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._commands: Dict[str, Command] = {}
        self._hotkeys: Dict[KeyStroke, str] = {}
        self._logger_name = logger_name

    def register(self, command: Command, *, replace: bool = False) -> Command:
        with span(
            "commands::register",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command.id},
        ) as handle:
            conflicts = self.detect_conflicts(command)
            if conflicts and not replace:
                handle.add_metadata("conflicts", ",".join(conflicts))
                raise CommandConflictError(command, conflicts)
            for command_id in conflicts:
                self.unregister(command_id)
            self._commands[command.id] = command
            for hotkey in command.hotkeys:
                self._hotkeys[hotkey] = command.id
            return command

    def unregister(self, command_id: str) -> Optional[Command]:
        command = self._commands.pop(command_id, None)
        if command is None:
            return None
        for hotkey in command.hotkeys:
            if self._hotkeys.get(hotkey) == command_id:
                del self._hotkeys[hotkey]
        return command

    def get(self, command_id: str) -> Command:
        try:
            return self._commands[command_id]
        except KeyError as exc:
            raise KeyError(f"Command '{command_id}' is not registered") from exc

    def iter_commands(self) -> Iterator[Command]:
        yield from self._commands.values()

    def match_hotkey(self, stroke: KeyStroke) -> Optional[Command]:
        command_id = self._hotkeys.get(stroke)
        return self._commands.get(command_id) if command_id else None

    def detect_conflicts(self, command: Command) -> list[str]:
        conflicts: list[str] = []
        if command.id in self._commands:
            conflicts.append(command.id)
        for hotkey in command.hotkeys:
            owner = self._hotkeys.get(hotkey)
            if owner and owner not in conflicts:
                conflicts.append(owner)
        return conflicts

    def stats(self) -> RegistryStats:
        return RegistryStats(
            command_count=len(self._commands), hotkey_count=len(self._hotkeys)
        )


__all__ = ["CommandConflictError", "CommandRegistry", "RegistryStats"]
