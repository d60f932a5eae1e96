"""Built-in commands: extract selection and custom select-all."""

from __future__ import annotations

from typing import Iterable

from append_engine.actions import custom_select_all, extract_selection

from .models import Command, KeyStroke
from .registry import CommandRegistry

EXTRACT_COMMAND_ID = "append-selected-text"
SELECT_ALL_COMMAND_ID = "custom-select-all"

DEFAULT_SELECT_ALL_HOTKEYS: tuple[str, ...] = ("mod+a",)


def default_commands(
    *,
    select_all_hotkeys: Iterable[str] = DEFAULT_SELECT_ALL_HOTKEYS,
    extract_hotkeys: Iterable[str] = (),
) -> tuple[Command, ...]:
    return (
        Command(
            id=EXTRACT_COMMAND_ID,
            name="Append selected text to file and delete",
            handler=extract_selection,
            hotkeys=tuple(KeyStroke.parse(spec) for spec in extract_hotkeys),
        ),
        Command(
            id=SELECT_ALL_COMMAND_ID,
            name="Custom Select All (Paragraph first, then all)",
            handler=custom_select_all,
            hotkeys=tuple(KeyStroke.parse(spec) for spec in select_all_hotkeys),
            metadata={"selection_trigger": True},
        ),
    )


def load_default_commands(
    registry: CommandRegistry,
    *,
    select_all_hotkeys: Iterable[str] = DEFAULT_SELECT_ALL_HOTKEYS,
    extract_hotkeys: Iterable[str] = (),
) -> CommandRegistry:
    for command in default_commands(
        select_all_hotkeys=select_all_hotkeys, extract_hotkeys=extract_hotkeys
    ):
        registry.register(command)
    return registry


__all__ = [
    "DEFAULT_SELECT_ALL_HOTKEYS",
    "EXTRACT_COMMAND_ID",
    "SELECT_ALL_COMMAND_ID",
    "default_commands",
    "load_default_commands",
]
