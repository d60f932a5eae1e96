"""Command models, registry, and the built-in command set."""

from .models import Command, KeyInput, KeyStroke
from .registry import CommandConflictError, CommandRegistry, RegistryStats
from .defaults import (
    EXTRACT_COMMAND_ID,
    SELECT_ALL_COMMAND_ID,
    default_commands,
    load_default_commands,
)

__all__ = [
    "Command",
    "CommandConflictError",
    "CommandRegistry",
    "EXTRACT_COMMAND_ID",
    "KeyInput",
    "KeyStroke",
    "RegistryStats",
    "SELECT_ALL_COMMAND_ID",
    "default_commands",
    "load_default_commands",
]
