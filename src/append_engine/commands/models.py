"""Dataclasses describing commands and their hotkeys."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

# Host modifier names folded into the platform-neutral ``mod`` alias.
MOD_ALIASES = frozenset({"mod", "ctrl", "control", "meta", "cmd", "command"})


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = []
    for raw in modifiers:
        name = raw.strip().lower()
        if not name:
            continue
        values.append("mod" if name in MOD_ALIASES else name)
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press; ``ctrl`` and ``meta`` both become ``mod``."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", self.key.lower())
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @classmethod
    def parse(cls, spec: str) -> "KeyStroke":
        """Parse ``"mod+a"`` / ``"ctrl+shift+e"`` style strings."""

        parts = [part for part in spec.split("+") if part.strip()]
        if not parts:
            raise ValueError("hotkey cannot be empty")
        return cls(parts[-1].strip(), tuple(parts[:-1]))

    @property
    def token(self) -> str:
        if self.modifiers:
            return "+".join((*self.modifiers, self.key))
        return self.key


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Raw key press reported by the host."""

    key: str
    modifiers: tuple[str, ...] = ()
    text: str | None = None

    @property
    def stroke(self) -> KeyStroke:
        return KeyStroke(self.key, self.modifiers)


@dataclass(frozen=True, slots=True)
class Command:
    """A named action invocable from a palette or its hotkeys.

    ``handler`` receives ``(session, editor)`` and may return an awaitable.
    """

    id: str
    name: str
    handler: Callable[..., object]
    hotkeys: tuple[KeyStroke, ...] = ()
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Command id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        hotkeys = tuple(
            key if isinstance(key, KeyStroke) else KeyStroke.parse(str(key))
            for key in self.hotkeys
        )
        object.__setattr__(self, "hotkeys", hotkeys)
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


__all__ = ["Command", "KeyInput", "KeyStroke", "MOD_ALIASES"]
