"""List-of-lines text storage used by the in-memory buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence


@dataclass(slots=True)
class BufferDocument:
    """Immutable-ish text storage split on ``"\\n"``.

    Splitting keeps a trailing empty line when the text ends with a newline,
    so ``"\\n".join(lines)`` always round-trips the original text.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0

    @classmethod
    def from_text(cls, text: str, *, version: int = 0) -> "BufferDocument":
        return cls(_lines=text.split("\n"), version=version)

    def snapshot(self) -> Sequence[str]:
        return tuple(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def last_line(self) -> int:
        return len(self._lines) - 1

    def get_line(self, index: int) -> str:
        return self._lines[index]
