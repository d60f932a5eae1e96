"""Result type shared by every command handler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class ActionResult:
    """Outcome of a command, surfaced to hosts for status display."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
