"""Optional regex gate evaluated against the raw selected text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal, Optional


@dataclass(frozen=True, slots=True)
class FilterOutcome:
    status: Literal["pass", "reject", "invalid"]
    message: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.status == "pass"


PASS = FilterOutcome("pass")
REJECT = FilterOutcome("reject")


def evaluate(pattern: Optional[str], text: str) -> FilterOutcome:
    """Test ``text`` against ``pattern``; an empty pattern always passes.

    The pattern is searched anywhere in ``text`` (not anchored).
    """

    if not pattern:
        return PASS
    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        return FilterOutcome("invalid", str(exc))
    return PASS if compiled.search(text) else REJECT


__all__ = ["FilterOutcome", "PASS", "REJECT", "evaluate"]
