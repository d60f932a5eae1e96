"""Insertion policy describing where new entries land in the target document."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class InsertionMode(str, Enum):
    APPEND = "append"
    PREPEND = "prepend"


@dataclass(frozen=True, slots=True)
class InsertionPolicy:
    """Append/prepend mode plus the optional marker line used when prepending."""

    mode: InsertionMode = InsertionMode.APPEND
    marker: Optional[str] = None

    @classmethod
    def append(cls) -> "InsertionPolicy":
        return cls(InsertionMode.APPEND)

    @classmethod
    def prepend(cls, marker: Optional[str] = None) -> "InsertionPolicy":
        return cls(InsertionMode.PREPEND, marker)
