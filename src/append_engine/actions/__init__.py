"""Command handlers operating on an editing surface."""

from .base import ActionResult
from .extract import extract_selection
from .select_all import custom_select_all

__all__ = [
    "ActionResult",
    "custom_select_all",
    "extract_selection",
]
