"""Textual host integration. ``app`` and ``surface`` need the ``textual`` extra."""

from .controller import TextualSpoolAdapter, TextualUIHooks

__all__ = ["TextualSpoolAdapter", "TextualUIHooks"]
