"""EditorSurface implementation over a Textual ``TextArea``."""

from __future__ import annotations

from typing import Optional

try:  # pragma: no cover - imported only when the demo host runs
    from textual.widgets import TextArea
    from textual.widgets.text_area import Selection as TextSelection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use append_engine.adapters.textual.surface"
    ) from exc

from append_engine.buffer import Cursor, EditorHandle, Selection, normalize_selection


class TextAreaSurface:
    """Exposes one ``TextArea`` as an ``EditorSurface``."""

    def __init__(
        self, text_area: TextArea, *, source_path: Optional[str] = None
    ) -> None:
        self.text_area = text_area
        self._source_path = source_path
        self._handle = EditorHandle(label=text_area.id or "text-area")

    @property
    def handle(self) -> EditorHandle:
        return self._handle

    @property
    def source_path(self) -> Optional[str]:
        return self._source_path

    @property
    def line_count(self) -> int:
        return self.text_area.document.line_count

    def get_line(self, index: int) -> str:
        return self.text_area.document.get_line(index)

    def get_cursor(self) -> Cursor:
        line, col = self.text_area.cursor_location
        return (line, col)

    def get_selection(self) -> Optional[Selection]:
        selection = self.text_area.selection
        if selection.is_empty:
            return None
        start, end = selection
        return normalize_selection((tuple(start), tuple(end)))  # type: ignore[arg-type]

    def set_selection(self, start: Cursor, end: Cursor) -> None:
        self.text_area.selection = TextSelection(start, end)

    def selected_text(self) -> str:
        return self.text_area.selected_text

    def replace_selection(self, text: str) -> None:
        start, end = sorted(self.text_area.selection)
        self.text_area.replace(text, start, end)

    def get_text_range(self, start: Cursor, end: Cursor) -> str:
        return self.text_area.get_text_range(start, end)

    def replace_range(self, start: Cursor, end: Cursor, text: str) -> None:
        self.text_area.replace(text, start, end)


__all__ = ["TextAreaSurface"]
