"""Error kinds raised while extracting text into the target document."""

from __future__ import annotations


class AppendEngineError(RuntimeError):
    """Base class for failures surfaced to the user as a notification."""

    notice: str = "Error"
    status: str = "error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.notice)

    @property
    def user_message(self) -> str:
        return str(self)


class EmptySelectionError(AppendEngineError):
    """Raised when extract is triggered with nothing selected."""

    notice = "No text selected!"
    status = "empty_selection"


class InvalidFilterPatternError(AppendEngineError):
    """Raised when the configured regex condition does not compile."""

    status = "invalid_pattern"

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(reason)
        self.pattern = pattern
        self.reason = reason

    @property
    def user_message(self) -> str:
        return f"Invalid regex: {self.reason}"


class FilterRejectedError(AppendEngineError):
    """Raised when the selected text does not match the regex condition."""

    notice = "Selected text does not match the regex condition!"
    status = "filter_rejected"

    def __init__(self, pattern: str) -> None:
        super().__init__()
        self.pattern = pattern


class StoreError(AppendEngineError):
    """I/O failure against the destination document."""

    status = "store_error"

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(reason)
        self.path = path
        self.reason = reason

    @property
    def user_message(self) -> str:
        return f"Error appending to file: {self.reason}"


class SourceChangedError(AppendEngineError):
    """Raised when the extracted range no longer holds the extracted text.

    The entry is already in the target; only the source deletion is skipped.
    """

    status = "source_changed"

    def __init__(self, target: str) -> None:
        super().__init__(
            f"Text appended to {target}, but the source changed so it was left"
            " in the editor"
        )
        self.target = target


class StoreReadError(StoreError):
    status = "store_read_error"


class StoreWriteError(StoreError):
    status = "store_write_error"


__all__ = [
    "AppendEngineError",
    "EmptySelectionError",
    "InvalidFilterPatternError",
    "FilterRejectedError",
    "SourceChangedError",
    "StoreError",
    "StoreReadError",
    "StoreWriteError",
]
