"""UI-agnostic engine for paragraph-aware selection and text extraction."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "commands",
    "config",
    "errors",
    "insertion",
    "runtime",
    "selection",
    "session",
    "store",
]

__version__ = "0.1.0"
