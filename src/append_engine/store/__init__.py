"""Persistent document stores and the per-path insert lock."""

from .base import DocumentStore, PathLocks, normalize_path
from .local import LocalDocumentStore
from .memory import MemoryDocumentStore

__all__ = [
    "DocumentStore",
    "LocalDocumentStore",
    "MemoryDocumentStore",
    "PathLocks",
    "normalize_path",
]
