"""Dict-backed document store for tests and headless hosts."""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from .base import normalize_path


class MemoryDocumentStore:
    def __init__(self, documents: Optional[Mapping[str, str]] = None) -> None:
        self._documents: Dict[str, str] = {
            normalize_path(path): text for path, text in (documents or {}).items()
        }
        self.writes: list[tuple[str, str]] = []

    async def exists(self, path: str) -> bool:
        return normalize_path(path) in self._documents

    async def read(self, path: str) -> str:
        key = normalize_path(path)
        try:
            return self._documents[key]
        except KeyError as exc:
            raise FileNotFoundError(path) from exc

    async def write(self, path: str, text: str) -> None:
        key = normalize_path(path)
        self._documents[key] = text
        self.writes.append((key, text))

    def get(self, path: str) -> Optional[str]:
        return self._documents.get(normalize_path(path))


__all__ = ["MemoryDocumentStore"]
