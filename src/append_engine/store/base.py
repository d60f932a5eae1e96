"""Document store protocol and per-path write serialization."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from pathlib import PurePosixPath
from typing import AsyncIterator, Dict, Protocol


class DocumentStore(Protocol):
    """Async read/write access to the host's persistent documents.

    Every method may raise ``OSError``.
    """

    async def exists(self, path: str) -> bool: ...

    async def read(self, path: str) -> str: ...

    async def write(self, path: str, text: str) -> None: ...


def normalize_path(path: str) -> str:
    """Canonical vault-relative key: forward slashes, no ``./`` prefix."""

    cleaned = path.replace("\\", "/").strip()
    return str(PurePosixPath(cleaned))


class PathLocks:
    """One ``asyncio.Lock`` per destination path.

    Holding ``locked(path)`` across a read-modify-write keeps concurrent
    inserts into the same document queued instead of racing. A lock is
    dropped once no task holds or waits on it.
    """

    def __init__(self) -> None:
        self._locks: Dict[str, asyncio.Lock] = {}
        self._users: Dict[str, int] = {}

    @asynccontextmanager
    async def locked(self, path: str) -> AsyncIterator[None]:
        key = normalize_path(path)
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._users[key] = self._users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if not self._users[key]:
                del self._users[key]
                del self._locks[key]

    def __len__(self) -> int:
        return len(self._locks)


__all__ = ["DocumentStore", "PathLocks", "normalize_path"]
