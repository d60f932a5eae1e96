"""Filesystem-backed document store rooted at a vault directory."""

from __future__ import annotations

import asyncio
from pathlib import Path

from append_engine.runtime import telemetry

from .base import normalize_path


class LocalDocumentStore:
    """Reads and writes UTF-8 text files below ``root``.

    Blocking file I/O runs in a worker thread so the event loop stays free.
    Parent directories are created on write.
    """

    def __init__(self, root: str | Path, *, encoding: str = "utf-8") -> None:
        self.root = Path(root)
        self.encoding = encoding

    def resolve(self, path: str) -> Path:
        relative = Path(normalize_path(path))
        if relative.is_absolute() or ".." in relative.parts:
            raise PermissionError(f"Path '{path}' escapes the vault root")
        return self.root / relative

    async def exists(self, path: str) -> bool:
        target = self.resolve(path)
        return await asyncio.to_thread(target.is_file)

    async def read(self, path: str) -> str:
        target = self.resolve(path)
        return await asyncio.to_thread(target.read_text, encoding=self.encoding)

    async def write(self, path: str, text: str) -> None:
        target = self.resolve(path)
        await asyncio.to_thread(self._write_sync, target, text)
        telemetry.record_event(
            "store.write", level="debug", data={"path": str(target), "chars": len(text)}
        )

    def _write_sync(self, target: Path, text: str) -> None:
        # an unencodable text must leave the target untouched
        data = text.encode(self.encoding)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)


__all__ = ["LocalDocumentStore"]
