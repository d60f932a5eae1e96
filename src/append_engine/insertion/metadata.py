"""Metadata prefix attached to every extracted entry."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import PurePosixPath
from typing import Optional

UNKNOWN_SOURCE = "Unknown File"


def source_label_for(path: Optional[str]) -> Optional[str]:
    """Basename without extension, e.g. ``notes/Daily.md`` -> ``Daily``."""

    if not path:
        return None
    return PurePosixPath(path.replace("\\", "/")).stem or None


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def format_entry(
    source_label: Optional[str], entry_text: str, now: Optional[datetime] = None
) -> str:
    """Prefix ``entry_text`` with a ``<sub>`` reference line.

    ``<sub>[[Label]] | 2025-01-01 | 09:00:</sub>`` followed by a newline and
    the text verbatim. Timestamps are rendered in UTC; naive datetimes are
    taken to already be UTC.
    """

    moment = _as_utc(now or datetime.now(timezone.utc))
    link = f"[[{source_label or UNKNOWN_SOURCE}]]"
    stamp = f"{moment:%Y-%m-%d} | {moment:%H:%M}"
    return f"<sub>{link} | {stamp}:</sub>\n{entry_text}"


__all__ = ["UNKNOWN_SOURCE", "format_entry", "source_label_for"]
