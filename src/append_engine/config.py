"""User-editable settings for the extract command."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Callable, List, Mapping, Optional

from append_engine.insertion import InsertionMode, InsertionPolicy
from append_engine.runtime import telemetry

SettingsListener = Callable[["AppendSettings"], None]

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class AppendSettings:
    """Where extracted text goes and which text qualifies.

    ``regex_condition`` empty disables filtering. ``header_marker`` only
    matters when ``prepend`` is set; empty means "prepend at the very top".
    """

    target_file: str = "output.md"
    regex_condition: str = ""
    prepend: bool = False
    header_marker: str = ""

    @property
    def policy(self) -> InsertionPolicy:
        mode = InsertionMode.PREPEND if self.prepend else InsertionMode.APPEND
        return InsertionPolicy(mode=mode, marker=self.header_marker or None)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "AppendSettings":
        """Merge saved ``data`` over the defaults, ignoring unknown keys."""

        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in (data or {}).items() if k in known}
        if "prepend" in values:
            values["prepend"] = _coerce_bool(values["prepend"])
        for key in ("target_file", "regex_condition", "header_marker"):
            if key in values:
                values[key] = "" if values[key] is None else str(values[key])
        return cls(**values)

    @classmethod
    def from_env(cls) -> "AppendSettings":
        """Read ``APPEND_ENGINE_TARGET_FILE`` and friends over the defaults."""

        data: dict[str, Any] = {}
        for name in ("target_file", "regex_condition", "prepend", "header_marker"):
            raw = telemetry.env(name.upper())
            if raw is not None:
                data[name] = raw
        return cls.from_mapping(data)

    def to_mapping(self) -> dict[str, Any]:
        return asdict(self)


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


class SettingsProvider:
    """Holds the live settings and notifies listeners on runtime updates."""

    def __init__(self, settings: Optional[AppendSettings] = None) -> None:
        self._settings = settings or AppendSettings()
        self._listeners: List[SettingsListener] = []

    @property
    def current(self) -> AppendSettings:
        return self._settings

    def subscribe(self, listener: SettingsListener) -> None:
        self._listeners.append(listener)

    def update(self, **changes: Any) -> AppendSettings:
        unknown = set(changes) - {f.name for f in fields(AppendSettings)}
        if unknown:
            raise ValueError(f"Unknown settings: {sorted(unknown)}")
        self._settings = AppendSettings.from_mapping(
            {**self._settings.to_mapping(), **changes}
        )
        telemetry.record_event("settings.update", data={"keys": sorted(changes)})
        for listener in self._listeners:
            listener(self._settings)
        return self._settings


__all__ = ["AppendSettings", "SettingsListener", "SettingsProvider"]
