"""Executable Textual app hosting the append engine around a TextArea."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widgets import Footer, Header, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use append_engine.adapters.textual.app"
    ) from exc

from append_engine.commands import EXTRACT_COMMAND_ID, SELECT_ALL_COMMAND_ID
from append_engine.config import AppendSettings
from append_engine.runtime import telemetry
from append_engine.session import PluginSession
from append_engine.store import LocalDocumentStore

from .controller import TextualSpoolAdapter, TextualUIHooks
from .surface import TextAreaSurface


class SourceTextArea(TextArea):
    """TextArea that resets the select-all tracker on clicks and ordinary keys.

    The select-all and extract hotkeys are app-level priority bindings and
    never reach this widget.
    """

    async def on_key(self, event: events.Key) -> None:
        app = self.app
        if isinstance(app, AppendEngineApp) and app.adapter and app.surface:
            *modifiers, key = event.key.split("+")
            await app.adapter.handle_textual_key(
                key, app.surface, text=event.character, modifiers=modifiers
            )

    def on_click(self, event: events.Click) -> None:
        app = self.app
        if isinstance(app, AppendEngineApp) and app.adapter is not None:
            app.adapter.handle_click(app.surface)


class AppendEngineApp(App[None]):
    """Edit a source note; move paragraphs into the target note."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #source {
        height: 1fr;
    }

    #status-line {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+a", "custom_select_all", "Select", priority=True),
        Binding("ctrl+e", "extract", "Extract", priority=True),
        Binding("ctrl+s", "save", "Save", priority=True),
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(self, *, vault: Path, source: str, settings: AppendSettings) -> None:
        super().__init__()
        self.vault = vault
        self.source = source
        self.append_settings = settings
        self.adapter: TextualSpoolAdapter | None = None
        self.surface: TextAreaSurface | None = None
        self._status: Static | None = None
        self.logger = telemetry.get_logger("append_engine.adapters.textual")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        source_path = self.vault / self.source
        text = source_path.read_text(encoding="utf-8") if source_path.is_file() else ""
        yield SourceTextArea(text, id="source")
        self._status = Static("", id="status-line")
        yield self._status
        yield Footer()

    def on_mount(self) -> None:
        text_area = self.query_one(SourceTextArea)
        self.surface = TextAreaSurface(text_area, source_path=self.source)
        session = PluginSession(
            LocalDocumentStore(self.vault), settings=self.append_settings
        )
        hooks = TextualUIHooks(
            notify=self._notify,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualSpoolAdapter(session, hooks)
        self._update_status(f"target: {self.append_settings.target_file}")
        text_area.focus()

    async def action_custom_select_all(self) -> None:
        if self.adapter and self.surface:
            await self.adapter.run_command(SELECT_ALL_COMMAND_ID, self.surface)

    async def action_extract(self) -> None:
        if self.adapter and self.surface:
            await self.adapter.run_command(EXTRACT_COMMAND_ID, self.surface)

    def action_save(self) -> None:
        text_area = self.query_one(SourceTextArea)
        target = self.vault / self.source
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text_area.text, encoding="utf-8")
        self._update_status(f"saved {self.source}")

    def _notify(self, message: str) -> None:
        self.notify(message)

    def _update_status(self, status: str) -> None:
        if self._status:
            self._status.update(status)

    def _log_line(self, line: str) -> None:
        self.logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    defaults = AppendSettings.from_env()
    parser = argparse.ArgumentParser(description="Run the append engine Textual demo.")
    parser.add_argument("source", help="Source note, relative to the vault root")
    parser.add_argument(
        "--vault",
        type=Path,
        default=Path(telemetry.env("VAULT") or "."),
        help="Vault root directory (default: $APPEND_ENGINE_VAULT or .)",
    )
    parser.add_argument("--target", default=defaults.target_file, help="Target note")
    parser.add_argument(
        "--regex",
        default=defaults.regex_condition,
        help="Regex the selection must match",
    )
    parser.add_argument(
        "--prepend",
        action="store_true",
        default=defaults.prepend,
        help="Insert new entries at the top (after --marker when present)",
    )
    parser.add_argument(
        "--marker", default=defaults.header_marker, help="Header marker line"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    settings = AppendSettings(
        target_file=args.target,
        regex_condition=args.regex,
        prepend=args.prepend,
        header_marker=args.marker,
    )
    app = AppendEngineApp(
        vault=args.vault,
        source=args.source,
        settings=settings,
    )
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
