"""Executable Textual app that hosts the editor core."""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use editor_core.adapters.textual.app"
    ) from exc

from editor_core.config import EditorConfig
from editor_core.runtime import telemetry
from editor_core.session import EditorSession
from editor_core.view import CanvasDisplay, Size

from .controller import TextualEditorAdapter, TextualUIHooks, canvas_to_text, normalize_key


class EditorApp(App[int]):
    """Full-screen editor painted into a single ``Static`` widget."""

    CSS = """
	Screen {
		layout: vertical;
		overflow: hidden;
	}

	#editor-screen {
		width: 1fr;
		height: 1fr;
	}
	"""

    # Ctrl-Q is the editor's own quit key, with unsaved-changes confirmation.
    BINDINGS = [
        Binding("ctrl+q", "editor_key('q')", show=False, priority=True),
    ]

    def __init__(self, path: Optional[str] = None, *, config: Optional[EditorConfig] = None) -> None:
        super().__init__()
        self._path = path
        self._config = config
        self.adapter: TextualEditorAdapter | None = None
        self._screen_widget: Static | None = None
        self._logger = telemetry.get_logger("editor_core.adapters.textual")

    def compose(self) -> ComposeResult:
        self._screen_widget = Static("", id="editor-screen")
        yield self._screen_widget

    def on_mount(self) -> None:
        terminal = Size(self.size.width, self.size.height)
        session = EditorSession.open(self._path, terminal=terminal, config=self._config)
        hooks = TextualUIHooks(
            update_screen=self._update_screen,
            request_exit=lambda: self.exit(0),
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(session, hooks, terminal)

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.resize(Size(event.size.width, event.size.height))

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = normalize_key(event.key, event.character)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()
        event.prevent_default()

    def action_editor_key(self, key: str) -> None:
        if self.adapter:
            self.adapter.handle_textual_key(key, modifiers=("CTRL",))

    def _update_screen(self, display: CanvasDisplay) -> None:
        if self._screen_widget:
            self._screen_widget.update(canvas_to_text(display))

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit a text file in the terminal.")
    parser.add_argument("file", nargs="?", help="File to open (optional)")
    parser.add_argument("--log-file", help="Write editor logs to this file")
    parser.add_argument(
        "--log-level",
        choices=[level.lower() for level in telemetry.LOG_LEVELS],
        help="Minimum level written to the log",
    )
    return parser.parse_args(argv)


def _telemetry_settings(args: argparse.Namespace) -> telemetry.TelemetrySettings:
    settings = telemetry.TelemetrySettings.from_env()
    if args.log_file:
        settings = replace(settings, log_file=args.log_file)
    if args.log_level:
        settings = replace(settings, level=args.log_level)
    return settings


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    telemetry.configure(_telemetry_settings(args))
    app = EditorApp(args.file, config=EditorConfig.from_env())
    result = app.run()
    return result if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover - manual run
    raise SystemExit(main())
