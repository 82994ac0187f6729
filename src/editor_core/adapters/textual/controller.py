"""Textual-agnostic adapter that feeds host key events into an editor session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from rich.style import Style
from rich.text import Text

from editor_core.buffer import truncate_graphemes
from editor_core.modes import KeyInput, ModeResult
from editor_core.session import EditorSession
from editor_core.view import CanvasDisplay, Size

# Textual key names -> editor key tokens.
NAMED_KEYS: Dict[str, str] = {
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
    "pageup": "PAGEUP",
    "pagedown": "PAGEDOWN",
    "home": "HOME",
    "end": "END",
    "backspace": "BACKSPACE",
    "delete": "DELETE",
    "escape": "ESC",
    "enter": "ENTER",
}


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_screen: Callable[[CanvasDisplay], None]
    request_exit: Callable[[], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


def normalize_key(
    key: str, character: Optional[str]
) -> Optional[tuple[str, Optional[str], tuple[str, ...]]]:
    """Map a Textual ``(key, character)`` pair to ``(key, text, modifiers)``."""

    if key in NAMED_KEYS:
        return (NAMED_KEYS[key], None, ())
    if key.startswith("ctrl+"):
        return (key[len("ctrl+"):], None, ("CTRL",))
    if key == "tab":
        return ("\t", "\t", ())
    if character and character.isprintable():
        return (character, character, ())
    return None


def canvas_to_text(display: CanvasDisplay, *, show_cursor: bool = True) -> Text:
    """Convert painted canvas lines into styled ``rich`` text."""

    output = Text()
    for y, plain in enumerate(display.text_lines()):
        line = Text()
        for segment in display.segments(y):
            style = Style(
                color=segment.fg.hex if segment.fg else None,
                bgcolor=segment.bg.hex if segment.bg else None,
            )
            line.append(segment.text, style=style)
        if show_cursor and y == display.cursor.y:
            start = len(truncate_graphemes(plain, display.cursor.x))
            if start >= len(plain):
                line.append(" ")
            following = truncate_graphemes(line.plain[start:], 1)
            line.stylize("reverse", start, start + max(len(following), 1))
        if y:
            output.append("\n")
        output.append_text(line)
    return output


class TextualEditorAdapter:
    """Bridges host key events to an ``EditorSession`` and repaints after each."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks, terminal: Size) -> None:
        self.session = session
        self.hooks = hooks
        self.display = CanvasDisplay(terminal.width, terminal.height)
        self._subscribe_events()
        self.repaint()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Dispatch one normalized key and repaint the screen."""

        normalized_modifiers = tuple(str(mod).upper() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.session.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        self.repaint()
        if self.session.should_quit:
            self.hooks.request_exit()
        return result

    def resize(self, terminal: Size) -> None:
        self.display.resize(terminal.width, terminal.height)
        self.session.resize(terminal)
        self.repaint()

    def repaint(self) -> None:
        self.session.refresh(self.display)
        self.hooks.update_screen(self.display)

    def _subscribe_events(self) -> None:
        bus = self.session.context.bus
        for event in (
            "status.update",
            "document.saved",
            "search.start",
            "search.accept",
            "search.cancel",
            "editor.quit",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "mode": self.session.mode,
            "cursor": self.session.controller.cursor,
            "offset": self.session.controller.offset,
            "dirty": self.session.document.dirty,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))


__all__ = [
    "NAMED_KEYS",
    "TextualEditorAdapter",
    "TextualUIHooks",
    "canvas_to_text",
    "normalize_key",
]
