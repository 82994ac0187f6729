"""Base classes and shared utilities for editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from editor_core.buffer import Document
from editor_core.config import EditorConfig
from editor_core.view import CursorController, StatusMessage


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to modes."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key``."""

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


class ModeBus:
    """Minimal event bus letting modes exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode can access."""

    controller: CursorController
    bus: ModeBus
    config: EditorConfig = field(default_factory=EditorConfig)
    status: StatusMessage = field(default_factory=StatusMessage)
    extras: Dict[str, object] = field(default_factory=dict)

    @property
    def document(self) -> Document:
        return self.controller.document

    def set_status(self, text: str) -> None:
        self.status = StatusMessage(text)
        self.bus.emit("status.update", text)


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(
        self, previous: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del previous

    def on_exit(
        self, next_mode: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del next_mode

    def handle_key(
        self, key: KeyInput
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError


def key_to_token(key: KeyInput) -> str:
    if key.modifiers:
        modifiers = sorted(dict.fromkeys(m.upper() for m in key.modifiers))
        return "+".join(modifiers + [key.key])
    return key.key


def is_text_input(key: KeyInput) -> bool:
    """Whether ``key`` carries text that should be typed into the buffer."""

    if key.modifiers and "CTRL" in {m.upper() for m in key.modifiers}:
        return False
    text = key.text
    return bool(text) and (text == "\t" or text.isprintable())


__all__ = [
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "is_text_input",
    "key_to_token",
]
