"""One editor session: a document, its cursor, the modes and the renderer."""

from __future__ import annotations

from os import PathLike
from typing import Any, MutableMapping, Optional, cast

from editor_core.buffer import Document, DocumentIOError
from editor_core.config import EditorConfig
from editor_core.keymaps import KeymapRegistry
from editor_core.keymaps.defaults import load_default_keymaps
from editor_core.modes import (
    EditMode,
    KeyInput,
    ModeBus,
    ModeContext,
    ModeManager,
    ModeResult,
    SaveAsMode,
    SearchMode,
)
from editor_core.modes.prompt_mode import PROMPT_STATE_KEY
from editor_core.runtime import telemetry
from editor_core.view import CursorController, Display, Renderer, Size, StatusMessage, text_area

HELP_MESSAGE = "HELP: Ctrl-F = find | Ctrl-S = save | Ctrl-Q = quit"


class EditorSession:
    """Headless editor: feed it ``KeyInput`` events and paint it on a ``Display``."""

    def __init__(
        self,
        document: Optional[Document] = None,
        *,
        terminal: Size,
        config: Optional[EditorConfig] = None,
        registry: Optional[KeymapRegistry] = None,
        status: str = HELP_MESSAGE,
    ) -> None:
        self.config = config or EditorConfig.from_env()
        self.controller = CursorController(
            document if document is not None else Document(),
            text_area(terminal),
            scroll_margin=self.config.scroll_margin,
        )
        self.context = ModeContext(
            controller=self.controller,
            bus=ModeBus(),
            config=self.config,
            status=StatusMessage(status),
        )
        if registry is None:
            registry = KeymapRegistry(logger_name="editor_core.keymaps")
            load_default_keymaps(registry)
        self.manager = ModeManager(self.context, keymap_registry=registry)
        self.manager.register_mode(EditMode)
        self.manager.register_mode(SearchMode)
        self.manager.register_mode(SaveAsMode)
        self.renderer = Renderer(status_timeout=self.config.status_timeout)
        self.should_quit = False

    @classmethod
    def open(
        cls,
        path: Optional[str | PathLike[str]],
        *,
        terminal: Size,
        config: Optional[EditorConfig] = None,
        **kwargs: Any,
    ) -> "EditorSession":
        """Start on ``path``, or on an empty untitled document if it can't be read."""

        if path is None:
            return cls(terminal=terminal, config=config, **kwargs)
        try:
            document = Document.open(path)
        except DocumentIOError as exc:
            telemetry.record_event(
                "session.open_failed", level="warning", data={"path": path, "error": exc}
            )
            return cls(
                Document(),
                terminal=terminal,
                config=config,
                status=f"ERR: {exc}",
                **kwargs,
            )
        return cls(document, terminal=terminal, config=config, **kwargs)

    @property
    def document(self) -> Document:
        return self.controller.document

    @property
    def mode(self) -> str:
        active = self.manager.active_mode
        return active.name if active else "?"

    @property
    def prompt_text(self) -> Optional[str]:
        state = self.context.extras.get(PROMPT_STATE_KEY)
        if isinstance(state, dict):
            return str(cast(MutableMapping[str, object], state).get("text", ""))
        return None

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = self.manager.handle_key(key)
        if result.status == "quit":
            self.should_quit = True
        return result

    def resize(self, terminal: Size) -> None:
        self.controller.resize(text_area(terminal))

    def refresh(self, display: Display) -> None:
        self.renderer.refresh(
            display,
            self.controller,
            status=self.context.status,
            prompt=self.prompt_text,
            quitting=self.should_quit,
        )


__all__ = ["EditorSession", "HELP_MESSAGE"]
