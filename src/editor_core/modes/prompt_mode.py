"""Single-line prompt shown in the message bar."""

from __future__ import annotations

from typing import MutableMapping, cast

from editor_core.buffer import truncate_graphemes
from editor_core.buffer.graphemes import grapheme_count

from .base_mode import KeyInput, Mode, ModeContext, ModeResult, is_text_input, key_to_token

PROMPT_STATE_KEY = "prompt_state"
CANCEL_KEYS = frozenset({"ESC", "CTRL+q"})
SUBMIT_KEYS = frozenset({"ENTER"})


class PromptMode(Mode):
    """Collects a line of input; subclasses decide what submit/cancel mean.

    ``after_key`` runs after every keystroke that neither submits nor cancels,
    including keys that did not change the query (arrows, for instance).
    """

    name = "prompt"
    label = ""
    return_to = "edit"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.query = ""

    def on_enter(self, previous: str | None) -> None:
        del previous
        self.query = ""
        self._sync_prompt_state()

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self.query = ""
        self.context.extras.pop(PROMPT_STATE_KEY, None)

    @property
    def prompt_text(self) -> str:
        return f"{self.label}{self.query}"

    def handle_key(self, key: KeyInput) -> ModeResult:
        token = key_to_token(key)
        if token in CANCEL_KEYS:
            self.on_cancel()
            return ModeResult(consumed=True, switch_to=self.return_to, status="cancelled")
        if token in SUBMIT_KEYS:
            return self.on_submit()

        if token == "BACKSPACE":
            self.query = truncate_graphemes(
                self.query, grapheme_count(self.query) - 1
            )
        elif is_text_input(key) and key.text != "\t":
            self.query += cast(str, key.text)

        self._sync_prompt_state()
        return self.after_key(key)

    def after_key(self, key: KeyInput) -> ModeResult:
        del key
        return ModeResult(consumed=True, status="editing")

    def on_submit(self) -> ModeResult:
        return ModeResult(consumed=True, switch_to=self.return_to, status="submitted")

    def on_cancel(self) -> None:  # pragma: no cover - default no-op
        pass

    def _sync_prompt_state(self) -> None:
        state = cast(
            MutableMapping[str, object],
            self.context.extras.setdefault(PROMPT_STATE_KEY, {}),
        )
        state["mode"] = self.name
        state["text"] = self.prompt_text


__all__ = ["PROMPT_STATE_KEY", "PromptMode"]
