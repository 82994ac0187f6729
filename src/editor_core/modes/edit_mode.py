"""Default mode: keymap-driven navigation and editing, plain typing otherwise."""

from __future__ import annotations

from editor_core.actions.file import QUIT_COUNTER_KEY
from editor_core.keymaps import KeymapRegistry, ResolutionMatch
from editor_core.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult, is_text_input, key_to_token


def require_keymap_registry(context: ModeContext) -> KeymapRegistry:
    registry = context.extras.get("keymap_registry")
    if not isinstance(registry, KeymapRegistry):
        raise RuntimeError("ModeContext.extras missing 'keymap_registry'")
    return registry


class EditMode(Mode):
    name = "edit"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._registry = require_keymap_registry(context)

    def handle_key(self, key: KeyInput) -> ModeResult:
        match = self._registry.resolve(self.name, key_to_token(key))
        if match is not None:
            result = self._execute_match(match)
        elif is_text_input(key):
            assert key.text is not None
            for char in key.text:
                self.context.controller.insert_char(char)
            result = ModeResult(consumed=True, status="edited")
        else:
            result = ModeResult(consumed=False, status="miss", message="unhandled")

        # Only consecutive quit presses count towards the confirmation.
        if result.status != "quit_pending":
            self.context.extras.pop(QUIT_COUNTER_KEY, None)
        return result

    def _execute_match(self, match: ResolutionMatch) -> ModeResult:
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            outcome = match.action(self.context, match)

        if isinstance(outcome, ModeResult):
            return outcome
        return ModeResult(consumed=True)


__all__ = ["EditMode", "require_keymap_registry"]
