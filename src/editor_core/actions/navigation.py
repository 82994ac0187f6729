"""Cursor movement actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from editor_core.modes.base_mode import ModeContext, ModeResult
from editor_core.view import Motion

if TYPE_CHECKING:
    from editor_core.keymaps import ResolutionMatch


def move_cursor(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    """Move the cursor by the ``motion`` stored in the action's metadata."""

    motion = Motion(match.action.metadata["motion"])
    context.controller.move(motion)
    return ModeResult(consumed=True, status="moved")


__all__ = ["move_cursor"]
