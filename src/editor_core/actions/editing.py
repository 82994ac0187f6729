"""Buffer-mutating actions bound to editing keys."""

from __future__ import annotations

from typing import TYPE_CHECKING

from editor_core.modes.base_mode import ModeContext, ModeResult

if TYPE_CHECKING:
    from editor_core.keymaps import ResolutionMatch


def insert_newline(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    context.controller.insert_char("\n")
    return ModeResult(consumed=True, status="edited")


def delete_forward(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    context.controller.delete()
    return ModeResult(consumed=True, status="edited")


def delete_backward(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    context.controller.backspace()
    return ModeResult(consumed=True, status="edited")


__all__ = ["delete_backward", "delete_forward", "insert_newline"]
