"""Entry point into incremental search."""

from __future__ import annotations

from typing import TYPE_CHECKING

from editor_core.modes.base_mode import ModeContext, ModeResult

if TYPE_CHECKING:
    from editor_core.keymaps import ResolutionMatch


def start_search(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to="search", message="enter_search")


__all__ = ["start_search"]
