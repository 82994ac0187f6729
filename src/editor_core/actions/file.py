"""Save and quit actions."""

from __future__ import annotations

from os import PathLike
from typing import TYPE_CHECKING, Optional, cast

from editor_core.buffer import DocumentIOError
from editor_core.modes.base_mode import ModeContext, ModeResult
from editor_core.runtime import telemetry

if TYPE_CHECKING:
    from editor_core.keymaps import ResolutionMatch

QUIT_COUNTER_KEY = "quit_times"


def save_document(
    context: ModeContext, path: Optional[str | PathLike[str]] = None
) -> bool:
    """Persist the document and report the outcome on the status line.

    A failed write leaves the document dirty; the error text is shown instead
    of being raised so the session keeps running.
    """

    try:
        written = context.document.save(path)
    except DocumentIOError as exc:
        telemetry.record_event(
            "document.save_failed", level="error", data={"error": str(exc)}
        )
        context.set_status(f"Error writing file: {exc}")
        return False
    context.bus.emit("document.saved", written)
    context.set_status("File saved successfully.")
    return True


def save_file(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    if context.document.filename is None:
        return ModeResult(consumed=True, switch_to="save_as", message="save_as")
    saved = save_document(context)
    return ModeResult(consumed=True, status="saved" if saved else "save_failed")


def quit_editor(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    """Quit, asking for repeated presses while there are unsaved changes."""

    del match
    remaining = cast(int, context.extras.get(QUIT_COUNTER_KEY, context.config.quit_times))
    if context.document.dirty and remaining > 0:
        context.set_status(
            "WARNING! File has unsaved changes. "
            f"Press Ctrl-Q {remaining} more times to quit."
        )
        context.extras[QUIT_COUNTER_KEY] = remaining - 1
        return ModeResult(consumed=True, status="quit_pending")

    context.bus.emit("editor.quit", None)
    return ModeResult(consumed=True, status="quit", message="quit")


__all__ = ["QUIT_COUNTER_KEY", "quit_editor", "save_document", "save_file"]
