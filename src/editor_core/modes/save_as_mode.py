"""Prompt for a file name when saving an untitled document."""

from __future__ import annotations

from editor_core.actions.file import save_document

from .base_mode import ModeResult
from .prompt_mode import PromptMode


class SaveAsMode(PromptMode):
    name = "save_as"
    label = "Save as: "

    def on_submit(self) -> ModeResult:
        filename = self.query.strip()
        if not filename:
            self.context.set_status("Save aborted.")
            return ModeResult(consumed=True, switch_to=self.return_to, status="cancelled")

        saved = save_document(self.context, filename)
        return ModeResult(
            consumed=True,
            switch_to=self.return_to,
            status="saved" if saved else "save_failed",
            message=filename,
        )

    def on_cancel(self) -> None:
        self.context.set_status("Save aborted.")


__all__ = ["SaveAsMode"]
