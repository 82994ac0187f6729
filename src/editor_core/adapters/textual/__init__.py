"""Textual host for the editor core.

The app module is not imported here so the adapter can be driven without a
running Textual application.
"""

from .controller import TextualEditorAdapter, TextualUIHooks, canvas_to_text, normalize_key

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "canvas_to_text", "normalize_key"]
