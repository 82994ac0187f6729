"""Grapheme-aware text buffer and cursor navigation core for a terminal editor."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "config",
    "keymaps",
    "modes",
    "runtime",
    "session",
    "view",
]

__version__ = "0.1.0"
