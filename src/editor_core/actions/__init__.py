"""Editing verbs bound to keys through the keymap registry."""

from .editing import delete_backward, delete_forward, insert_newline
from .file import quit_editor, save_document, save_file
from .navigation import move_cursor
from .search import start_search

__all__ = [
    "delete_backward",
    "delete_forward",
    "insert_newline",
    "move_cursor",
    "quit_editor",
    "save_document",
    "save_file",
    "start_search",
]
