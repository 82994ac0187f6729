"""Grapheme rows, the document model, and their value types."""

from .document import Document
from .errors import DocumentIOError
from .graphemes import truncate_graphemes
from .row import Row
from .state import Position, SearchDirection, saturating_sub

__all__ = [
    "Document",
    "DocumentIOError",
    "Position",
    "Row",
    "SearchDirection",
    "saturating_sub",
    "truncate_graphemes",
]
