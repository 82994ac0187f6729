"""Cursor placement and viewport scrolling over a document."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from editor_core.buffer import Document, Position, saturating_sub


class Motion(str, Enum):
    """Navigation intents understood by ``CursorController.move``."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"


@dataclass(frozen=True, slots=True)
class Size:
    width: int
    height: int


class CursorController:
    """Owns the cursor and the viewport offset for one document.

    The cursor always addresses an existing row (row 0 of an empty document)
    and never sits past that row's grapheme count. ``offset`` is the top-left
    visible position and is recomputed after every cursor change.
    """

    def __init__(
        self,
        document: Document,
        size: Size,
        *,
        scroll_margin: int = 5,
    ) -> None:
        self.document = document
        self.size = size
        self.scroll_margin = scroll_margin
        self.cursor = Position()
        self.offset = Position()

    def move(self, motion: Motion) -> None:
        x, y = self.cursor.x, self.cursor.y
        last_row = saturating_sub(len(self.document), 1)
        width = self._row_width(y)

        if motion is Motion.UP:
            y = saturating_sub(y, 1)
        elif motion is Motion.DOWN:
            y = min(y + 1, last_row)
        elif motion is Motion.LEFT:
            if x > 0:
                x -= 1
            elif y > 0:
                y -= 1
                x = self._row_width(y)
        elif motion is Motion.RIGHT:
            if x < width:
                x += 1
            elif y < last_row:
                y += 1
                x = 0
        elif motion is Motion.PAGE_UP:
            y = saturating_sub(y, self.size.height)
        elif motion is Motion.PAGE_DOWN:
            y = min(y + self.size.height, last_row)
        elif motion is Motion.HOME:
            x = 0
        elif motion is Motion.END:
            x = width

        self._place(x, y)

    def insert_char(self, char: str) -> None:
        """Insert at the cursor and step past what was typed."""

        if char == "\n":
            self.document.insert(self.cursor, char)
            self.move(Motion.RIGHT)
            return

        x, y = self.cursor.x, self.cursor.y
        before = self._row_width(y)
        self.document.insert(self.cursor, char)
        # A combining mark merges into the previous cluster and adds no column.
        grown = self._row_width(y) - before
        self._place(x + grown, y)

    def delete(self) -> None:
        self.document.delete(self.cursor)
        self._place(self.cursor.x, self.cursor.y)

    def backspace(self) -> None:
        if self.cursor.x == 0 and self.cursor.y == 0:
            return
        self.move(Motion.LEFT)
        self.delete()

    def jump_to(self, position: Position) -> None:
        self._place(position.x, position.y)

    def restore(self, cursor: Position, offset: Position) -> None:
        self.offset = offset
        self._place(cursor.x, cursor.y)

    def resize(self, size: Size) -> None:
        self.size = size
        self.scroll()

    def scroll(self) -> None:
        """Bring the cursor into view, keeping ``scroll_margin`` rows around it."""

        height = self.size.height
        width = self.size.width
        x, y = self.cursor.x, self.cursor.y
        row_count = len(self.document)

        offset_y = self.offset.y
        if height == 0:
            offset_y = y
        elif row_count > height:
            margin = min(self.scroll_margin, saturating_sub(height, 1) // 2)
            if y < offset_y + margin:
                offset_y = saturating_sub(y, margin)
            elif y + margin >= offset_y + height:
                offset_y = saturating_sub(y + margin + 1, height)
            offset_y = min(offset_y, saturating_sub(row_count, height))
        else:
            offset_y = 0

        offset_x = self.offset.x
        if x < offset_x:
            offset_x = x
        elif x >= offset_x + width:
            offset_x = saturating_sub(x + 1, width) if width else x

        self.offset = Position(offset_x, offset_y)

    def _row_width(self, y: int) -> int:
        row = self.document.get(y)
        return len(row) if row is not None else 0

    def _place(self, x: int, y: int) -> None:
        y = min(y, saturating_sub(len(self.document), 1))
        x = min(x, self._row_width(y))
        self.cursor = Position(x, y)
        self.scroll()


__all__ = ["CursorController", "Motion", "Size"]
