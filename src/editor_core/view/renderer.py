"""Composes the editor screen onto a ``Display``."""

from __future__ import annotations

import time
from typing import Callable, Optional

from editor_core import __version__
from editor_core.buffer import Document, Position, Row, saturating_sub, truncate_graphemes
from editor_core.buffer.graphemes import grapheme_count

from .display import Display, RgbColor
from .status import StatusMessage
from .viewport import CursorController, Size

STATUS_FG_COLOR = RgbColor(63, 63, 63)
STATUS_BG_COLOR = RgbColor(239, 239, 239)
# Rows reserved under the text area: status bar and message bar.
RESERVED_ROWS = 2
FILENAME_WIDTH = 20


def text_area(terminal: Size) -> Size:
    return Size(terminal.width, saturating_sub(terminal.height, RESERVED_ROWS))


def render_row(row: Row, offset_x: int, width: int) -> str:
    """Visible part of ``row`` for a viewport starting at grapheme ``offset_x``."""

    start = row.byte_index(offset_x)
    end = row.byte_index(offset_x + width)
    return row.render(start, end)


class Renderer:
    """Paints text rows, the status bar and the message bar."""

    def __init__(
        self,
        *,
        status_timeout: float = 5.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.status_timeout = status_timeout
        self._clock = clock

    def refresh(
        self,
        display: Display,
        controller: CursorController,
        *,
        status: StatusMessage,
        prompt: Optional[str] = None,
        quitting: bool = False,
    ) -> None:
        display.cursor_position(Position())
        if quitting:
            display.clear_screen()
            display.write("Goodbye.")
            display.flush()
            return

        self.draw_rows(display, controller)
        self.draw_status_bar(display, controller)
        self.draw_message_bar(display, controller, status=status, prompt=prompt)

        cursor, offset = controller.cursor, controller.offset
        display.cursor_position(
            Position(
                saturating_sub(cursor.x, offset.x),
                saturating_sub(cursor.y, offset.y),
            )
        )
        display.flush()

    def draw_rows(self, display: Display, controller: CursorController) -> None:
        document = controller.document
        width, height = controller.size.width, controller.size.height
        offset = controller.offset

        for screen_row in range(height):
            display.cursor_position(Position(0, screen_row))
            display.clear_current_line()
            row = document.get(offset.y + screen_row)
            if row is not None:
                display.write(render_row(row, offset.x, width))
            elif self._is_untitled_empty(document) and screen_row == height // 3:
                display.write(self._welcome_line(width))
            else:
                display.write("~")

    def draw_status_bar(self, display: Display, controller: CursorController) -> None:
        document = controller.document
        width = controller.size.width

        name = str(document.filename) if document.filename else "[No Name]"
        modified = " (modified)" if document.dirty else ""
        left = (
            f"{truncate_graphemes(name, FILENAME_WIDTH)} - "
            f"{len(document)} lines{modified}"
        )
        right = f"{controller.cursor.y + 1}/{len(document)}"
        padding = width - grapheme_count(left) - grapheme_count(right)
        if padding > 0:
            left += " " * padding

        display.cursor_position(Position(0, controller.size.height))
        display.clear_current_line()
        display.set_bg_color(STATUS_BG_COLOR)
        display.set_fg_color(STATUS_FG_COLOR)
        display.write(truncate_graphemes(left + right, width))
        display.reset_fg_color()
        display.reset_bg_color()

    def draw_message_bar(
        self,
        display: Display,
        controller: CursorController,
        *,
        status: StatusMessage,
        prompt: Optional[str] = None,
    ) -> None:
        display.cursor_position(Position(0, controller.size.height + 1))
        display.clear_current_line()
        if prompt is not None:
            text = prompt
        elif status.is_fresh(self.status_timeout, now=self._clock()):
            text = status.text
        else:
            return
        display.write(truncate_graphemes(text, controller.size.width))

    @staticmethod
    def _is_untitled_empty(document: Document) -> bool:
        return document.is_empty() and document.filename is None

    @staticmethod
    def _welcome_line(width: int) -> str:
        message = f"Editor core -- version {__version__}"
        length = grapheme_count(message)
        padding = saturating_sub(width, length) // 2
        line = "~" + " " * saturating_sub(padding, 1) + message
        return truncate_graphemes(line, width)


__all__ = ["RESERVED_ROWS", "Renderer", "render_row", "text_area"]
