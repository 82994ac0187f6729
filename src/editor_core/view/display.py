"""Display collaborator protocol and an in-memory implementation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from editor_core.buffer import Position
from editor_core.buffer.graphemes import grapheme_count


@dataclass(frozen=True, slots=True)
class RgbColor:
    red: int
    green: int
    blue: int

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


class Display(Protocol):
    """Screen-painting primitives the renderer relies on.

    Coordinates are 0-based. Implementations decide how (or whether) text is
    actually shown; the renderer never emits escape sequences itself.
    """

    def clear_screen(self) -> None:
        ...

    def clear_current_line(self) -> None:
        ...

    def cursor_position(self, position: Position) -> None:
        ...

    def set_fg_color(self, color: RgbColor) -> None:
        ...

    def reset_fg_color(self) -> None:
        ...

    def set_bg_color(self, color: RgbColor) -> None:
        ...

    def reset_bg_color(self) -> None:
        ...

    def write(self, text: str) -> None:
        ...

    def flush(self) -> None:
        ...


@dataclass(slots=True)
class Segment:
    """Run of text painted with one color pair."""

    text: str
    fg: Optional[RgbColor] = None
    bg: Optional[RgbColor] = None


@dataclass(slots=True)
class CanvasDisplay:
    """Headless ``Display`` that records what was painted, line by line."""

    width: int
    height: int
    cursor: Position = field(default_factory=Position)
    fg: Optional[RgbColor] = None
    bg: Optional[RgbColor] = None
    flushes: int = 0
    _lines: List[List[Segment]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._lines = [[] for _ in range(self.height)]

    def clear_screen(self) -> None:
        self._lines = [[] for _ in range(self.height)]

    def clear_current_line(self) -> None:
        if self.cursor.y < self.height:
            self._lines[self.cursor.y] = []

    def cursor_position(self, position: Position) -> None:
        self.cursor = position

    def set_fg_color(self, color: RgbColor) -> None:
        self.fg = color

    def reset_fg_color(self) -> None:
        self.fg = None

    def set_bg_color(self, color: RgbColor) -> None:
        self.bg = color

    def reset_bg_color(self) -> None:
        self.bg = None

    def write(self, text: str) -> None:
        # Text is appended to the current line; the renderer always positions
        # the cursor at column 0 before painting a line.
        if self.cursor.y >= self.height or not text:
            return
        self._lines[self.cursor.y].append(Segment(text, self.fg, self.bg))
        self.cursor = self.cursor.with_x(self.cursor.x + grapheme_count(text))

    def flush(self) -> None:
        self.flushes += 1

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.clear_screen()

    def segments(self, y: int) -> List[Segment]:
        return list(self._lines[y])

    def text_lines(self) -> List[str]:
        return ["".join(segment.text for segment in line) for line in self._lines]


__all__ = ["CanvasDisplay", "Display", "RgbColor", "Segment"]
