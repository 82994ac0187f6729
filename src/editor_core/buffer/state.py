"""Coordinate and direction value types shared by the buffer and the view."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SearchDirection(str, Enum):
    """Direction a search scans the document in."""

    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass(frozen=True, slots=True)
class Position:
    """Grapheme column ``x`` on row ``y``; both are non-negative."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Position coordinates must be >= 0, got ({self.x}, {self.y})")

    def with_x(self, x: int) -> "Position":
        return Position(x, self.y)

    def with_y(self, y: int) -> "Position":
        return Position(self.x, y)


def saturating_sub(value: int, amount: int) -> int:
    """Subtract without dropping below zero."""

    return value - amount if value > amount else 0


__all__ = ["Position", "SearchDirection", "saturating_sub"]
