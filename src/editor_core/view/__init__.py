"""Cursor/viewport control and screen composition."""

from .display import CanvasDisplay, Display, RgbColor, Segment
from .renderer import Renderer, render_row, text_area
from .status import StatusMessage
from .viewport import CursorController, Motion, Size

__all__ = [
    "CanvasDisplay",
    "CursorController",
    "Display",
    "Motion",
    "Renderer",
    "RgbColor",
    "Segment",
    "Size",
    "StatusMessage",
    "render_row",
    "text_area",
]
