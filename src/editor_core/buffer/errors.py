"""Error types raised by the buffer layer."""

from __future__ import annotations

from os import PathLike


class DocumentIOError(RuntimeError):
    """Raised when a document cannot be read from or written to disk."""

    def __init__(self, message: str, *, path: str | PathLike[str] | None = None) -> None:
        super().__init__(message)
        self.path = path
