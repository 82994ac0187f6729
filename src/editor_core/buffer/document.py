"""The document: an ordered list of rows plus file and dirty-state metadata."""

from __future__ import annotations

from os import PathLike
from typing import Iterable, Iterator, List, Optional, Pattern, Sequence

from editor_core.runtime import telemetry

from .errors import DocumentIOError
from .graphemes import ENCODING
from .row import Row
from .state import Position, SearchDirection

PathType = str | PathLike[str]


class Document:
    """Rows in on-disk order.

    Edits never raise for out-of-range positions: a row index at or past the end
    appends, anything further out is ignored.
    """

    def __init__(
        self,
        rows: Iterable[Row] | None = None,
        *,
        filename: Optional[PathType] = None,
    ) -> None:
        self._rows: List[Row] = list(rows or ())
        self.filename = filename
        self.dirty = False

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], *, filename: Optional[PathType] = None
    ) -> "Document":
        return cls((Row(line) for line in lines), filename=filename)

    @classmethod
    def open(cls, path: PathType) -> "Document":
        """Load ``path`` with one row per line-feed terminated line.

        Only ``\\n`` separates lines; a ``\\r`` before it stays in the row.
        """

        with telemetry.span(
            "document::open", component="buffer", metadata={"path": path}
        ) as handle:
            try:
                with open(path, encoding=ENCODING, newline="") as fh:
                    text = fh.read()
            except (OSError, UnicodeDecodeError) as exc:
                raise DocumentIOError(
                    f"Could not open file: {path}", path=path
                ) from exc

            lines = text.split("\n")
            if lines[-1] == "":
                lines.pop()
            handle.add_metadata("rows", len(lines))
            return cls.from_lines(lines, filename=path)

    def save(self, path: Optional[PathType] = None) -> int:
        """Write every row followed by a newline and return the bytes written."""

        target = path if path is not None else self.filename
        if target is None:
            raise DocumentIOError("No file name to save to")

        with telemetry.span(
            "document::save", component="buffer", metadata={"path": target}
        ):
            written = 0
            try:
                with open(target, "wb") as fh:
                    for row in self._rows:
                        data = row.content.encode(ENCODING) + b"\n"
                        fh.write(data)
                        written += len(data)
            except OSError as exc:
                raise DocumentIOError(str(exc), path=target) from exc

        self.filename = target
        self.dirty = False
        telemetry.record_event(
            "document.save", data={"path": target, "bytes": written}
        )
        return written

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def is_empty(self) -> bool:
        return not self._rows

    def get(self, index: int) -> Optional[Row]:
        if 0 <= index < len(self._rows):
            return self._rows[index]
        return None

    def lines(self) -> Sequence[str]:
        """Return the current row contents without exposing the rows."""

        return tuple(row.content for row in self._rows)

    def insert(self, at: Position, char: str) -> None:
        if char == "\n":
            self._insert_newline(at)
            return

        if at.y >= len(self._rows):
            self._rows.append(Row(char))
        else:
            self._rows[at.y].insert(at.x, char)
        self.dirty = True

    def _insert_newline(self, at: Position) -> None:
        if at.y > len(self._rows):
            return
        if at.y == len(self._rows):
            self._rows.append(Row())

        suffix = self._rows[at.y].split(at.x)
        self._rows.insert(at.y + 1, suffix)
        self.dirty = True

    def delete(self, at: Position) -> None:
        """Delete the grapheme at ``at``, joining the next row at end of line."""

        if at.y >= len(self._rows):
            return

        row = self._rows[at.y]
        if at.x == len(row) and at.y + 1 < len(self._rows):
            row.push(self._rows.pop(at.y + 1))
        else:
            row.delete(at.x)
        self.dirty = True

    def find(
        self, pattern: Pattern[str], at: Position, direction: SearchDirection
    ) -> Optional[Position]:
        """Absolute position of the nearest match scanning from ``at``."""

        if at.y >= len(self._rows):
            return None

        forward = direction is SearchDirection.FORWARD
        rows = range(at.y, len(self._rows)) if forward else range(at.y, -1, -1)
        limit = at.x
        for y in rows:
            row = self._rows[y]
            x = row.find(pattern, limit, direction)
            if x is not None:
                return Position(x, y)
            if forward:
                limit = 0
            elif y > 0:
                limit = len(self._rows[y - 1])
        return None


__all__ = ["Document"]
