"""A single line of text addressed in grapheme clusters."""

from __future__ import annotations

from typing import Dict, List, Optional, Pattern

from .graphemes import byte_length, grapheme_count, split_graphemes, truncate_graphemes
from .state import SearchDirection


class Row:
    """One editable line.

    Every public index is a grapheme index, never a code point or byte offset,
    so ``"cafe\\u0301"`` has a length of 4. Indices at or past ``len(row)`` are
    treated as the append position instead of raising.
    """

    __slots__ = ("_content", "_length")

    def __init__(self, content: str = "") -> None:
        self._content = content
        self._length = 0
        self._update_length()

    @property
    def content(self) -> str:
        return self._content

    @property
    def len_bytes(self) -> int:
        """Length of the UTF-8 encoded content, used for rendering clamps."""

        return byte_length(self._content)

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        # Empty rows are still rows.
        return True

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Row):
            return self._content == other._content
        return NotImplemented

    def __repr__(self) -> str:
        return f"Row({self._content!r})"

    def is_empty(self) -> bool:
        return not self._content

    def insert(self, index: int, char: str) -> None:
        """Insert ``char`` before grapheme ``index`` or append past the end."""

        if index >= self._length:
            self._content += char
        else:
            clusters = split_graphemes(self._content)
            self._content = "".join(clusters[:index]) + char + "".join(clusters[index:])
        self._update_length()

    def delete(self, index: int) -> None:
        """Remove the whole grapheme cluster at ``index``; no-op past the end."""

        if index >= self._length:
            return
        clusters = split_graphemes(self._content)
        del clusters[index]
        self._content = "".join(clusters)
        self._update_length()

    def split(self, index: int) -> "Row":
        """Truncate to ``[0, index)`` and return the rest as a new row."""

        clusters = split_graphemes(self._content)
        self._content = "".join(clusters[:index])
        self._update_length()
        return Row("".join(clusters[index:]))

    def push(self, other: "Row") -> None:
        self._content += other._content
        self._update_length()

    def byte_index(self, index: int) -> int:
        """Byte offset at which grapheme ``index`` starts, clamped to the end."""

        return byte_length(truncate_graphemes(self._content, index))

    def render(self, start: int, end: int) -> str:
        """Return the clusters lying fully inside the byte window ``[start, end)``.

        Tabs are drawn as a single space. A cluster straddling either edge of
        the window is left out rather than cut in half.
        """

        end = min(end, self.len_bytes)
        start = min(start, end)

        visible: List[str] = []
        offset = 0
        for cluster in split_graphemes(self._content):
            if offset >= end:
                break
            size = byte_length(cluster)
            if offset >= start and offset + size <= end:
                visible.append(" " if cluster == "\t" else cluster)
            offset += size
        return "".join(visible)

    def find(
        self, pattern: Pattern[str], limit: int, direction: SearchDirection
    ) -> Optional[int]:
        """Grapheme index of the nearest match of ``pattern`` relative to ``limit``.

        Forward returns the first match in ``[limit, len)``; backward returns the
        last match in ``[0, limit)``. Matches that begin inside a cluster are
        skipped.
        """

        if limit > self._length:
            return None

        clusters = split_graphemes(self._content)
        if direction is SearchDirection.FORWARD:
            start, stop = limit, self._length
        else:
            start, stop = 0, limit

        window = clusters[start:stop]
        boundaries: Dict[int, int] = {}
        offset = 0
        for index, cluster in enumerate(window):
            boundaries[offset] = start + index
            offset += len(cluster)

        hits = [
            boundaries[match.start()]
            for match in pattern.finditer("".join(window))
            if match.start() in boundaries
        ]
        if not hits:
            return None
        return hits[0] if direction is SearchDirection.FORWARD else hits[-1]

    def _update_length(self) -> None:
        self._length = grapheme_count(self._content)


__all__ = ["Row"]
