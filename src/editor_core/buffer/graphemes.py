"""Grapheme cluster helpers on top of the ``grapheme`` package."""

from __future__ import annotations

from typing import List

import grapheme

ENCODING = "utf-8"


def split_graphemes(text: str) -> List[str]:
    return list(grapheme.graphemes(text))


def grapheme_count(text: str) -> int:
    return grapheme.length(text)


def truncate_graphemes(text: str, length: int) -> str:
    """Keep the first ``length`` user-perceived characters of ``text``.

    Unlike plain slicing this never cuts a cluster such as ``e`` + combining
    accent in half, and a ``length`` past the end returns ``text`` unchanged.
    """

    if length <= 0:
        return ""
    return grapheme.slice(text, 0, length)


def byte_length(text: str) -> int:
    return len(text.encode(ENCODING))


__all__ = [
    "ENCODING",
    "byte_length",
    "grapheme_count",
    "split_graphemes",
    "truncate_graphemes",
]
