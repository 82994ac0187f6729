from __future__ import annotations

from typing import Iterable

import pytest

from editor_core.buffer import Document
from editor_core.config import EditorConfig
from editor_core.modes import KeyInput
from editor_core.session import EditorSession
from editor_core.view import Size


def press(session: EditorSession, key: str, *modifiers: str) -> None:
    session.handle_key(KeyInput(key=key, modifiers=tuple(modifiers)))


def type_text(session: EditorSession, text: str) -> None:
    for char in text:
        session.handle_key(KeyInput(key=char, text=char))


def make_session(
    lines: Iterable[str] = (),
    *,
    filename: str | None = None,
    terminal: Size = Size(80, 24),
    config: EditorConfig | None = None,
) -> EditorSession:
    document = Document.from_lines(lines, filename=filename)
    return EditorSession(document, terminal=terminal, config=config or EditorConfig())


@pytest.fixture
def session() -> EditorSession:
    return make_session(["one foo", "two foo", "three"])
