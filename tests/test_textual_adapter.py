from __future__ import annotations

from typing import List

from conftest import make_session

from editor_core.adapters.textual import (
    TextualEditorAdapter,
    TextualUIHooks,
    canvas_to_text,
    normalize_key,
)
from editor_core.view import CanvasDisplay, Size


def make_adapter(
    lines: list[str], *, terminal: Size = Size(40, 6)
) -> tuple[TextualEditorAdapter, List[List[str]], List[str], List[tuple[str, object | None]]]:
    screens: List[List[str]] = []
    logs: List[str] = []
    events: List[tuple[str, object | None]] = []
    hooks = TextualUIHooks(
        update_screen=lambda display: screens.append(display.text_lines()),
        handle_event=lambda name, payload: events.append((name, payload)),
        log=logs.append,
    )
    adapter = TextualEditorAdapter(make_session(lines, terminal=terminal), hooks, terminal)
    return adapter, screens, logs, events


def test_normalize_key_maps_named_keys_and_chords() -> None:
    assert normalize_key("up", None) == ("UP", None, ())
    assert normalize_key("pagedown", None) == ("PAGEDOWN", None, ())
    assert normalize_key("escape", None) == ("ESC", None, ())
    assert normalize_key("ctrl+s", None) == ("s", None, ("CTRL",))
    assert normalize_key("tab", "\t") == ("\t", "\t", ())
    assert normalize_key("a", "a") == ("a", "a", ())
    assert normalize_key("f1", None) is None


def test_adapter_paints_on_start_and_after_keys() -> None:
    adapter, screens, logs, _ = make_adapter(["abc"])
    assert screens[-1][0] == "abc"

    adapter.handle_textual_key("x", text="x")

    assert screens[-1][0] == "xabc"
    assert len(screens) == 2
    assert any(line.startswith("key ->") for line in logs)
    assert any(line.startswith("result <-") and "status='edited'" in line for line in logs)


def test_adapter_relays_search_events() -> None:
    adapter, _, _, events = make_adapter(["abc"])

    adapter.handle_textual_key("f", modifiers=("ctrl",))
    adapter.handle_textual_key("b", text="b")
    adapter.handle_textual_key("ENTER")

    names = [name for name, _ in events]
    assert names == ["search.start", "search.accept"]
    assert events[-1][1] == "b"


def test_adapter_requests_exit_on_quit() -> None:
    exits: List[bool] = []
    session = make_session(["abc"], terminal=Size(40, 6))
    hooks = TextualUIHooks(
        update_screen=lambda display: None,
        request_exit=lambda: exits.append(True),
    )
    adapter = TextualEditorAdapter(session, hooks, Size(40, 6))

    adapter.handle_textual_key("q", modifiers=("CTRL",))

    assert exits == [True]
    assert adapter.display.text_lines()[0] == "Goodbye."


def test_adapter_resize_repaints_new_size() -> None:
    adapter, screens, _, _ = make_adapter(["abc"])

    adapter.resize(Size(30, 4))

    assert len(screens[-1]) == 4
    assert adapter.session.controller.size == Size(30, 2)


def test_canvas_to_text_marks_cursor_cell() -> None:
    display = CanvasDisplay(10, 2)
    display.write("hello")
    display.cursor_position(display.cursor.with_x(1))

    text = canvas_to_text(display)

    assert text.plain == "hello\n"
    assert any(span.style == "reverse" and span.start == 1 and span.end == 2 for span in text.spans)
