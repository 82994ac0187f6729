from __future__ import annotations

from conftest import make_session, press, type_text

from editor_core.buffer import Position
from editor_core.session import EditorSession


def start_search(session: EditorSession) -> None:
    press(session, "f", "CTRL")
    assert session.mode == "search"


def test_typing_moves_cursor_to_first_match(session: EditorSession) -> None:
    start_search(session)

    type_text(session, "f")
    assert session.controller.cursor == Position(4, 0)

    type_text(session, "oo")
    assert session.controller.cursor == Position(4, 0)
    assert session.prompt_text == "Search (ESC to cancel, Arrows to navigate): foo"


def test_arrows_step_between_matches(session: EditorSession) -> None:
    start_search(session)
    type_text(session, "foo")

    press(session, "DOWN")
    assert session.controller.cursor == Position(4, 1)

    press(session, "UP")
    assert session.controller.cursor == Position(4, 0)


def test_failed_forward_step_leaves_cursor_in_place(session: EditorSession) -> None:
    start_search(session)
    type_text(session, "three")
    assert session.controller.cursor == Position(0, 2)

    press(session, "RIGHT")

    assert session.controller.cursor == Position(0, 2)


def test_enter_keeps_match_position(session: EditorSession) -> None:
    start_search(session)
    type_text(session, "two")

    press(session, "ENTER")

    assert session.mode == "edit"
    assert session.controller.cursor == Position(0, 1)
    assert session.prompt_text is None


def test_escape_restores_cursor_and_offset() -> None:
    session = make_session([f"line {i}" for i in range(100)] + ["needle"])
    start_search(session)
    type_text(session, "needle")
    assert session.controller.cursor == Position(0, 100)
    assert session.controller.offset.y > 0

    press(session, "ESC")

    assert session.mode == "edit"
    assert session.controller.cursor == Position(0, 0)
    assert session.controller.offset == Position(0, 0)


def test_ctrl_q_cancels_search(session: EditorSession) -> None:
    start_search(session)
    type_text(session, "two")

    press(session, "q", "CTRL")

    assert session.mode == "edit"
    assert session.controller.cursor == Position(0, 0)
    assert session.should_quit is False


def test_invalid_pattern_is_treated_as_no_match(session: EditorSession) -> None:
    start_search(session)

    type_text(session, "(")
    assert session.mode == "search"
    assert session.controller.cursor == Position(0, 0)

    type_text(session, "t)")
    assert session.controller.cursor == Position(0, 1)


def test_query_is_a_regular_expression(session: EditorSession) -> None:
    start_search(session)

    type_text(session, "^t.o")

    assert session.controller.cursor == Position(0, 1)


def test_backspace_edits_query(session: EditorSession) -> None:
    start_search(session)
    type_text(session, "thx")
    assert session.controller.cursor == Position(0, 2)

    press(session, "BACKSPACE")

    assert session.prompt_text is not None
    assert session.prompt_text.endswith(": th")
    assert session.controller.cursor == Position(0, 2)


def test_backward_search_skips_match_under_cursor(session: EditorSession) -> None:
    session.controller.jump_to(Position(4, 1))
    start_search(session)
    type_text(session, "foo")
    assert session.controller.cursor == Position(4, 1)

    press(session, "LEFT")

    assert session.controller.cursor == Position(4, 0)


def test_search_does_not_modify_document(session: EditorSession) -> None:
    start_search(session)
    type_text(session, "foo")
    press(session, "ENTER")

    assert session.document.lines() == ("one foo", "two foo", "three")
    assert session.document.dirty is False


def test_failed_step_at_document_end_keeps_cursor() -> None:
    session = make_session(["foo", "bar"])
    press(session, "DOWN")
    press(session, "END")
    start_search(session)
    type_text(session, "foo")
    assert session.controller.cursor == Position(3, 1)

    press(session, "RIGHT")

    assert session.controller.cursor == Position(3, 1)


def test_empty_query_step_at_document_end_keeps_cursor() -> None:
    session = make_session(["foo", "bar"])
    press(session, "DOWN")
    press(session, "END")
    start_search(session)

    press(session, "RIGHT")

    assert session.controller.cursor == Position(3, 1)


def test_typing_keeps_backward_direction() -> None:
    session = make_session(["ab ab ab"])
    press(session, "END")
    start_search(session)
    type_text(session, "a")
    assert session.controller.cursor == Position(8, 0)

    press(session, "LEFT")
    assert session.controller.cursor == Position(6, 0)

    type_text(session, "b")
    assert session.controller.cursor == Position(3, 0)
