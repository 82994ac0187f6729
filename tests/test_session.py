from __future__ import annotations

from pathlib import Path

from conftest import make_session, press, type_text

from editor_core.buffer import Document, Position
from editor_core.config import EditorConfig
from editor_core.keymaps import KeymapRegistry
from editor_core.keymaps.defaults import load_default_keymaps
from editor_core.modes import KeyInput
from editor_core.session import HELP_MESSAGE, EditorSession
from editor_core.view import Size


def test_new_session_starts_in_edit_mode_with_help() -> None:
    session = EditorSession(terminal=Size(80, 24), config=EditorConfig())

    assert session.mode == "edit"
    assert session.context.status.text == HELP_MESSAGE
    assert session.document.is_empty()
    assert session.controller.size == Size(80, 22)


def test_typing_inserts_at_cursor() -> None:
    session = make_session()

    type_text(session, "hi\t!")

    assert session.document.lines() == ("hi\t!",)
    assert session.controller.cursor == Position(4, 0)
    assert session.document.dirty is True


def test_ctrl_chords_are_not_typed() -> None:
    session = make_session(["abc"])

    result = session.handle_key(KeyInput(key="z", modifiers=("CTRL",), text="z"))

    assert result.consumed is False
    assert session.document.lines() == ("abc",)


def test_enter_backspace_and_delete() -> None:
    session = make_session(["abcd"])
    session.controller.jump_to(Position(2, 0))

    press(session, "ENTER")
    assert session.document.lines() == ("ab", "cd")
    assert session.controller.cursor == Position(0, 1)

    press(session, "BACKSPACE")
    assert session.document.lines() == ("abcd",)
    assert session.controller.cursor == Position(2, 0)

    press(session, "DELETE")
    assert session.document.lines() == ("abd",)


def test_navigation_keys_move_cursor() -> None:
    session = make_session(["abc", "de"])

    press(session, "END")
    press(session, "DOWN")
    assert session.controller.cursor == Position(2, 1)

    press(session, "HOME")
    press(session, "UP")
    assert session.controller.cursor == Position(0, 0)


def test_quit_clean_document_immediately() -> None:
    session = make_session(["abc"])

    press(session, "q", "CTRL")

    assert session.should_quit is True


def test_quit_dirty_document_needs_confirmation() -> None:
    session = make_session(["abc"], config=EditorConfig(quit_times=3))
    type_text(session, "x")

    for remaining in (3, 2, 1):
        press(session, "q", "CTRL")
        assert session.should_quit is False
        assert session.context.status.text == (
            "WARNING! File has unsaved changes. "
            f"Press Ctrl-Q {remaining} more times to quit."
        )

    press(session, "q", "CTRL")
    assert session.should_quit is True


def test_other_key_resets_quit_confirmation() -> None:
    session = make_session(["abc"], config=EditorConfig(quit_times=2))
    type_text(session, "x")
    press(session, "q", "CTRL")
    press(session, "q", "CTRL")

    press(session, "RIGHT")
    press(session, "q", "CTRL")

    assert session.should_quit is False
    assert "Press Ctrl-Q 2 more times" in session.context.status.text


def test_save_writes_named_document(tmp_path: Path) -> None:
    path = tmp_path / "notes.txt"
    session = make_session(["one"], filename=str(path))
    type_text(session, "x")

    press(session, "s", "CTRL")

    assert path.read_bytes() == b"xone\n"
    assert session.document.dirty is False
    assert session.context.status.text == "File saved successfully."


def test_save_failure_reports_error(tmp_path: Path) -> None:
    session = make_session(["one"], filename=str(tmp_path))
    type_text(session, "x")

    press(session, "s", "CTRL")

    assert session.context.status.text.startswith("Error writing file:")
    assert session.document.dirty is True
    assert session.mode == "edit"


def test_save_untitled_prompts_for_name(tmp_path: Path) -> None:
    path = tmp_path / "new.txt"
    session = make_session()
    type_text(session, "hello")

    press(session, "s", "CTRL")
    assert session.mode == "save_as"
    assert session.prompt_text == "Save as: "

    type_text(session, str(path))
    press(session, "ENTER")

    assert session.mode == "edit"
    assert path.read_bytes() == b"hello\n"
    assert session.document.filename == str(path)
    assert session.context.status.text == "File saved successfully."


def test_save_as_with_empty_name_aborts() -> None:
    session = make_session(["abc"])

    press(session, "s", "CTRL")
    press(session, "ENTER")

    assert session.mode == "edit"
    assert session.document.filename is None
    assert session.context.status.text == "Save aborted."


def test_save_as_escape_aborts() -> None:
    session = make_session(["abc"])

    press(session, "s", "CTRL")
    type_text(session, "ignored.txt")
    press(session, "ESC")

    assert session.mode == "edit"
    assert session.document.filename is None
    assert session.context.status.text == "Save aborted."


def test_open_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "notes.txt"
    path.write_text("alpha\nbeta\n", encoding="utf-8")

    session = EditorSession.open(path, terminal=Size(80, 24), config=EditorConfig())

    assert session.document.lines() == ("alpha", "beta")
    assert session.context.status.text == HELP_MESSAGE


def test_open_missing_file_falls_back_to_empty_document(tmp_path: Path) -> None:
    path = tmp_path / "missing.txt"

    session = EditorSession.open(path, terminal=Size(80, 24), config=EditorConfig())

    assert session.document.is_empty()
    assert session.document.filename is None
    assert session.context.status.text == f"ERR: Could not open file: {path}"


def test_resize_updates_text_area() -> None:
    session = make_session(["abc"])

    session.resize(Size(40, 10))

    assert session.controller.size == Size(40, 8)


def test_status_updates_are_published() -> None:
    session = make_session(["abc"])
    seen: list[object] = []
    session.context.bus.subscribe("status.update", seen.append)

    press(session, "s", "CTRL")
    press(session, "ESC")

    assert seen == ["Save aborted."]


def test_config_from_env_reads_overrides() -> None:
    config = EditorConfig.from_env(
        {
            "EDITOR_CORE_SCROLL_MARGIN": "2",
            "EDITOR_CORE_QUIT_TIMES": "0",
            "EDITOR_CORE_STATUS_TIMEOUT": "1.5",
        }
    )

    assert config.scroll_margin == 2
    assert config.quit_times == 1
    assert config.status_timeout == 1.5


def test_config_from_env_ignores_malformed_values() -> None:
    config = EditorConfig.from_env({"EDITOR_CORE_SCROLL_MARGIN": "wide"})

    assert config == EditorConfig()


def test_session_dispatches_through_given_registry() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry, exclude_bindings=["edit.find"])
    session = EditorSession(
        Document.from_lines(["abc"]),
        terminal=Size(80, 24),
        config=EditorConfig(),
        registry=registry,
    )

    result = session.handle_key(KeyInput(key="f", modifiers=("CTRL",)))

    assert session.manager.keymap_registry is registry
    assert session.context.extras["keymap_registry"] is registry
    assert result.consumed is False
    assert session.mode == "edit"
