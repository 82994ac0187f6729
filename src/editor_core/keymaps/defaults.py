"""Built-in keymaps for the edit mode."""

from __future__ import annotations

from typing import Iterable, Sequence

from editor_core.actions import editing as editing_actions
from editor_core.actions import file as file_actions
from editor_core.actions import navigation as navigation_actions
from editor_core.actions import search as search_actions
from editor_core.view import Motion

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

EDIT_MODE = "edit"

_MOTION_KEYS: tuple[tuple[Motion, str], ...] = (
    (Motion.UP, "UP"),
    (Motion.DOWN, "DOWN"),
    (Motion.LEFT, "LEFT"),
    (Motion.RIGHT, "RIGHT"),
    (Motion.PAGE_UP, "PAGEUP"),
    (Motion.PAGE_DOWN, "PAGEDOWN"),
    (Motion.HOME, "HOME"),
    (Motion.END, "END"),
)

DEFAULT_ACTIONS: tuple[ActionRef, ...] = tuple(
    ActionRef(
        id=f"cursor.{motion.value}",
        handler=navigation_actions.move_cursor,
        description=f"Move cursor {motion.value.replace('_', ' ')}",
        metadata={"motion": motion.value},
    )
    for motion, _ in _MOTION_KEYS
) + (
    ActionRef(
        id="edit.newline",
        handler=editing_actions.insert_newline,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="edit.delete",
        handler=editing_actions.delete_forward,
        description="Delete the character under the cursor",
    ),
    ActionRef(
        id="edit.backspace",
        handler=editing_actions.delete_backward,
        description="Delete the character before the cursor",
    ),
    ActionRef(
        id="file.save",
        handler=file_actions.save_file,
        description="Save the document",
    ),
    ActionRef(
        id="editor.quit",
        handler=file_actions.quit_editor,
        description="Quit the editor",
    ),
    ActionRef(
        id="search.start",
        handler=search_actions.start_search,
        description="Start incremental search",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = tuple(
    Binding(
        id=f"edit.{motion.value}",
        mode=EDIT_MODE,
        stroke=KeyStroke(key),
        action_id=f"cursor.{motion.value}",
    )
    for motion, key in _MOTION_KEYS
) + (
    Binding(
        id="edit.enter",
        mode=EDIT_MODE,
        stroke=KeyStroke("ENTER"),
        action_id="edit.newline",
    ),
    Binding(
        id="edit.delete",
        mode=EDIT_MODE,
        stroke=KeyStroke("DELETE"),
        action_id="edit.delete",
    ),
    Binding(
        id="edit.backspace",
        mode=EDIT_MODE,
        stroke=KeyStroke("BACKSPACE"),
        action_id="edit.backspace",
    ),
    Binding(
        id="edit.save",
        mode=EDIT_MODE,
        stroke=KeyStroke("s", ("CTRL",)),
        action_id="file.save",
    ),
    Binding(
        id="edit.quit",
        mode=EDIT_MODE,
        stroke=KeyStroke("q", ("CTRL",)),
        action_id="editor.quit",
    ),
    Binding(
        id="edit.find",
        mode=EDIT_MODE,
        stroke=KeyStroke("f", ("CTRL",)),
        action_id="search.start",
    ),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions and bindings, then any ``extra_bindings``.

    Extra bindings always replace whatever default they collide with.
    """

    excluded = set(exclude_bindings or ())
    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=True)


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "EDIT_MODE", "load_default_keymaps"]
