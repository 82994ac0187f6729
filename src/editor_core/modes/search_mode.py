"""Incremental regex search driven one key event at a time."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Optional, Pattern

from editor_core.buffer import Position, SearchDirection
from editor_core.runtime import telemetry
from editor_core.view import Motion

from .base_mode import KeyInput, ModeContext, ModeResult
from .prompt_mode import PromptMode

FORWARD_KEYS = frozenset({"RIGHT", "DOWN"})
BACKWARD_KEYS = frozenset({"LEFT", "UP"})


@dataclass(slots=True)
class SearchState:
    """Where the search started and which way it is currently heading."""

    saved_cursor: Position
    saved_offset: Position
    direction: SearchDirection = SearchDirection.FORWARD


class SearchMode(PromptMode):
    """Re-searches the document after every keystroke.

    ``RIGHT``/``DOWN`` step past the current match and search forward,
    ``LEFT``/``UP`` search backward. Other keys keep the direction of the last
    arrow (forward until one is pressed), so a growing forward query keeps
    matching in place. ``ENTER`` keeps the cursor where the last match put it;
    ``ESC`` or ``CTRL+q`` puts it back.
    """

    name = "search"
    label = "Search (ESC to cancel, Arrows to navigate): "

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("editor_core.modes.search")
        self.state: Optional[SearchState] = None
        self._patterns: Dict[str, Optional[Pattern[str]]] = {}

    def on_enter(self, previous: str | None) -> None:
        super().on_enter(previous)
        controller = self.context.controller
        self.state = SearchState(
            saved_cursor=controller.cursor, saved_offset=controller.offset
        )
        self.context.bus.emit("search.start", controller.cursor)

    def on_exit(self, next_mode: str | None) -> None:
        super().on_exit(next_mode)
        self.state = None
        self._patterns.clear()

    def after_key(self, key: KeyInput) -> ModeResult:
        state = self._require_state()
        controller = self.context.controller

        before = controller.cursor
        if key.key in FORWARD_KEYS:
            state.direction = SearchDirection.FORWARD
            controller.move(Motion.RIGHT)
        elif key.key in BACKWARD_KEYS:
            state.direction = SearchDirection.BACKWARD

        found = self._search(state.direction)
        if found is not None:
            controller.jump_to(found)
            return ModeResult(consumed=True, status="match")

        # At the end of the document the peek does not move the cursor.
        if controller.cursor != before:
            controller.jump_to(before)
        return ModeResult(consumed=True, status="no_match")

    def on_submit(self) -> ModeResult:
        query = self.query
        self.context.bus.emit("search.accept", query)
        return ModeResult(
            consumed=True, switch_to=self.return_to, status="search_accept", message=query
        )

    def on_cancel(self) -> None:
        state = self._require_state()
        self.context.controller.restore(state.saved_cursor, state.saved_offset)
        self.context.bus.emit("search.cancel", state.saved_cursor)

    def _search(self, direction: SearchDirection) -> Optional[Position]:
        if not self.query:
            return None
        pattern = self._compile(self.query)
        if pattern is None:
            return None
        controller = self.context.controller
        with telemetry.span(
            "search::find",
            component="search",
            metadata={"direction": direction.value, "query": self.query},
        ) as handle:
            found = controller.document.find(pattern, controller.cursor, direction)
            handle.add_metadata("found", found)
        return found

    def _compile(self, query: str) -> Optional[Pattern[str]]:
        if query not in self._patterns:
            try:
                self._patterns[query] = re.compile(query)
            except re.error as exc:
                # Half-typed patterns such as "(" are expected; treat as no match.
                self.logger.debug(f"invalid search pattern {query!r}: {exc}")
                self._patterns[query] = None
        return self._patterns[query]

    def _require_state(self) -> SearchState:
        if self.state is None:
            controller = self.context.controller
            self.state = SearchState(
                saved_cursor=controller.cursor, saved_offset=controller.offset
            )
        return self.state


__all__ = ["SearchMode", "SearchState"]
