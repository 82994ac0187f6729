"""Transient message shown in the bottom line of the screen."""

from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass(slots=True)
class StatusMessage:
    text: str = ""
    created: float = field(default_factory=time.monotonic)

    def is_fresh(self, timeout: float, *, now: float | None = None) -> bool:
        current = time.monotonic() if now is None else now
        return current - self.created < timeout


__all__ = ["StatusMessage"]
