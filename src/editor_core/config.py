"""Editor settings and their environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "EDITOR_CORE_"

TRUTHY = frozenset({"1", "true", "yes", "on"})


def env_str(env: Mapping[str, str], key: str, fallback: str = "") -> str:
    return env.get(f"{ENV_PREFIX}{key}", fallback)


def env_flag(env: Mapping[str, str], key: str, fallback: bool = False) -> bool:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    return value.strip().lower() in TRUTHY


def env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def env_float(env: Mapping[str, str], key: str, fallback: float) -> float:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return float(value)
    except ValueError:
        return fallback


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Tunables for cursor scrolling, quitting and the message bar."""

    scroll_margin: int = 5
    quit_times: int = 3
    status_timeout: float = 5.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            scroll_margin=max(0, env_int(env, "SCROLL_MARGIN", defaults.scroll_margin)),
            quit_times=max(1, env_int(env, "QUIT_TIMES", defaults.quit_times)),
            status_timeout=env_float(env, "STATUS_TIMEOUT", defaults.status_timeout),
        )


__all__ = ["ENV_PREFIX", "EditorConfig", "env_flag", "env_float", "env_int", "env_str"]
