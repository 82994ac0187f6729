"""Logging for the editor, built directly on telelog.

The editor draws on the terminal it runs in, so nothing is logged to the
console unless ``EDITOR_CORE_LOG_CONSOLE`` asks for it; a log file is the usual
sink. Everything else in the package goes through four entry points:

``configure(settings)`` -- rebuild the telelog configuration
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- one structured ``event::<name>`` line
``span(name, ...)`` -- profile a block, tagging it with a component and metadata
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

from editor_core.config import env_flag, env_int, env_str

tl = cast(Any, telelog)

DEFAULT_LOGGER_NAME = "editor_core"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_SETTINGS: Optional["TelemetrySettings"] = None


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    """Where editor logs go and how much of them is kept.

    ``buffer_size`` of 0 writes every line straight through.
    """

    level: str = "INFO"
    console: bool = False
    colored: bool = True
    json: bool = False
    log_file: str = ""
    buffer_size: int = 0

    def __post_init__(self) -> None:
        level = self.level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.level}'")
        object.__setattr__(self, "level", level)

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "TelemetrySettings":
        env = os.environ if environ is None else environ
        level = env_str(env, "LOG_LEVEL", "INFO").upper()
        buffer_size = 0
        if env_flag(env, "LOG_BUFFERED"):
            buffer_size = max(1, env_int(env, "LOG_BUFFER_SIZE", 2048))
        return cls(
            level=level if level in LOG_LEVELS else "INFO",
            console=env_flag(env, "LOG_CONSOLE"),
            colored=not env_flag(env, "NO_COLOR"),
            json=env_flag(env, "LOG_JSON"),
            log_file=env_str(env, "LOG_FILE"),
            buffer_size=buffer_size,
        )


def build_config(settings: TelemetrySettings) -> Any:
    """Translate ``settings`` into a ``telelog.Config``."""

    config = tl.Config()
    config.with_min_level(settings.level)
    config.with_console_output(settings.console)
    if settings.console:
        config.with_colored_output(settings.colored)
    if settings.json:
        config.with_json_format(True)
    if settings.log_file:
        config.with_file_output(settings.log_file)
    if settings.buffer_size:
        config.with_buffering(True)
        config.with_buffer_size(settings.buffer_size)
    return config


def configure(settings: Optional[TelemetrySettings] = None) -> TelemetrySettings:
    """Apply ``settings`` (or the environment's) to every logger fetched afterwards."""

    global _ACTIVE_SETTINGS
    _ACTIVE_SETTINGS = settings or TelemetrySettings.from_env()
    _LOGGER_CACHE.clear()
    return _ACTIVE_SETTINGS


def active_settings() -> TelemetrySettings:
    return _ACTIVE_SETTINGS or configure()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` for ``name``."""

    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(
            logger_name, build_config(active_settings())
        )
    return _LOGGER_CACHE[logger_name]


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def _level_method(logger: Any, level: str) -> Tuple[Any, bool]:
    """Logger method for ``level`` and whether it takes key/value pairs."""

    name = level.lower()
    with_data = getattr(logger, f"{name}_with", None)
    if with_data is not None:
        return with_data, True
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return plain, False


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    method, accepts_pairs = _level_method(logger, level)
    if accepts_pairs:
        method(message, _format_pairs(payload))
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` as key/value pairs."""

    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Lets the body of a ``span`` attach results such as a match position."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload = {"span": self.span_name, **self.metadata, "reason": reason}
        if self.component_name:
            payload["component"] = self.component_name
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block such as ``document::open`` or ``search::find``.

    ``component=True`` tracks the block under its own name, a string names the
    component explicitly. ``metadata`` is attached as logger context while the
    block runs. An exception is logged through ``SpanHandle.fail`` and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: _stringify(value) for key, value in (metadata or {}).items()}

    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))

        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=cast(Optional[str], component_name),
            metadata=dict(context),
        )
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "SpanHandle",
    "TelemetrySettings",
    "active_settings",
    "build_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
