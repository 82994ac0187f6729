from __future__ import annotations

from typing import Iterator

import pytest

from editor_core.runtime import telemetry
from editor_core.runtime.telemetry import TelemetrySettings


@pytest.fixture
def restore_settings() -> Iterator[None]:
    previous = telemetry.active_settings()
    yield
    telemetry.configure(previous)


def test_console_logging_is_off_by_default() -> None:
    settings = TelemetrySettings.from_env({})

    assert settings == TelemetrySettings()
    assert settings.console is False
    assert settings.log_file == ""
    assert settings.buffer_size == 0


def test_environment_overrides() -> None:
    settings = TelemetrySettings.from_env(
        {
            "EDITOR_CORE_LOG_LEVEL": "debug",
            "EDITOR_CORE_LOG_CONSOLE": "yes",
            "EDITOR_CORE_NO_COLOR": "1",
            "EDITOR_CORE_LOG_JSON": "true",
            "EDITOR_CORE_LOG_FILE": "editor.log",
            "EDITOR_CORE_LOG_BUFFERED": "on",
            "EDITOR_CORE_LOG_BUFFER_SIZE": "64",
        }
    )

    assert settings == TelemetrySettings(
        level="DEBUG",
        console=True,
        colored=False,
        json=True,
        log_file="editor.log",
        buffer_size=64,
    )


def test_malformed_environment_values_fall_back() -> None:
    settings = TelemetrySettings.from_env(
        {
            "EDITOR_CORE_LOG_LEVEL": "chatty",
            "EDITOR_CORE_LOG_CONSOLE": "maybe",
            "EDITOR_CORE_LOG_BUFFERED": "1",
            "EDITOR_CORE_LOG_BUFFER_SIZE": "lots",
        }
    )

    assert settings.level == "INFO"
    assert settings.console is False
    assert settings.buffer_size == 2048


def test_unknown_level_is_rejected() -> None:
    with pytest.raises(ValueError):
        TelemetrySettings(level="chatty")

    assert TelemetrySettings(level="warning").level == "WARNING"


@pytest.mark.usefixtures("restore_settings")
def test_configure_replaces_active_settings() -> None:
    settings = TelemetrySettings(level="ERROR")

    applied = telemetry.configure(settings)

    assert applied is settings
    assert telemetry.active_settings() is settings


def test_span_reraises_failures() -> None:
    with pytest.raises(KeyError):
        with telemetry.span("document::open", component="buffer", metadata={"path": "x"}):
            raise KeyError("boom")
