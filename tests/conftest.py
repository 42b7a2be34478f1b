from __future__ import annotations

from datetime import datetime, timedelta, timezone
from io import StringIO
from typing import Iterator

import pytest
from rich.console import Console

from lib_log_intercept import config as env_config
from lib_log_intercept import runtime
from lib_log_intercept.adapters.host import LogHost
from lib_log_intercept.domain.levels import Severity


class FakeClock:
    """Clock returning a fixed instant, advancing by ``step`` on every call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(0)) -> None:
        self.current = start or datetime(2025, 9, 23, 12, 0, 0, 123_456, tzinfo=timezone.utc)
        self.step = step
        self.calls = 0

    def now(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        self.calls += 1
        return value


class FakePid:
    def __init__(self, pid: int = 4242) -> None:
        self.pid = pid

    def __call__(self) -> int:
        return self.pid


class StaticStatement:
    def __init__(self, text: str | None = None) -> None:
        self.text = text

    def current_statement(self) -> str | None:
        return self.text


class StaticThreshold:
    def __init__(self, level: Severity = Severity.WARNING) -> None:
        self.level = level

    def current_threshold(self) -> Severity:
        return self.level


class RecordingSink:
    def __init__(self) -> None:
        self.records: list[tuple[str, Severity]] = []

    def write(self, record: str, level: Severity) -> None:
        self.records.append((record, level))


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_pid() -> FakePid:
    return FakePid()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system=None)


@pytest.fixture
def host() -> LogHost:
    return LogHost("tests.host", log_min_messages=Severity.WARNING)


@pytest.fixture(autouse=True)
def _isolate_runtime(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in (env_config.ENV_LEVEL, env_config.ENV_DIRECTORY, env_config.ENV_TIMEZONE, env_config.ENV_COLOR, env_config.DOTENV_ENV_VAR):
        monkeypatch.delenv(name, raising=False)
    env_config._reset_dotenv_state_for_testing()
    try:
        yield
    finally:
        runtime.uninstall()
        env_config._reset_dotenv_state_for_testing()


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def statement_source() -> StaticStatement:
    return StaticStatement()


@pytest.fixture
def threshold_source() -> StaticThreshold:
    return StaticThreshold()
