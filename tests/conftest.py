"""Shared test fixtures for all test modules."""

from collections.abc import Callable
from pathlib import Path

import pytest

from opmonitor.adapters.storage.in_memory import InMemoryLogSink
from opmonitor.core.logs import SystemLogger
from opmonitor.core.monitor import SystemMonitor


@pytest.fixture
def log_path(tmp_path: Path) -> str:
    """Provide a temporary path for the system log file."""
    return str(tmp_path / "system.log")


@pytest.fixture
def sink() -> InMemoryLogSink:
    """Fixture providing an empty in-memory log sink."""
    return InMemoryLogSink()


@pytest.fixture
def logger(sink: InMemoryLogSink) -> SystemLogger:
    """System logger writing to the in-memory sink.

    The "system started" entry is already present when the test begins.
    """
    return SystemLogger(sink)


@pytest.fixture
def monitor(logger: SystemLogger) -> SystemMonitor:
    """Fresh tally reporting to the in-memory logger."""
    return SystemMonitor(logger)


@pytest.fixture
def sleep_recorder() -> tuple[Callable[[float], None], list[float]]:
    """Fixture that returns a non-blocking sleep callable and the delays it saw.

    Used in place of time.sleep so batch tests run without pacing.
    """
    calls: list[float] = []

    def sleep(seconds: float) -> None:
        calls.append(seconds)

    return sleep, calls
