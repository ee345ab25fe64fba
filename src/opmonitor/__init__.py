"""Validated arithmetic with an append-only system log and outcome tally."""

from opmonitor.adapters.logging import LogSinkHandler, bridge_package_logging
from opmonitor.adapters.storage.file import FileLogSink, open_file_logger
from opmonitor.adapters.storage.in_memory import InMemoryLogSink
from opmonitor.config import MonitorConfig
from opmonitor.core.arithmetic import divide, sqrt
from opmonitor.core.errors import (
    DivisionByZero,
    InvalidInput,
    LogOpenError,
    MathError,
    NegativeOperand,
)
from opmonitor.core.logs import SystemLogger
from opmonitor.core.models import (
    LogEntry,
    LogLevel,
    OperandPair,
    OperationOutcome,
    TallySnapshot,
)
from opmonitor.core.monitor import SystemMonitor
from opmonitor.runtime.batch import run_batch
from opmonitor.runtime.demo import DEMO_PAIRS, run_demo

__all__ = [
    "DEMO_PAIRS",
    "DivisionByZero",
    "FileLogSink",
    "InMemoryLogSink",
    "InvalidInput",
    "LogEntry",
    "LogLevel",
    "LogOpenError",
    "LogSinkHandler",
    "MathError",
    "MonitorConfig",
    "NegativeOperand",
    "OperandPair",
    "OperationOutcome",
    "SystemLogger",
    "SystemMonitor",
    "TallySnapshot",
    "bridge_package_logging",
    "divide",
    "open_file_logger",
    "run_batch",
    "run_demo",
    "sqrt",
]
