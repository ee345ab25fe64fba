"""Port interfaces for log sinks and metrics reporting.

These protocols define the contracts that adapters must implement.
The core domain depends only on these interfaces, not concrete implementations.
"""

from typing import Protocol, runtime_checkable

from opmonitor.core.models import LogEntry


@runtime_checkable
class LogSinkPort(Protocol):
    """Port for append-only log destinations.

    Examples: FileLogSink, InMemoryLogSink.
    """

    def write(self, entry: LogEntry) -> None:
        """Append a log entry. The entry must be durable when this returns."""
        ...

    def close(self) -> None:
        """Release the destination. Calling close more than once is allowed."""
        ...


@runtime_checkable
class MetricsReporterPort(Protocol):
    """Port for recording an operation-count summary."""

    def log_metrics(self, total: int, success: int, failed: int) -> None:
        """Record the counts of total, successful and failed operations."""
        ...
