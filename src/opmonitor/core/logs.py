"""Log entry helpers and the system logger."""

import time
from types import TracebackType

from opmonitor.core.models import LogEntry, LogLevel
from opmonitor.core.ports import LogSinkPort

STARTED_MESSAGE = "system started"
FINISHED_MESSAGE = "system finished"


def log(level: LogLevel | str, message: str) -> LogEntry:
    """Create a log entry with automatic timestamp.

    Args:
        level: Log level, as a LogLevel or its name (e.g., "INFO", "error")
        message: The log message

    Returns:
        LogEntry with current timestamp

    Raises:
        ValueError: If level is not a known level name.
    """
    return LogEntry(
        timestamp=time.time(),
        level=LogLevel.coerce(level),
        message=message,
    )


def format_metrics(total: int, success: int, failed: int) -> str:
    """Render the one-line metrics summary written by log_metrics."""
    rate = success * 100.0 / total if total > 0 else 0.0
    return (
        f"Metrics - Total: {total} | Succeeded: {success} | "
        f"Failed: {failed} | Success rate: {rate:.2f}%"
    )


class SystemLogger:
    """Leveled, timestamped logger writing every entry to a single sink.

    Creating the logger writes a "system started" entry; closing it writes
    "system finished" and closes the sink. Use it as a context manager so
    the closing entry is written on every exit path.

    Example:
        ```python
        from opmonitor import open_file_logger

        with open_file_logger("system.log") as logger:
            logger.log("INFO", "hello")
        ```
    """

    def __init__(self, sink: LogSinkPort) -> None:
        """Attach to ``sink`` and write the "system started" entry.

        If that first write fails the sink is closed before the error
        propagates.
        """
        self._sink = sink
        self._closed = False
        try:
            self.log(LogLevel.INFO, STARTED_MESSAGE)
        except BaseException:
            self._closed = True
            sink.close()
            raise

    @property
    def closed(self) -> bool:
        return self._closed

    def log(self, level: LogLevel | str, message: str) -> None:
        """Write one entry at the given level.

        Raises:
            ValueError: If the level is unknown or the logger is closed.
        """
        if self._closed:
            raise ValueError("I/O operation on closed logger")
        self._sink.write(log(level, message))

    def log_exception(self, exc: BaseException) -> None:
        """Write the exception's message at ERROR level."""
        self.log(LogLevel.ERROR, f"Exception caught: {exc}")

    def log_metrics(self, total: int, success: int, failed: int) -> None:
        """Write a summary of operation counts and success rate at INFO level."""
        self.log(LogLevel.INFO, format_metrics(total, success, failed))

    def close(self) -> None:
        """Write the "system finished" entry and release the sink, once."""
        if self._closed:
            return
        try:
            self.log(LogLevel.INFO, FINISHED_MESSAGE)
        finally:
            self._closed = True
            self._sink.close()

    def __enter__(self) -> "SystemLogger":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
