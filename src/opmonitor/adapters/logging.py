"""Python logging handler adapter for opmonitor.

This adapter bridges Python's standard library logging module to a
LogSinkPort, so diagnostics emitted through ``logging`` land in the same
append-only system log as the entries written by SystemLogger.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager

from opmonitor.core.models import LogEntry, LogLevel
from opmonitor.core.ports import LogSinkPort

# Standard logging levels, highest first, mapped onto system log levels
_LEVEL_MAP = (
    (logging.CRITICAL, LogLevel.CRITICAL),
    (logging.ERROR, LogLevel.ERROR),
    (logging.WARNING, LogLevel.WARNING),
    (logging.INFO, LogLevel.INFO),
)


def level_for(levelno: int) -> LogLevel:
    """Map a numeric logging level to the nearest lower system log level.

    Anything below INFO, including NOTSET, maps to DEBUG.
    """
    for threshold, level in _LEVEL_MAP:
        if levelno >= threshold:
            return level
    return LogLevel.DEBUG


class LogSinkHandler(logging.Handler):
    """Logging handler that writes log records to a LogSinkPort.

    Example:
        ```python
        from opmonitor import FileLogSink, LogSinkHandler

        sink = FileLogSink("system.log")
        logging.getLogger("opmonitor").addHandler(LogSinkHandler(sink))
        ```
    """

    def __init__(self, sink: LogSinkPort, level: int = logging.NOTSET) -> None:
        """Initialize the handler with a log sink.

        Args:
            sink: Sink implementing LogSinkPort.
            level: Minimum record level handled (default: everything).
        """
        super().__init__(level)
        self._sink = sink

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record to the sink.

        Args:
            record: The log record to emit.
        """
        try:
            message = record.getMessage()
            if record.exc_info:
                _exc_type, exc_value, _tb = record.exc_info
                if exc_value is not None:
                    message = f"{message} ({type(exc_value).__name__}: {exc_value})"
            entry = LogEntry(
                timestamp=record.created,
                level=level_for(record.levelno),
                message=message,
            )
            self._sink.write(entry)
        except Exception:
            self.handleError(record)


@contextmanager
def bridge_package_logging(
    sink: LogSinkPort, name: str = "opmonitor"
) -> Generator[LogSinkHandler]:
    """Route records from the ``name`` logger into ``sink`` while active.

    The logger is lowered to DEBUG for the duration so every record
    reaches the sink; its previous level is restored on exit.

    Args:
        sink: Destination for the bridged records.
        name: Logger to attach to (default: the package logger).

    Yields:
        The attached LogSinkHandler.
    """
    logger = logging.getLogger(name)
    handler = LogSinkHandler(sink)
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield handler
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)
