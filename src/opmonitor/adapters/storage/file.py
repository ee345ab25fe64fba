"""Append-only text file sink."""

from typing import TextIO

from opmonitor.core.encoding.text_line import encode_entry
from opmonitor.core.errors import LogOpenError
from opmonitor.core.logs import SystemLogger
from opmonitor.core.models import LogEntry


class FileLogSink:
    """File implementation of LogSinkPort.

    Opens the file in append mode so repeated runs accumulate history.
    Each entry is written as one line and flushed before write() returns.

    Args:
        path: Path of the log file. Created if missing.

    Raises:
        LogOpenError: If the file cannot be opened for appending.
    """

    def __init__(self, path: str) -> None:
        self._path = path
        try:
            self._file: TextIO = open(path, "a", encoding="utf-8")  # noqa: SIM115
        except OSError as exc:
            raise LogOpenError(path) from exc

    @property
    def path(self) -> str:
        return self._path

    @property
    def closed(self) -> bool:
        return self._file.closed

    def write(self, entry: LogEntry) -> None:
        """Append a log entry and flush it to the file."""
        self._file.write(encode_entry(entry) + "\n")
        self._file.flush()

    def close(self) -> None:
        """Close the underlying file. Safe to call more than once."""
        self._file.close()


def open_file_logger(path: str) -> SystemLogger:
    """Create a SystemLogger appending to the file at ``path``.

    Raises:
        LogOpenError: If the file cannot be opened for appending.
        OSError: If the "system started" entry cannot be written.
    """
    return SystemLogger(FileLogSink(path))
