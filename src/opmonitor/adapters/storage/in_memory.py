"""In-memory log sink."""

from opmonitor.core.models import LogEntry


class InMemoryLogSink:
    """In-memory implementation of LogSinkPort.

    Stores log entries in a list. Suitable for testing and
    embedding where no file is wanted.
    """

    def __init__(self) -> None:
        self._entries: list[LogEntry] = []
        self.closed = False

    @property
    def entries(self) -> list[LogEntry]:
        """Entries written so far, in write order."""
        return list(self._entries)

    def write(self, entry: LogEntry) -> None:
        """Append a log entry."""
        if self.closed:
            raise ValueError("I/O operation on closed sink")
        self._entries.append(entry)

    def close(self) -> None:
        self.closed = True
