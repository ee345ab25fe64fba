"""Log sink adapters."""

from opmonitor.adapters.storage.file import FileLogSink, open_file_logger
from opmonitor.adapters.storage.in_memory import InMemoryLogSink

__all__ = [
    "FileLogSink",
    "InMemoryLogSink",
    "open_file_logger",
]
