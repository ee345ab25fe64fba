"""Plain-text line encoder for log entries.

Every entry becomes one line of the form::

    [YYYY-MM-DD HH:MM:SS] [LEVEL] message

with the timestamp rendered in local time at second resolution. Line
breaks inside the message are escaped as ``\\r`` and ``\\n`` so an entry
never spans more than one line.
"""

import re
import time

from opmonitor.core.models import LogEntry, LogLevel

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

LINE_PATTERN = re.compile(
    r"^\[(?P<timestamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})\] "
    r"\[(?P<level>INFO|WARNING|ERROR|CRITICAL|DEBUG)\] "
    r"(?P<message>.*)$"
)

_LINE_BREAKS = str.maketrans({"\r": "\\r", "\n": "\\n"})


def format_timestamp(timestamp: float) -> str:
    """Render a Unix timestamp as local ``YYYY-MM-DD HH:MM:SS``."""
    return time.strftime(TIMESTAMP_FORMAT, time.localtime(timestamp))


def encode_message(message: str) -> str:
    """Escape carriage returns and newlines so the message fits on one line."""
    return message.translate(_LINE_BREAKS)


def encode_entry(entry: LogEntry) -> str:
    """Encode a single entry as one line, without the trailing newline."""
    return (
        f"[{format_timestamp(entry.timestamp)}] [{entry.level.value}] "
        f"{encode_message(entry.message)}"
    )


def decode_line(line: str) -> LogEntry:
    """Parse a line produced by encode_entry back into a LogEntry.

    Escaped line breaks are left escaped in the returned message.

    Args:
        line: A single log line, with or without its trailing newline.

    Returns:
        LogEntry whose timestamp is truncated to whole seconds.

    Raises:
        ValueError: If the line does not have the fixed shape.
    """
    match = LINE_PATTERN.match(line.rstrip("\n"))
    if match is None:
        raise ValueError(f"Not a log line: {line!r}")
    parsed = time.strptime(match["timestamp"], TIMESTAMP_FORMAT)
    return LogEntry(
        timestamp=time.mktime(parsed),
        level=LogLevel(match["level"]),
        message=match["message"],
    )
