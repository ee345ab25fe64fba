"""Tests for the in-memory log sink."""

import pytest

from opmonitor.adapters.storage.in_memory import InMemoryLogSink
from opmonitor.core.models import LogEntry, LogLevel
from opmonitor.core.ports import LogSinkPort


class TestInMemoryLogSink:
    """Tests for InMemoryLogSink adapter."""

    @pytest.mark.storage
    def test_implements_log_sink_port(self) -> None:
        """InMemoryLogSink must satisfy LogSinkPort protocol."""
        assert isinstance(InMemoryLogSink(), LogSinkPort)

    @pytest.mark.storage
    def test_entries_empty_initially(self) -> None:
        assert InMemoryLogSink().entries == []

    @pytest.mark.storage
    def test_entries_keep_write_order(self) -> None:
        """Entries are kept in write order, not timestamp order."""
        sink = InMemoryLogSink()
        later = LogEntry(timestamp=2000.0, level=LogLevel.INFO, message="later")
        earlier = LogEntry(timestamp=1000.0, level=LogLevel.INFO, message="earlier")

        sink.write(later)
        sink.write(earlier)

        assert sink.entries == [later, earlier]

    @pytest.mark.storage
    def test_entries_returns_copy(self) -> None:
        sink = InMemoryLogSink()
        sink.entries.append(LogEntry(timestamp=0.0, level=LogLevel.INFO, message="x"))
        assert sink.entries == []

    @pytest.mark.storage
    def test_write_after_close_raises(self) -> None:
        sink = InMemoryLogSink()
        sink.close()
        with pytest.raises(ValueError):
            sink.write(LogEntry(timestamp=0.0, level=LogLevel.INFO, message="x"))
