"""Operation tally with a printable summary."""

import sys
from typing import TextIO

from opmonitor.core.models import TallySnapshot
from opmonitor.core.ports import MetricsReporterPort

_BANNER_WIDTH = 42


class SystemMonitor:
    """Counts successful and failed operations.

    ``total`` always equals ``successes + failures``; the counters only grow.
    """

    def __init__(self, reporter: MetricsReporterPort) -> None:
        self._reporter = reporter
        self._total = 0
        self._successes = 0
        self._failures = 0

    @property
    def total(self) -> int:
        return self._total

    @property
    def successes(self) -> int:
        return self._successes

    @property
    def failures(self) -> int:
        return self._failures

    def record_success(self) -> None:
        self._total += 1
        self._successes += 1

    def record_failure(self) -> None:
        self._total += 1
        self._failures += 1

    def snapshot(self) -> TallySnapshot:
        """Return an immutable copy of the current counters."""
        return TallySnapshot(
            total=self._total,
            successes=self._successes,
            failures=self._failures,
        )

    def show_metrics(self, out: TextIO | None = None) -> None:
        """Print the counters and success rate, then report them to the logger.

        Args:
            out: Stream to print to. Defaults to ``sys.stdout``.
        """
        out = out or sys.stdout
        snapshot = self.snapshot()
        title = " SYSTEM METRICS "
        print(file=out)
        print(title.center(_BANNER_WIDTH, "="), file=out)
        print(f"Total operations: {snapshot.total}", file=out)
        print(f"Successful operations: {snapshot.successes}", file=out)
        print(f"Failed operations: {snapshot.failures}", file=out)
        print(f"Success rate: {snapshot.success_rate:.2f}%", file=out)
        print("=" * _BANNER_WIDTH, file=out)
        self._reporter.log_metrics(snapshot.total, snapshot.successes, snapshot.failures)
