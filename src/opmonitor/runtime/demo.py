"""The fixed demonstration flow run by the command line entry point."""

import sys
import time
from collections.abc import Callable, Sequence
from typing import TextIO

from opmonitor.core.arithmetic import divide
from opmonitor.core.errors import MathError
from opmonitor.core.logs import SystemLogger
from opmonitor.core.models import LogLevel, OperandPair, OperationOutcome
from opmonitor.core.monitor import SystemMonitor
from opmonitor.runtime.batch import DEFAULT_PACING_DELAY, format_number, run_batch

DEMO_PAIRS: tuple[OperandPair, ...] = (
    OperandPair(100, 5),
    OperandPair(50, 0),
    OperandPair(81, 9),
    OperandPair(-10, 2),
    OperandPair(200, 10),
    OperandPair(7, 0),
    OperandPair(144, 12),
    OperandPair(-50, -5),
)

# (title, dividend, divisor) for the standalone trials run before the batch
SINGLE_TRIALS: tuple[tuple[str, float, float], ...] = (
    ("TEST 1: Division by zero", 10, 0),
    ("TEST 2: Negative numbers", -5, 2),
    ("TEST 3: Valid division", 100, 5),
)


def run_trial(
    a: float,
    b: float,
    logger: SystemLogger,
    monitor: SystemMonitor,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> OperationOutcome:
    """Attempt a single division, recording the outcome."""
    out = out or sys.stdout
    err = err or sys.stderr
    pair = OperandPair(a, b)
    expr = f"{format_number(a)} / {format_number(b)}"
    logger.log(LogLevel.INFO, f"Attempting to divide {expr}")
    try:
        result = divide(a, b)
    except MathError as exc:
        print(f"✗ {exc}", file=err)
        logger.log_exception(exc)
        monitor.record_failure()
        return OperationOutcome(pair=pair, error=exc)
    print(f"✓ Result: {format_number(result)}", file=out)
    logger.log(
        LogLevel.INFO, f"Operation succeeded: {expr} = {format_number(result)}"
    )
    monitor.record_success()
    return OperationOutcome(pair=pair, value=result)


def run_demo(
    logger: SystemLogger,
    monitor: SystemMonitor,
    pairs: Sequence[OperandPair] = DEMO_PAIRS,
    delay: float = DEFAULT_PACING_DELAY,
    out: TextIO | None = None,
    err: TextIO | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> list[OperationOutcome]:
    """Run the standalone trials, then the batch, then print the metrics.

    Returns:
        Outcomes of the standalone trials followed by the batch outcomes.
    """
    out = out or sys.stdout
    err = err or sys.stderr
    banner = "=" * 40
    print(banner, file=out)
    print("   MONITORING AND LOGGING SYSTEM", file=out)
    print(banner, file=out)

    outcomes = []
    for title, a, b in SINGLE_TRIALS:
        print(f"\n--- {title} ---", file=out)
        outcomes.append(run_trial(a, b, logger, monitor, out=out, err=err))

    outcomes.extend(
        run_batch(pairs, logger, monitor, delay=delay, out=out, err=err, sleep=sleep)
    )
    monitor.show_metrics(out=out)
    return outcomes
