"""Sequential batch runner for division trials."""

import logging
import sys
import time
from collections.abc import Callable, Iterable
from typing import TextIO

from opmonitor.core.arithmetic import divide
from opmonitor.core.errors import DivisionByZero, NegativeOperand
from opmonitor.core.logs import SystemLogger
from opmonitor.core.models import LogLevel, OperandPair, OperationOutcome
from opmonitor.core.monitor import SystemMonitor

DEFAULT_PACING_DELAY = 0.5

_log = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """Render an operand or result without a trailing ``.0``."""
    return f"{value:g}"


def run_batch(
    pairs: Iterable[OperandPair | tuple[float, float]],
    logger: SystemLogger,
    monitor: SystemMonitor,
    delay: float = DEFAULT_PACING_DELAY,
    out: TextIO | None = None,
    err: TextIO | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> list[OperationOutcome]:
    """Divide each pair in order, recording every outcome.

    A failing pair never stops the batch. After each pair the runner
    pauses for ``delay`` seconds.

    Args:
        pairs: Operand pairs, processed in the given order.
        logger: Receives one DEBUG line per attempt plus the outcome.
        monitor: Tally updated once per pair.
        delay: Pause after each pair, in seconds.
        out: Stream for progress and results (default ``sys.stdout``).
        err: Stream for failures (default ``sys.stderr``).
        sleep: Blocking pause function.

    Returns:
        One OperationOutcome per pair, in input order.
    """
    out = out or sys.stdout
    err = err or sys.stderr
    outcomes: list[OperationOutcome] = []

    print("\n===== REAL-TIME PROCESSING =====", file=out)
    logger.log(LogLevel.INFO, "Starting number list processing")

    for index, item in enumerate(pairs, start=1):
        pair = item if isinstance(item, OperandPair) else OperandPair(*item)
        a, b = format_number(pair.a), format_number(pair.b)
        print(f"\nOperation #{index}: {a} / {b}", file=out)
        logger.log(LogLevel.DEBUG, f"Processing operation: {a} / {b}")

        try:
            result = divide(pair.a, pair.b)
        except (DivisionByZero, NegativeOperand) as exc:
            print(f"✗ {exc}", file=err)
            logger.log_exception(exc)
            monitor.record_failure()
            outcomes.append(OperationOutcome(pair=pair, error=exc))
        except Exception as exc:
            print(f"✗ Unexpected exception: {exc}", file=err)
            logger.log_exception(exc)
            _log.debug("Unexpected failure dividing %s / %s", a, b, exc_info=True)
            monitor.record_failure()
            outcomes.append(OperationOutcome(pair=pair, error=exc))
        else:
            print(f"✓ Result: {format_number(result)}", file=out)
            logger.log(
                LogLevel.INFO,
                f"Operation succeeded. Result: {format_number(result)}",
            )
            monitor.record_success()
            outcomes.append(OperationOutcome(pair=pair, value=result))

        sleep(delay)

    logger.log(LogLevel.INFO, "Number list processing completed")
    return outcomes
