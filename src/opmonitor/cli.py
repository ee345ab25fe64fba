"""Command line entry point.

Run with:
    python -m opmonitor

Appends to ``system.log`` in the working directory. Exits with status 1
if the log file cannot be opened or its first entry cannot be written.
"""

import sys
import time
from collections.abc import Callable

from opmonitor.adapters.logging import bridge_package_logging
from opmonitor.adapters.storage.file import FileLogSink
from opmonitor.config import MonitorConfig
from opmonitor.core.errors import LogOpenError
from opmonitor.core.logs import SystemLogger
from opmonitor.core.monitor import SystemMonitor
from opmonitor.runtime.demo import run_demo


def main(
    config: MonitorConfig | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Run the demonstration and return the process exit code."""
    config = config or MonitorConfig()
    try:
        sink = FileLogSink(config.log_path)
        logger = SystemLogger(sink)
    except (LogOpenError, OSError) as exc:
        print(f"Critical system error: {exc}", file=sys.stderr)
        return 1

    with logger, bridge_package_logging(sink):
        monitor = SystemMonitor(logger)
        run_demo(
            logger,
            monitor,
            pairs=config.pairs,
            delay=config.pacing_delay,
            sleep=sleep,
        )

    banner = "=" * 40
    print(f"\n✓ Check '{config.log_path}' for the complete log.")
    print(f"\n{banner}")
    print("   RUN COMPLETED")
    print(banner)
    return 0
