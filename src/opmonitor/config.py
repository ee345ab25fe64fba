"""Run configuration."""

from dataclasses import dataclass

from opmonitor.core.models import OperandPair
from opmonitor.runtime.batch import DEFAULT_PACING_DELAY
from opmonitor.runtime.demo import DEMO_PAIRS

DEFAULT_LOG_PATH = "system.log"


@dataclass(frozen=True)
class MonitorConfig:
    """Settings for one demonstration run.

    Attributes:
        log_path: File the system log is appended to.
        pacing_delay: Pause after each batch item, in seconds.
        pairs: Operand pairs processed by the batch, in order.
    """

    log_path: str = DEFAULT_LOG_PATH
    pacing_delay: float = DEFAULT_PACING_DELAY
    pairs: tuple[OperandPair, ...] = DEMO_PAIRS
