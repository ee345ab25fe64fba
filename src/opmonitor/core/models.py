"""Core domain models for monitored operations."""

from dataclasses import dataclass
from enum import Enum


class LogLevel(str, Enum):
    """Severity attached to every system log line.

    Levels are labels only; no level is ever filtered out.
    """

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
    DEBUG = "DEBUG"

    @classmethod
    def coerce(cls, value: "LogLevel | str") -> "LogLevel":
        """Return the LogLevel for a member or a case-insensitive name.

        Raises:
            ValueError: If the name is not a known level.
        """
        if isinstance(value, LogLevel):
            return value
        try:
            return cls[value.upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {value!r}") from None


@dataclass(frozen=True)
class LogEntry:
    """A single line of the system log.

    Attributes:
        timestamp: Unix timestamp in seconds.
        level: Severity of the entry.
        message: Free-form text.
    """

    timestamp: float
    level: LogLevel
    message: str


@dataclass(frozen=True)
class OperandPair:
    """Input to a single division trial."""

    a: float
    b: float


@dataclass(frozen=True)
class TallySnapshot:
    """Point-in-time copy of the operation counters.

    Attributes:
        total: Number of recorded outcomes.
        successes: Number of successful outcomes.
        failures: Number of failed outcomes.
    """

    total: int = 0
    successes: int = 0
    failures: int = 0

    @property
    def success_rate(self) -> float:
        """Percentage of successful outcomes, 0.0 when nothing was recorded."""
        if self.total == 0:
            return 0.0
        return self.successes * 100.0 / self.total


@dataclass(frozen=True)
class OperationOutcome:
    """Result of one batch item: either a value or the error it raised."""

    pair: OperandPair
    value: float | None = None
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None
