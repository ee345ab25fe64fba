"""Error taxonomy for arithmetic operations and the system log."""


class MathError(Exception):
    """Base class for rejected arithmetic operations."""

    default_message = "Error: invalid arithmetic operation."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class DivisionByZero(MathError):
    """The divisor of a division is zero."""

    default_message = "Error: division by zero detected."


class NegativeOperand(MathError):
    """An operand is negative where only non-negative values are allowed."""

    default_message = "Error: negative number not allowed in this operation."


class InvalidInput(Exception):
    """Input could not be interpreted as a number.

    Kept as part of the taxonomy; nothing in the package raises it yet.
    """

    def __init__(self, message: str = "Error: non-numeric input detected.") -> None:
        super().__init__(message)


class LogOpenError(Exception):
    """The system log file could not be opened for appending."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Could not open log file: {path}")
        self.path = path
