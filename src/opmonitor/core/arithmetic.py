"""Validated arithmetic operations."""

import math

from opmonitor.core.errors import DivisionByZero, NegativeOperand


def divide(a: float, b: float) -> float:
    """Divide two non-negative numbers.

    Args:
        a: Dividend.
        b: Divisor.

    Returns:
        The quotient ``a / b``.

    Raises:
        DivisionByZero: If ``b`` is zero (checked first).
        NegativeOperand: If either operand is negative.
    """
    if b == 0:
        raise DivisionByZero()
    if a < 0 or b < 0:
        raise NegativeOperand()
    return a / b


def sqrt(x: float) -> float:
    """Return the non-negative square root of ``x``.

    Raises:
        NegativeOperand: If ``x`` is negative.
    """
    if x < 0:
        raise NegativeOperand()
    return math.sqrt(x)
