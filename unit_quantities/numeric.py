"""Numeric-kind markers and raw float helpers.

Quantities are parameterised by the raw number type they wrap: ``Exact`` (``int``)
for integer-constrained quantities and ``Fractional`` (``float``) for continuous
ones. The helpers in this module give raw division and square roots IEEE 754
behaviour, so degenerate inputs produce infinities or NaN instead of exceptions.
"""

import math
from typing import TypeAlias, TypeVar

Exact: TypeAlias = int
Fractional: TypeAlias = float

NumberT = TypeVar("NumberT", int, float)


def divide(numerator: float, denominator: float) -> float:
    """Divide two raw numbers, returning inf or NaN on a zero denominator.

    Args:
        numerator: The dividend.
        denominator: The divisor, possibly zero or negative zero.

    Returns:
        The quotient, with the sign of an infinite result taken from both operands.
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def sqrt(value: float) -> float:
    """Return the square root of a raw number, or NaN for negative input."""
    if value < 0:
        return math.nan
    return math.sqrt(value)
