"""Generic quantity type and the arithmetic defined over it.

A :class:`Quantity` wraps a single raw number. Both of its type parameters exist only
for static analysis: the first is the raw number type (``int`` for exact quantities,
``float`` for fractional ones) and the second is a unit tag from
:mod:`unit_quantities.units`. Values are always stored in the canonical scale of
their unit tag, so every function here works on the raw payloads directly.

Nothing in this module raises for degenerate floating point input. NaN and the
infinities propagate exactly as they would through plain float arithmetic, and
comparisons involving NaN are false just as they are for floats.

Several functions deliberately share names with builtins (``abs``, ``min``, ``max``,
``sum``, ``round``) and are meant to be used through the module namespace::

    from unit_quantities import quantity

    quantity.sum([meters(1.0), meters(2.0)])
"""

import builtins
import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from .numeric import NumberT, divide
from .numeric import sqrt as raw_sqrt
from .units import Product, Squared, Unit

UnitsT = TypeVar("UnitsT", bound=Unit)
OtherUnitsT = TypeVar("OtherUnitsT", bound=Unit)


@dataclass(frozen=True, slots=True, eq=False)
class Quantity(Generic[NumberT, UnitsT]):
    """A raw number tagged, for the type checker only, with a numeric kind and units.

    Operators are typed so that mixing unit tags is a type error::

        meters(1.0) + meters(2.0)   # fine
        meters(1.0) + seconds(2.0)  # rejected by mypy
    """

    value: NumberT

    def __eq__(self, other: object) -> bool:
        """Compare raw values; NaN is never equal to anything."""
        if not isinstance(other, Quantity):
            return NotImplemented
        return bool(self.value == other.value)

    def __hash__(self) -> int:
        """Hash the raw value."""
        return hash(self.value)

    def __lt__(self, other: "Quantity[NumberT, UnitsT]") -> bool:
        """Return whether this quantity is less than another with the same units."""
        return self.value < other.value

    def __le__(self, other: "Quantity[NumberT, UnitsT]") -> bool:
        """Return whether this quantity is at most another with the same units."""
        return self.value <= other.value

    def __gt__(self, other: "Quantity[NumberT, UnitsT]") -> bool:
        """Return whether this quantity is greater than another with the same units."""
        return self.value > other.value

    def __ge__(self, other: "Quantity[NumberT, UnitsT]") -> bool:
        """Return whether this quantity is at least another with the same units."""
        return self.value >= other.value

    def __add__(
        self, other: "Quantity[NumberT, UnitsT]"
    ) -> "Quantity[NumberT, UnitsT]":
        """Add a quantity with the same units."""
        return Quantity(self.value + other.value)

    def __sub__(
        self, other: "Quantity[NumberT, UnitsT]"
    ) -> "Quantity[NumberT, UnitsT]":
        """Subtract a quantity with the same units."""
        return Quantity(self.value - other.value)

    def __neg__(self) -> "Quantity[NumberT, UnitsT]":
        """Return the additive inverse."""
        return Quantity(-self.value)

    def __abs__(self) -> "Quantity[NumberT, UnitsT]":
        """Return the magnitude."""
        return Quantity(builtins.abs(self.value))

    def __mul__(self, factor: NumberT) -> "Quantity[NumberT, UnitsT]":
        """Scale by a raw number of the same numeric kind."""
        return Quantity(self.value * factor)

    def __rmul__(self, factor: NumberT) -> "Quantity[NumberT, UnitsT]":
        """Scale by a raw number of the same numeric kind."""
        return Quantity(factor * self.value)

    def __truediv__(
        self: "Quantity[float, UnitsT]", divisor: float
    ) -> "Quantity[float, UnitsT]":
        """Divide by a raw number with float semantics."""
        return Quantity(divide(self.value, divisor))


class Order(Enum):
    """Result of :func:`compare`."""

    LT = -1
    EQ = 0
    GT = 1


def unwrap(quantity: Quantity[NumberT, Any]) -> NumberT:
    """Return the raw value of a quantity, in the canonical scale of its units."""
    return quantity.value


def zero() -> Quantity[Any, Any]:
    """Return the additive identity, usable as a quantity of any units.

    The payload is the int ``0``, which adds to both exact and fractional quantities.
    """
    return Quantity(0)


def positive_infinity() -> Quantity[float, Any]:
    """Return a quantity greater than every finite quantity of any units."""
    return Quantity(math.inf)


def negative_infinity() -> Quantity[float, Any]:
    """Return a quantity less than every finite quantity of any units."""
    return Quantity(-math.inf)


def add(
    first: Quantity[NumberT, UnitsT], second: Quantity[NumberT, UnitsT]
) -> Quantity[NumberT, UnitsT]:
    """Add two quantities with the same units."""
    return Quantity(first.value + second.value)


def subtract(
    first: Quantity[NumberT, UnitsT], second: Quantity[NumberT, UnitsT]
) -> Quantity[NumberT, UnitsT]:
    """Return ``first - second``."""
    return Quantity(first.value - second.value)


def negate(quantity: Quantity[NumberT, UnitsT]) -> Quantity[NumberT, UnitsT]:
    """Flip the sign of a quantity."""
    return Quantity(-quantity.value)


def abs(quantity: Quantity[NumberT, UnitsT]) -> Quantity[NumberT, UnitsT]:
    """Return the absolute value of a quantity."""
    return Quantity(builtins.abs(quantity.value))


def scale_by(
    factor: NumberT, quantity: Quantity[NumberT, UnitsT]
) -> Quantity[NumberT, UnitsT]:
    """Multiply a quantity by a dimensionless raw number.

    The factor must be of the quantity's numeric kind, so an exact quantity can only
    be scaled by an ``int``. Any real factor is accepted, including zero and negative
    values.
    """
    return Quantity(quantity.value * factor)


def divide_by(
    divisor: float, quantity: Quantity[float, UnitsT]
) -> Quantity[float, UnitsT]:
    """Divide a fractional quantity by a raw number; a zero divisor gives inf/NaN."""
    return Quantity(divide(quantity.value, divisor))


def half(quantity: Quantity[float, UnitsT]) -> Quantity[float, UnitsT]:
    """Return half of a fractional quantity."""
    return Quantity(0.5 * quantity.value)


def twice(quantity: Quantity[NumberT, UnitsT]) -> Quantity[NumberT, UnitsT]:
    """Return double a quantity."""
    return Quantity(2 * quantity.value)


def product(
    first: Quantity[NumberT, UnitsT], second: Quantity[NumberT, OtherUnitsT]
) -> Quantity[NumberT, Product[UnitsT, OtherUnitsT]]:
    """Multiply two quantities, producing a quantity tagged with the product units."""
    return Quantity(first.value * second.value)


def squared(
    quantity: Quantity[NumberT, UnitsT]
) -> Quantity[NumberT, Squared[UnitsT]]:
    """Square a quantity, e.g. a length into an area."""
    return Quantity(quantity.value * quantity.value)


def sqrt(quantity: Quantity[float, Squared[UnitsT]]) -> Quantity[float, UnitsT]:
    """Take the square root of a squared quantity; negative input gives NaN."""
    return Quantity(raw_sqrt(quantity.value))


def ratio(
    numerator: Quantity[NumberT, UnitsT], denominator: Quantity[NumberT, UnitsT]
) -> float:
    """Return the dimensionless ratio of two quantities with the same units."""
    return divide(numerator.value, denominator.value)


def compare(
    first: Quantity[NumberT, UnitsT], second: Quantity[NumberT, UnitsT]
) -> Order:
    """Compare two quantities.

    The result is ``Order.LT`` if ``first < second``, else ``Order.EQ`` if they are
    equal, else ``Order.GT``. This is a total order for non-NaN values; any NaN
    operand makes both tests false and so yields ``Order.GT``, mirroring the way
    IEEE comparisons break totality.
    """
    if first.value < second.value:
        return Order.LT
    if first.value == second.value:
        return Order.EQ
    return Order.GT


def less_than(
    first: Quantity[NumberT, UnitsT], second: Quantity[NumberT, UnitsT]
) -> bool:
    """Return ``first < second``."""
    return first.value < second.value


def greater_than(
    first: Quantity[NumberT, UnitsT], second: Quantity[NumberT, UnitsT]
) -> bool:
    """Return ``first > second``."""
    return first.value > second.value


def less_than_or_equal_to(
    first: Quantity[NumberT, UnitsT], second: Quantity[NumberT, UnitsT]
) -> bool:
    """Return ``first <= second``."""
    return first.value <= second.value


def greater_than_or_equal_to(
    first: Quantity[NumberT, UnitsT], second: Quantity[NumberT, UnitsT]
) -> bool:
    """Return ``first >= second``."""
    return first.value >= second.value


def equal_within(
    tolerance: Quantity[NumberT, UnitsT],
    first: Quantity[NumberT, UnitsT],
    second: Quantity[NumberT, UnitsT],
) -> bool:
    """Check whether two quantities differ by at most ``tolerance``.

    Args:
        tolerance: Non-negative absolute tolerance, in the same units.
        first: One quantity to compare.
        second: The other quantity to compare.

    Returns:
        ``|first - second| <= tolerance``; false whenever a NaN is involved.
    """
    return builtins.abs(first.value - second.value) <= tolerance.value


def min(
    first: Quantity[NumberT, UnitsT], second: Quantity[NumberT, UnitsT]
) -> Quantity[NumberT, UnitsT]:
    """Return the lesser of two quantities, or ``first`` if they are equal."""
    return first if first.value <= second.value else second


def max(
    first: Quantity[NumberT, UnitsT], second: Quantity[NumberT, UnitsT]
) -> Quantity[NumberT, UnitsT]:
    """Return the greater of two quantities, or ``first`` if they are equal."""
    return first if first.value >= second.value else second


def sum(
    quantities: Iterable[Quantity[NumberT, UnitsT]]
) -> Quantity[NumberT, UnitsT]:
    """Add up quantities with the same units.

    The first quantity starts the fold, so the result keeps the numeric kind and the
    sign of zero of its inputs. An empty input sums to :func:`zero`, whose payload is
    the int ``0``.
    """
    iterator = iter(quantities)
    total = next(iterator, None)
    if total is None:
        return zero()
    for quantity in iterator:
        total = add(total, quantity)
    return total


def minimum(
    quantities: Iterable[Quantity[NumberT, UnitsT]]
) -> Quantity[NumberT, UnitsT] | None:
    """Return the smallest quantity (first one on ties), or None if there are none."""
    return builtins.min(quantities, key=unwrap, default=None)


def maximum(
    quantities: Iterable[Quantity[NumberT, UnitsT]]
) -> Quantity[NumberT, UnitsT] | None:
    """Return the largest quantity (first one on ties), or None if there are none."""
    return builtins.max(quantities, key=unwrap, default=None)


def sort(
    quantities: Iterable[Quantity[NumberT, UnitsT]]
) -> list[Quantity[NumberT, UnitsT]]:
    """Return the quantities in ascending order; equal quantities keep their order."""
    return sorted(quantities, key=unwrap)


def clamp(
    lower: Quantity[NumberT, UnitsT],
    upper: Quantity[NumberT, UnitsT],
    quantity: Quantity[NumberT, UnitsT],
) -> Quantity[NumberT, UnitsT]:
    """Restrict a quantity to the range between two bounds.

    The bounds may be given in either order: if ``lower > upper`` they are swapped
    before clamping.
    """
    if upper.value < lower.value:
        lower, upper = upper, lower
    if quantity.value < lower.value:
        return lower
    if quantity.value > upper.value:
        return upper
    return quantity


def interpolate_from(
    start: Quantity[float, UnitsT], end: Quantity[float, UnitsT], parameter: float
) -> Quantity[float, UnitsT]:
    """Interpolate linearly from ``start`` (parameter 0) to ``end`` (parameter 1).

    Parameters outside [0, 1] extrapolate. Each half of the range is computed from
    its nearer endpoint, so the endpoints are reproduced exactly.
    """
    if parameter <= 0.5:
        return Quantity(start.value + parameter * (end.value - start.value))
    return Quantity(end.value + (1 - parameter) * (start.value - end.value))


def midpoint(
    first: Quantity[float, UnitsT], second: Quantity[float, UnitsT]
) -> Quantity[float, UnitsT]:
    """Return the quantity halfway between two others."""
    return Quantity(first.value + 0.5 * (second.value - first.value))


def is_nan(quantity: Quantity[float, Any]) -> bool:
    """Check whether a quantity's raw value is NaN."""
    return math.isnan(quantity.value)


def is_infinite(quantity: Quantity[float, Any]) -> bool:
    """Check whether a quantity is positively or negatively infinite."""
    return math.isinf(quantity.value)


# Conversions from fractional to exact quantities follow ``int`` semantics and raise
# ValueError/OverflowError for NaN and infinite values.


def round(quantity: Quantity[float, UnitsT]) -> Quantity[int, UnitsT]:
    """Round to the nearest integer, with halves rounded towards positive infinity."""
    floored = math.floor(quantity.value)
    if quantity.value - floored >= 0.5:
        return Quantity(floored + 1)
    return Quantity(floored)


def floor(quantity: Quantity[float, UnitsT]) -> Quantity[int, UnitsT]:
    """Round down to an exact quantity."""
    return Quantity(math.floor(quantity.value))


def ceiling(quantity: Quantity[float, UnitsT]) -> Quantity[int, UnitsT]:
    """Round up to an exact quantity."""
    return Quantity(math.ceil(quantity.value))


def truncate(quantity: Quantity[float, UnitsT]) -> Quantity[int, UnitsT]:
    """Round towards zero to an exact quantity."""
    return Quantity(math.trunc(quantity.value))


def to_float_quantity(quantity: Quantity[int, UnitsT]) -> Quantity[float, UnitsT]:
    """Convert an exact quantity to a fractional one."""
    return Quantity(float(quantity.value))
