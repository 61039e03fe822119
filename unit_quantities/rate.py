"""Rates of change between any two unit tags.

``Rate[Dependent, Independent]`` is an ordinary fractional :class:`Quantity` whose
unit tag is ``Quotient[Dependent, Independent]``. A speed is
``Rate[Meters, Seconds]``, a pixel density ``Rate[Pixels, Meters]`` and an
acceleration ``Rate[Quotient[Meters, Seconds], Seconds]``; none of them needs code
of its own. Because rates are quantities, everything in
:mod:`unit_quantities.quantity` (addition, comparison, sorting, ...) applies to
rates with the same dependent and independent units.

As with plain floats, a zero denominator yields an infinite or NaN rate rather than
an exception. Checking for zero is up to the caller.
"""

from typing import TypeAlias, TypeVar

from .numeric import divide
from .quantity import Quantity
from .units import Quotient, Unit

DependentT = TypeVar("DependentT", bound=Unit)
IndependentT = TypeVar("IndependentT", bound=Unit)
ThirdT = TypeVar("ThirdT", bound=Unit)

Rate: TypeAlias = Quantity[float, Quotient[DependentT, IndependentT]]


def per(
    independent: Quantity[float, IndependentT],
    dependent: Quantity[float, DependentT],
) -> Rate[DependentT, IndependentT]:
    """Construct the rate of ``dependent`` per unit of ``independent``.

    ``per(seconds(2.0), meters(10.0))`` is a speed of 5 meters per second.
    """
    return Quantity(divide(dependent.value, independent.value))


def at(
    rate: Rate[DependentT, IndependentT], independent: Quantity[float, IndependentT]
) -> Quantity[float, DependentT]:
    """Apply a rate to an amount of the independent quantity.

    ``at(speed, duration)`` is the distance covered at ``speed`` in ``duration``.
    """
    return Quantity(rate.value * independent.value)


def at_(
    rate: Rate[DependentT, IndependentT], dependent: Quantity[float, DependentT]
) -> Quantity[float, IndependentT]:
    """Find the amount of the independent quantity that yields ``dependent``.

    ``at_(speed, distance)`` is the time taken to cover ``distance`` at ``speed``.
    """
    return Quantity(divide(dependent.value, rate.value))


def for_(
    independent: Quantity[float, IndependentT], rate: Rate[DependentT, IndependentT]
) -> Quantity[float, DependentT]:
    """Same as :func:`at`, with the arguments the other way round."""
    return at(rate, independent)


def inverse(
    rate: Rate[DependentT, IndependentT],
) -> Rate[IndependentT, DependentT]:
    """Invert a rate, e.g. turn meters per second into seconds per meter."""
    return Quantity(divide(1.0, rate.value))


def rate_product(
    first: Rate[DependentT, IndependentT], second: Rate[ThirdT, DependentT]
) -> Rate[ThirdT, IndependentT]:
    """Chain two rates through their shared unit.

    A rate of B per A followed by a rate of C per B gives a rate of C per A. For
    example a speed in meters per second and a pixel density in pixels per meter
    combine into pixels per second with ``rate_product(speed, pixel_density)``.
    """
    return Quantity(first.value * second.value)
