"""Accelerations, as rates of speed per duration."""

from typing import TypeAlias

from ..conversion import Conversion
from ..quantity import Quantity
from ..rate import Rate
from ..units import Meters, Quotient, Seconds
from .duration import SECONDS
from .speed import FEET_PER_SECOND, METERS_PER_SECOND

Acceleration: TypeAlias = Rate[Quotient[Meters, Seconds], Seconds]

METERS_PER_SECOND_SQUARED = METERS_PER_SECOND.per(SECONDS)
FEET_PER_SECOND_SQUARED = FEET_PER_SECOND.per(SECONDS)
# Standard gravity
GEES = Conversion(9.80665)


def meters_per_second_squared(value: float) -> Acceleration:
    """Construct an acceleration from meters per second squared."""
    return Quantity(METERS_PER_SECOND_SQUARED.to_canonical(value))


def in_meters_per_second_squared(acceleration: Acceleration) -> float:
    """Return an acceleration in meters per second squared."""
    return METERS_PER_SECOND_SQUARED.from_canonical(acceleration.value)


def feet_per_second_squared(value: float) -> Acceleration:
    """Construct an acceleration from feet per second squared."""
    return Quantity(FEET_PER_SECOND_SQUARED.to_canonical(value))


def in_feet_per_second_squared(acceleration: Acceleration) -> float:
    """Return an acceleration in feet per second squared."""
    return FEET_PER_SECOND_SQUARED.from_canonical(acceleration.value)


def gees(value: float) -> Acceleration:
    """Construct an acceleration from multiples of standard gravity."""
    return Quantity(GEES.to_canonical(value))


def in_gees(acceleration: Acceleration) -> float:
    """Return an acceleration in multiples of standard gravity."""
    return GEES.from_canonical(acceleration.value)
