"""Speeds, as rates of length per duration, stored in meters per second."""

from typing import TypeAlias

from ..quantity import Quantity
from ..rate import Rate
from ..units import Meters, Seconds
from .duration import HOURS, SECONDS
from .length import FEET, KILOMETERS, METERS, MILES

Speed: TypeAlias = Rate[Meters, Seconds]

METERS_PER_SECOND = METERS.per(SECONDS)
KILOMETERS_PER_HOUR = KILOMETERS.per(HOURS)
FEET_PER_SECOND = FEET.per(SECONDS)
MILES_PER_HOUR = MILES.per(HOURS)


def meters_per_second(value: float) -> Speed:
    """Construct a speed from meters per second."""
    return Quantity(METERS_PER_SECOND.to_canonical(value))


def in_meters_per_second(speed: Speed) -> float:
    """Return a speed in meters per second."""
    return METERS_PER_SECOND.from_canonical(speed.value)


def kilometers_per_hour(value: float) -> Speed:
    """Construct a speed from kilometers per hour."""
    return Quantity(KILOMETERS_PER_HOUR.to_canonical(value))


def in_kilometers_per_hour(speed: Speed) -> float:
    """Return a speed in kilometers per hour."""
    return KILOMETERS_PER_HOUR.from_canonical(speed.value)


def feet_per_second(value: float) -> Speed:
    """Construct a speed from feet per second."""
    return Quantity(FEET_PER_SECOND.to_canonical(value))


def in_feet_per_second(speed: Speed) -> float:
    """Return a speed in feet per second."""
    return FEET_PER_SECOND.from_canonical(speed.value)


def miles_per_hour(value: float) -> Speed:
    """Construct a speed from miles per hour."""
    return Quantity(MILES_PER_HOUR.to_canonical(value))


def in_miles_per_hour(speed: Speed) -> float:
    """Return a speed in miles per hour."""
    return MILES_PER_HOUR.from_canonical(speed.value)
