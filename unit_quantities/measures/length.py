"""Lengths, stored in meters."""

from typing import TypeAlias

from ..conversion import Conversion
from ..quantity import Quantity
from ..units import Meters

Length: TypeAlias = Quantity[float, Meters]

METERS = Conversion(1.0)
MICROMETERS = Conversion(1e-6)
MILLIMETERS = Conversion(0.001)
CENTIMETERS = Conversion(0.01)
KILOMETERS = Conversion(1000.0)
INCHES = Conversion(0.0254)
FEET = Conversion(0.3048)
YARDS = Conversion(0.9144)
MILES = Conversion(1609.344)


def meters(value: float) -> Length:
    """Construct a length from meters."""
    return Quantity(METERS.to_canonical(value))


def in_meters(length: Length) -> float:
    """Return a length in meters."""
    return METERS.from_canonical(length.value)


def micrometers(value: float) -> Length:
    """Construct a length from micrometers."""
    return Quantity(MICROMETERS.to_canonical(value))


def in_micrometers(length: Length) -> float:
    """Return a length in micrometers."""
    return MICROMETERS.from_canonical(length.value)


def millimeters(value: float) -> Length:
    """Construct a length from millimeters."""
    return Quantity(MILLIMETERS.to_canonical(value))


def in_millimeters(length: Length) -> float:
    """Return a length in millimeters."""
    return MILLIMETERS.from_canonical(length.value)


def centimeters(value: float) -> Length:
    """Construct a length from centimeters."""
    return Quantity(CENTIMETERS.to_canonical(value))


def in_centimeters(length: Length) -> float:
    """Return a length in centimeters."""
    return CENTIMETERS.from_canonical(length.value)


def kilometers(value: float) -> Length:
    """Construct a length from kilometers."""
    return Quantity(KILOMETERS.to_canonical(value))


def in_kilometers(length: Length) -> float:
    """Return a length in kilometers."""
    return KILOMETERS.from_canonical(length.value)


def inches(value: float) -> Length:
    """Construct a length from inches."""
    return Quantity(INCHES.to_canonical(value))


def in_inches(length: Length) -> float:
    """Return a length in inches."""
    return INCHES.from_canonical(length.value)


def feet(value: float) -> Length:
    """Construct a length from feet."""
    return Quantity(FEET.to_canonical(value))


def in_feet(length: Length) -> float:
    """Return a length in feet."""
    return FEET.from_canonical(length.value)


def yards(value: float) -> Length:
    """Construct a length from yards."""
    return Quantity(YARDS.to_canonical(value))


def in_yards(length: Length) -> float:
    """Return a length in yards."""
    return YARDS.from_canonical(length.value)


def miles(value: float) -> Length:
    """Construct a length from miles."""
    return Quantity(MILES.to_canonical(value))


def in_miles(length: Length) -> float:
    """Return a length in miles."""
    return MILES.from_canonical(length.value)
