"""Angles, stored in radians."""

import math
from typing import TypeAlias

from ..conversion import Conversion
from ..quantity import Quantity
from ..units import Radians

Angle: TypeAlias = Quantity[float, Radians]

RADIANS = Conversion(1.0)
DEGREES = Conversion(math.pi / 180)
TURNS = Conversion(2 * math.pi)
MINUTES = Conversion(math.pi / (180 * 60))
SECONDS = Conversion(math.pi / (180 * 3600))


def radians(value: float) -> Angle:
    """Construct an angle from radians."""
    return Quantity(RADIANS.to_canonical(value))


def in_radians(angle: Angle) -> float:
    """Return an angle in radians."""
    return RADIANS.from_canonical(angle.value)


def degrees(value: float) -> Angle:
    """Construct an angle from degrees."""
    return Quantity(DEGREES.to_canonical(value))


def in_degrees(angle: Angle) -> float:
    """Return an angle in degrees."""
    return DEGREES.from_canonical(angle.value)


def turns(value: float) -> Angle:
    """Construct an angle from full turns."""
    return Quantity(TURNS.to_canonical(value))


def in_turns(angle: Angle) -> float:
    """Return an angle in full turns."""
    return TURNS.from_canonical(angle.value)


def minutes(value: float) -> Angle:
    """Construct an angle from arc minutes."""
    return Quantity(MINUTES.to_canonical(value))


def in_minutes(angle: Angle) -> float:
    """Return an angle in arc minutes."""
    return MINUTES.from_canonical(angle.value)


def seconds(value: float) -> Angle:
    """Construct an angle from arc seconds."""
    return Quantity(SECONDS.to_canonical(value))


def in_seconds(angle: Angle) -> float:
    """Return an angle in arc seconds."""
    return SECONDS.from_canonical(angle.value)


def sin(angle: Angle) -> float:
    """Return the sine of an angle."""
    return math.sin(angle.value)


def cos(angle: Angle) -> float:
    """Return the cosine of an angle."""
    return math.cos(angle.value)


def tan(angle: Angle) -> float:
    """Return the tangent of an angle."""
    return math.tan(angle.value)
