"""Durations, stored in seconds."""

from typing import TypeAlias

from ..conversion import Conversion
from ..quantity import Quantity
from ..units import Seconds

Duration: TypeAlias = Quantity[float, Seconds]

SECONDS = Conversion(1.0)
MILLISECONDS = Conversion(0.001)
MINUTES = Conversion(60.0)
HOURS = Conversion(3600.0)
DAYS = Conversion(86400.0)
WEEKS = Conversion(604800.0)
# Julian year of 365.25 days
JULIAN_YEARS = Conversion(31557600.0)


def seconds(value: float) -> Duration:
    """Construct a duration from seconds."""
    return Quantity(SECONDS.to_canonical(value))


def in_seconds(duration: Duration) -> float:
    """Return a duration in seconds."""
    return SECONDS.from_canonical(duration.value)


def milliseconds(value: float) -> Duration:
    """Construct a duration from milliseconds."""
    return Quantity(MILLISECONDS.to_canonical(value))


def in_milliseconds(duration: Duration) -> float:
    """Return a duration in milliseconds."""
    return MILLISECONDS.from_canonical(duration.value)


def minutes(value: float) -> Duration:
    """Construct a duration from minutes."""
    return Quantity(MINUTES.to_canonical(value))


def in_minutes(duration: Duration) -> float:
    """Return a duration in minutes."""
    return MINUTES.from_canonical(duration.value)


def hours(value: float) -> Duration:
    """Construct a duration from hours."""
    return Quantity(HOURS.to_canonical(value))


def in_hours(duration: Duration) -> float:
    """Return a duration in hours."""
    return HOURS.from_canonical(duration.value)


def days(value: float) -> Duration:
    """Construct a duration from days."""
    return Quantity(DAYS.to_canonical(value))


def in_days(duration: Duration) -> float:
    """Return a duration in days."""
    return DAYS.from_canonical(duration.value)


def weeks(value: float) -> Duration:
    """Construct a duration from weeks."""
    return Quantity(WEEKS.to_canonical(value))


def in_weeks(duration: Duration) -> float:
    """Return a duration in weeks."""
    return WEEKS.from_canonical(duration.value)


def julian_years(value: float) -> Duration:
    """Construct a duration from Julian years."""
    return Quantity(JULIAN_YEARS.to_canonical(value))


def in_julian_years(duration: Duration) -> float:
    """Return a duration in Julian years."""
    return JULIAN_YEARS.from_canonical(duration.value)
