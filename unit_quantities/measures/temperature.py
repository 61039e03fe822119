"""Absolute temperatures, stored in kelvin.

Temperature scales differ by an offset as well as a scale, so these conversions are
affine rather than linear. Fahrenheit is defined on top of Celsius.
"""

from typing import TypeAlias

from ..conversion import Conversion
from ..quantity import Quantity
from ..units import Kelvin

Temperature: TypeAlias = Quantity[float, Kelvin]

KELVINS = Conversion(1.0)
CELSIUS = Conversion(1.0, 273.15)
FAHRENHEIT = Conversion(5 / 9, -160 / 9, base=CELSIUS)


def kelvins(value: float) -> Temperature:
    """Construct a temperature from kelvins."""
    return Quantity(KELVINS.to_canonical(value))


def in_kelvins(temperature: Temperature) -> float:
    """Return a temperature in kelvins."""
    return KELVINS.from_canonical(temperature.value)


def celsius(value: float) -> Temperature:
    """Construct a temperature from degrees Celsius."""
    return Quantity(CELSIUS.to_canonical(value))


def in_celsius(temperature: Temperature) -> float:
    """Return a temperature in degrees Celsius."""
    return CELSIUS.from_canonical(temperature.value)


def fahrenheit(value: float) -> Temperature:
    """Construct a temperature from degrees Fahrenheit."""
    return Quantity(FAHRENHEIT.to_canonical(value))


def in_fahrenheit(temperature: Temperature) -> float:
    """Return a temperature in degrees Fahrenheit."""
    return FAHRENHEIT.from_canonical(temperature.value)
