"""Units module."""

from .core import Product, Quotient, Squared, Unit, Unitless
from .types import Kelvin, Meters, Pixels, Radians, Seconds

__all__ = [
    "Unit",
    "Unitless",
    "Product",
    "Quotient",
    "Squared",
    "Meters",
    "Seconds",
    "Radians",
    "Kelvin",
    "Pixels",
]
