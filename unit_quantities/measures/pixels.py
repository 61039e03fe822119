"""On-screen distances in pixels, and pixel densities."""

from typing import TypeAlias

from ..conversion import Conversion
from ..quantity import Quantity
from ..rate import Rate
from ..units import Meters, Pixels
from .length import CENTIMETERS, INCHES, METERS

PixelDensity: TypeAlias = Rate[Pixels, Meters]

PIXELS = Conversion(1.0)
PIXELS_PER_METER = PIXELS.per(METERS)
PIXELS_PER_CENTIMETER = PIXELS.per(CENTIMETERS)
PIXELS_PER_INCH = PIXELS.per(INCHES)


def pixels(value: float) -> Quantity[float, Pixels]:
    """Construct an on-screen distance from pixels."""
    return Quantity(PIXELS.to_canonical(value))


def in_pixels(quantity: Quantity[float, Pixels]) -> float:
    """Return an on-screen distance in pixels."""
    return PIXELS.from_canonical(quantity.value)


def pixels_per_meter(value: float) -> PixelDensity:
    """Construct a pixel density from pixels per meter."""
    return Quantity(PIXELS_PER_METER.to_canonical(value))


def in_pixels_per_meter(density: PixelDensity) -> float:
    """Return a pixel density in pixels per meter."""
    return PIXELS_PER_METER.from_canonical(density.value)


def pixels_per_centimeter(value: float) -> PixelDensity:
    """Construct a pixel density from pixels per centimeter."""
    return Quantity(PIXELS_PER_CENTIMETER.to_canonical(value))


def in_pixels_per_centimeter(density: PixelDensity) -> float:
    """Return a pixel density in pixels per centimeter."""
    return PIXELS_PER_CENTIMETER.from_canonical(density.value)


def pixels_per_inch(value: float) -> PixelDensity:
    """Construct a pixel density from pixels per inch."""
    return Quantity(PIXELS_PER_INCH.to_canonical(value))


def in_pixels_per_inch(density: PixelDensity) -> float:
    """Return a pixel density in pixels per inch."""
    return PIXELS_PER_INCH.from_canonical(density.value)
