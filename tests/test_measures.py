import math
from collections.abc import Callable

import pytest

from unit_quantities import quantity, rate
from unit_quantities.measures import (
    acceleration,
    angle,
    duration,
    length,
    pixels,
    speed,
    temperature,
)

ROUND_TRIP_VALUES = (-1234.5, -1.0, 0.0, 1e-3, 0.3, 1.0, 86.0, 98765.4321)

# (constructor, accessor) pairs for every concrete unit
UNIT_PAIRS: list[tuple[Callable, Callable]] = [
    (length.meters, length.in_meters),
    (length.micrometers, length.in_micrometers),
    (length.millimeters, length.in_millimeters),
    (length.centimeters, length.in_centimeters),
    (length.kilometers, length.in_kilometers),
    (length.inches, length.in_inches),
    (length.feet, length.in_feet),
    (length.yards, length.in_yards),
    (length.miles, length.in_miles),
    (duration.seconds, duration.in_seconds),
    (duration.milliseconds, duration.in_milliseconds),
    (duration.minutes, duration.in_minutes),
    (duration.hours, duration.in_hours),
    (duration.days, duration.in_days),
    (duration.weeks, duration.in_weeks),
    (duration.julian_years, duration.in_julian_years),
    (angle.radians, angle.in_radians),
    (angle.degrees, angle.in_degrees),
    (angle.turns, angle.in_turns),
    (angle.minutes, angle.in_minutes),
    (angle.seconds, angle.in_seconds),
    (temperature.kelvins, temperature.in_kelvins),
    (temperature.celsius, temperature.in_celsius),
    (temperature.fahrenheit, temperature.in_fahrenheit),
    (speed.meters_per_second, speed.in_meters_per_second),
    (speed.kilometers_per_hour, speed.in_kilometers_per_hour),
    (speed.feet_per_second, speed.in_feet_per_second),
    (speed.miles_per_hour, speed.in_miles_per_hour),
    (
        acceleration.meters_per_second_squared,
        acceleration.in_meters_per_second_squared,
    ),
    (acceleration.feet_per_second_squared, acceleration.in_feet_per_second_squared),
    (acceleration.gees, acceleration.in_gees),
    (pixels.pixels, pixels.in_pixels),
    (pixels.pixels_per_meter, pixels.in_pixels_per_meter),
    (pixels.pixels_per_centimeter, pixels.in_pixels_per_centimeter),
    (pixels.pixels_per_inch, pixels.in_pixels_per_inch),
]


@pytest.mark.parametrize(
    "construct, read", UNIT_PAIRS, ids=[
        f"{construct.__module__.rpartition('.')[2]}.{construct.__name__}"
        for construct, _ in UNIT_PAIRS
    ],
)
def test_round_trip(construct: Callable, read: Callable):
    """Test that reading a quantity back in its own unit gives the input."""
    for value in ROUND_TRIP_VALUES:
        assert read(construct(value)) == pytest.approx(value, rel=1e-12, abs=1e-9)


@pytest.mark.parametrize(
    "construct, read, ratio",
    [
        (length.feet, length.in_meters, 0.3048),
        (length.inches, length.in_centimeters, 2.54),
        (length.miles, length.in_feet, 5280.0),
        (length.yards, length.in_feet, 3.0),
        (duration.hours, duration.in_minutes, 60.0),
        (duration.weeks, duration.in_days, 7.0),
        (angle.turns, angle.in_degrees, 360.0),
        (angle.degrees, angle.in_minutes, 60.0),
        (speed.meters_per_second, speed.in_kilometers_per_hour, 3.6),
        (acceleration.gees, acceleration.in_meters_per_second_squared, 9.80665),
        (pixels.pixels_per_centimeter, pixels.in_pixels_per_inch, 2.54),
    ],
)
def test_cross_unit_consistency(construct: Callable, read: Callable, ratio: float):
    """Test conversions between units of the same dimension with known ratios."""
    for value in ROUND_TRIP_VALUES:
        assert read(construct(value)) == pytest.approx(value * ratio, rel=1e-12)


def test_hours_in_seconds():
    """Test that whole hours convert to seconds exactly."""
    assert duration.in_seconds(duration.hours(3)) == 10800


def test_feet_in_meters():
    """Test converting feet to meters."""
    assert length.in_meters(length.feet(10)) == pytest.approx(3.048, abs=1e-9)


def test_miles_per_hour_in_meters_per_second():
    """Test converting between speed units."""
    assert speed.in_meters_per_second(speed.miles_per_hour(60)) == pytest.approx(
        26.8224, abs=1e-9
    )


def test_celsius_in_fahrenheit():
    """Test that the affine temperature conversion is exact for whole degrees."""
    assert temperature.in_fahrenheit(temperature.celsius(30)) == 86


def test_temperature_fixed_points():
    """Test well known temperatures on each scale."""
    freezing = temperature.celsius(0.0)
    assert temperature.in_kelvins(freezing) == pytest.approx(273.15)
    assert temperature.in_fahrenheit(freezing) == pytest.approx(32.0)
    boiling = temperature.fahrenheit(212.0)
    assert temperature.in_celsius(boiling) == pytest.approx(100.0)
    assert temperature.in_fahrenheit(temperature.celsius(-40.0)) == pytest.approx(-40.0)
    assert temperature.in_celsius(temperature.kelvins(0.0)) == pytest.approx(-273.15)


def test_miles_per_minute_in_kilometers_per_hour():
    """Test deriving a speed from a length and a duration."""
    miles_per_minute = rate.per(duration.minutes(1), length.miles(1))
    assert speed.in_kilometers_per_hour(miles_per_minute) == pytest.approx(
        96.56064, abs=1e-6
    )


def test_acceleration_as_rate_of_speed():
    """Test that acceleration is a speed per duration."""
    gain = rate.per(duration.seconds(2.0), speed.meters_per_second(19.6133))
    assert acceleration.in_gees(gain) == pytest.approx(1.0)
    assert quantity.equal_within(
        speed.meters_per_second(1e-12),
        rate.at(gain, duration.seconds(1.0)),
        speed.meters_per_second(9.80665),
    )


def test_pixel_density():
    """Test converting a physical length to pixels through a density."""
    density = pixels.pixels_per_inch(96.0)
    assert pixels.in_pixels(rate.at(density, length.inches(2.0))) == pytest.approx(
        192.0
    )
    assert length.in_inches(rate.at_(density, pixels.pixels(48.0))) == pytest.approx(
        0.5
    )


def test_trigonometry():
    """Test trigonometric functions of angles."""
    assert angle.sin(angle.degrees(30.0)) == pytest.approx(0.5)
    assert angle.cos(angle.turns(0.5)) == pytest.approx(-1.0)
    assert angle.tan(angle.radians(math.pi / 4)) == pytest.approx(1.0)
