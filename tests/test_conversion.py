import math

import pytest

from unit_quantities import Conversion
from unit_quantities.numeric import divide, sqrt


def test_linear_conversion():
    """Test a scale-only conversion in both directions."""
    hours = Conversion(3600.0)
    assert hours.to_canonical(3) == 10800.0
    assert hours.from_canonical(5400.0) == 1.5
    assert hours.total_scale == 3600.0


def test_affine_conversion():
    """Test a conversion with an offset."""
    celsius = Conversion(1.0, 273.15)
    assert celsius.to_canonical(0.0) == 273.15
    assert celsius.from_canonical(273.15) == 0.0


def test_chained_conversion():
    """Test a conversion defined relative to another one."""
    celsius = Conversion(1.0, 273.15)
    fahrenheit = Conversion(5 / 9, -160 / 9, base=celsius)
    assert fahrenheit.to_canonical(32.0) == pytest.approx(273.15)
    assert fahrenheit.from_canonical(373.15) == pytest.approx(212.0)
    assert fahrenheit.total_scale == pytest.approx(5 / 9)


def test_rate_conversion_ignores_offsets():
    """Test that rate conversions divide overall scales and drop offsets."""
    minutes = Conversion(60.0)
    fahrenheit = Conversion(5 / 9, -160 / 9, base=Conversion(1.0, 273.15))
    per_minute = fahrenheit.per(minutes)
    assert per_minute.offset == 0.0
    assert per_minute.base is None
    assert per_minute.to_canonical(60.0) == pytest.approx(5 / 9)


def test_zero_scale_follows_float_semantics():
    """Test that a degenerate conversion gives inf rather than raising."""
    assert Conversion(0.0).from_canonical(1.0) == math.inf


@pytest.mark.parametrize(
    "numerator, denominator, expected",
    [
        (1.0, 0.0, math.inf),
        (-1.0, 0.0, -math.inf),
        (1.0, -0.0, -math.inf),
        (-1.0, -0.0, math.inf),
        (3, 0, math.inf),
        (6.0, 4.0, 1.5),
    ],
)
def test_divide(numerator: float, denominator: float, expected: float):
    """Test IEEE division of raw numbers."""
    assert divide(numerator, denominator) == expected


@pytest.mark.parametrize("numerator", (0.0, -0.0, math.nan))
def test_divide_nan(numerator: float):
    """Test that indeterminate quotients are NaN."""
    assert math.isnan(divide(numerator, 0.0))


def test_sqrt():
    """Test raw square roots."""
    assert sqrt(9.0) == 3.0
    assert math.isnan(sqrt(-1.0))
    assert math.isnan(sqrt(math.nan))


@pytest.mark.parametrize(
    "conversion",
    [Conversion(1.0), Conversion(3600.0), Conversion(0.3048)],
)
def test_linear_conversion_keeps_sign_of_zero(conversion: Conversion):
    """Test that negative zero stays negative through a linear conversion."""
    assert math.copysign(1.0, conversion.to_canonical(-0.0)) == -1.0
    assert math.copysign(1.0, conversion.from_canonical(-0.0)) == -1.0
