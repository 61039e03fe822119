"""Statically checked units of measure.

Quantities are plain numbers at runtime. Their units live in type parameters, so
mixing incompatible units is reported by mypy (or by
:class:`unit_quantities.checker.UnitChecker`) instead of failing at runtime::

    from unit_quantities import quantity, rate
    from unit_quantities.measures.duration import minutes
    from unit_quantities.measures.length import miles
    from unit_quantities.measures.speed import in_kilometers_per_hour

    speed = rate.per(minutes(1), miles(1))
    in_kilometers_per_hour(speed)  # 96.56064
"""

from contextlib import suppress
from importlib.metadata import PackageNotFoundError, version

from .conversion import Conversion
from .numeric import Exact, Fractional
from .quantity import Order, Quantity
from .rate import Rate

with suppress(PackageNotFoundError):
    __version__ = version("unit-quantities")

__all__ = ["Conversion", "Exact", "Fractional", "Order", "Quantity", "Rate"]
