"""Static checking of unit usage through mypy."""

from .checker import UnitChecker
from .errors import UnitCheckerError

__all__ = ["UnitChecker", "UnitCheckerError"]
