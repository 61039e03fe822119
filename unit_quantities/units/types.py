"""Base unit tags.

Each tag names the canonical (SI) scale in which quantities of its dimension are
stored.
"""

from .core import Unit


class Meters(Unit):
    """Represents lengths, stored in meters."""

    __slots__ = ()


class Seconds(Unit):
    """Represents durations, stored in seconds."""

    __slots__ = ()


class Radians(Unit):
    """Represents angles, stored in radians."""

    __slots__ = ()


class Kelvin(Unit):
    """Represents absolute temperatures, stored in kelvin."""

    __slots__ = ()


class Pixels(Unit):
    """Represents on-screen distances, stored in pixels."""

    __slots__ = ()
