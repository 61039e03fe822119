"""Conversion descriptors between concrete units and canonical scales.

Every concrete unit is described by a :class:`Conversion`: a scale and an offset
mapping a number in that unit onto the canonical scale of its dimension. Linear
units (feet, hours, degrees, ...) only need a scale. Temperatures also need an
offset, and Fahrenheit is expressed on top of Celsius through ``base`` so that reads
go kelvin -> Celsius -> Fahrenheit.
"""

from dataclasses import dataclass

from .numeric import divide


@dataclass(frozen=True)
class Conversion:
    """Affine map from a concrete unit onto a canonical scale.

    Attributes:
        scale: Size of one unit, in the units of ``base`` (or canonical units).
        offset: Value, in the units of ``base``, at which this unit reads zero.
        base: Unit this one is defined relative to; None for the canonical scale.
    """

    scale: float
    offset: float = 0.0
    base: "Conversion | None" = None

    @property
    def total_scale(self) -> float:
        """Size of one unit in canonical units, ignoring offsets."""
        if self.base is None:
            return self.scale
        return self.scale * self.base.total_scale

    def to_canonical(self, value: float) -> float:
        """Convert a number in this unit to the canonical scale."""
        raw = value * self.scale
        # adding a zero offset would turn -0.0 into +0.0
        if self.offset:
            raw += self.offset
        if self.base is None:
            return raw
        return self.base.to_canonical(raw)

    def from_canonical(self, value: float) -> float:
        """Convert a number on the canonical scale to this unit."""
        if self.base is not None:
            value = self.base.from_canonical(value)
        return divide(value - self.offset, self.scale)

    def per(self, independent: "Conversion") -> "Conversion":
        """Build the linear conversion for a rate of this unit per another.

        Offsets play no part in rates: one degree Fahrenheit per second is 5/9 kelvin
        per second whatever the Fahrenheit zero point is.
        """
        return Conversion(divide(self.total_scale, independent.total_scale))
