"""Marker infrastructure for unit tags.

Unit tags are never instantiated. They exist only as type arguments (for example
``Quantity[float, Meters]``) so that a type checker can tell quantities of different
dimensions apart, and carry no runtime state.
"""

from typing import Generic, TypeAlias, TypeVar


class Unit:
    """Base class for all unit tags."""

    __slots__ = ()


LeftT = TypeVar("LeftT", bound=Unit)
RightT = TypeVar("RightT", bound=Unit)
DependentT = TypeVar("DependentT", bound=Unit)
IndependentT = TypeVar("IndependentT", bound=Unit)


class Unitless(Unit):
    """Tag for dimensionless quantities."""

    __slots__ = ()


class Product(Unit, Generic[LeftT, RightT]):
    """Tag for the product of two unit tags, e.g. ``Product[Meters, Meters]``."""

    __slots__ = ()


class Quotient(Unit, Generic[DependentT, IndependentT]):
    """Tag for a dependent unit per independent unit, e.g. meters per second."""

    __slots__ = ()


Squared: TypeAlias = Product[LeftT, LeftT]
