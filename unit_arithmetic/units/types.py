"""Records describing prefixes, base units and unit pieces."""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from .dimensions import Dimensions


@dataclass(frozen=True)
class Prefix:
    """A unit prefix such as "k" (1e3) or "mebi" (1024**2)."""

    name: str
    value: float
    scientific: bool = True


@dataclass(frozen=True, eq=False)
class BaseUnit:
    """A named unit with its dimension, scale, offset and allowed prefixes.

    Attributes:
        name: Name the unit is registered under, e.g. "m" or "degC".
        dimension: Key of the named dimension the unit measures, e.g. "LENGTH".
        dimensions: Dimension vector of that named dimension.
        prefixes: Prefixes this unit accepts, keyed by prefix name.
        value: Scale relative to the coherent root unit of its dimension.
        offset: Additive offset, non-zero only for affine scales.
    """

    name: str
    dimension: str
    dimensions: Dimensions
    prefixes: Mapping[str, Prefix]
    value: float
    offset: float = 0

    def alias(self, name: str) -> "BaseUnit":
        """Return a copy of this unit registered under another name."""
        return replace(self, name=name)

    def __repr__(self) -> str:
        """Return a short representation of the unit."""
        return f"BaseUnit({self.name!r}, {self.dimension})"


@dataclass(frozen=True)
class UnitPiece:
    """One factor of a unit expression, e.g. kg^2 or s^-1."""

    unit: BaseUnit
    prefix: Prefix
    power: Any = 1

    def with_power(self, power: Any) -> "UnitPiece":
        """Return a copy of this piece raised to another power."""
        return replace(self, power=power)

    @property
    def symbol(self) -> str:
        """Return the prefixed unit name, e.g. "km"."""
        return f"{self.prefix.name}{self.unit.name}"


@dataclass(frozen=True)
class SystemUnit:
    """The unit and prefix a unit system uses for one dimension."""

    unit: BaseUnit
    prefix: Prefix
