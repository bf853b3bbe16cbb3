"""Dimension vectors over the nine base physical dimensions.

A Dimensions instance holds one exponent per base dimension, in the fixed order
of BASE_DIMENSIONS. For example, force is MASS LENGTH TIME^-2:

    Dimensions((1, 1, -2))
"""

from collections.abc import Callable, Iterable, Iterator
from types import MappingProxyType
from typing import Any

BASE_DIMENSIONS = (
    "MASS",
    "LENGTH",
    "TIME",
    "CURRENT",
    "TEMPERATURE",
    "LUMINOUS_INTENSITY",
    "AMOUNT_OF_SUBSTANCE",
    "ANGLE",
    "BIT",
)

DIMENSION_TOLERANCE = 1e-12


class Dimensions:
    """Immutable vector of exponents, one per base dimension."""

    __slots__ = ("_exponents",)

    def __init__(self, exponents: Iterable[Any] = ()):
        """Initialise a dimension vector.

        Args:
            exponents: Exponents in BASE_DIMENSIONS order. Missing trailing
                entries default to 0.
        """
        values = tuple(exponents)
        if len(values) > len(BASE_DIMENSIONS):
            raise ValueError(
                f"Expected at most {len(BASE_DIMENSIONS)} exponents, got {len(values)}"
            )
        object.__setattr__(
            self, "_exponents", values + (0,) * (len(BASE_DIMENSIONS) - len(values))
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Dimensions are immutable")

    @classmethod
    def of(cls, **exponents: Any) -> "Dimensions":
        """Build a vector from base dimension names, e.g. of(LENGTH=1, TIME=-1)."""
        unknown = set(exponents) - set(BASE_DIMENSIONS)
        if unknown:
            raise ValueError(f"Unknown base dimensions: {', '.join(sorted(unknown))}")
        return cls(exponents.get(name, 0) for name in BASE_DIMENSIONS)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._exponents)

    def __len__(self) -> int:
        return len(self._exponents)

    def __getitem__(self, index: int) -> Any:
        return self._exponents[index]

    def __add__(self, other: "Dimensions") -> "Dimensions":
        """Sum two vectors, as when multiplying units."""
        return Dimensions(a + b for a, b in zip(self, other))

    def __sub__(self, other: "Dimensions") -> "Dimensions":
        """Subtract two vectors, as when dividing units."""
        return Dimensions(a - b for a, b in zip(self, other))

    def scale(self, power: Any, mul: Callable[[Any, Any], Any]) -> "Dimensions":
        """Multiply every exponent by power using the supplied multiply hook."""
        return Dimensions(mul(exponent, power) for exponent in self)

    def equals(self, other: "Dimensions") -> bool:
        """Check whether every exponent matches within tolerance."""
        return all(abs(a - b) < DIMENSION_TOLERANCE for a, b in zip(self, other))

    def is_dimensionless(self) -> bool:
        """Check whether every exponent is zero."""
        return self.equals(DIMENSIONLESS)

    def __eq__(self, other: object) -> bool:
        """Check equality of two Dimensions instances."""
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        """Return a string representation of the non-zero exponents."""
        parts = []
        for name, exp in zip(BASE_DIMENSIONS, self):
            if abs(exp) < DIMENSION_TOLERANCE:
                continue
            parts.append(name if exp == 1 else f"{name}^{exp}")
        return " ".join(parts) if parts else "NONE"

    def __repr__(self) -> str:
        """Return a detailed string representation of the vector."""
        return f"Dimensions({self._exponents!r})"


DIMENSIONLESS = Dimensions()

DIMENSIONS = MappingProxyType(
    {
        "NONE": DIMENSIONLESS,
        **{
            name: Dimensions.of(**{name: 1})
            for name in BASE_DIMENSIONS
        },
        "FORCE": Dimensions.of(MASS=1, LENGTH=1, TIME=-2),
        "SURFACE": Dimensions.of(LENGTH=2),
        "VOLUME": Dimensions.of(LENGTH=3),
        "ENERGY": Dimensions.of(MASS=1, LENGTH=2, TIME=-2),
        "POWER": Dimensions.of(MASS=1, LENGTH=2, TIME=-3),
        "PRESSURE": Dimensions.of(MASS=1, LENGTH=-1, TIME=-2),
        "ELECTRIC_CHARGE": Dimensions.of(TIME=1, CURRENT=1),
        "ELECTRIC_CAPACITANCE": Dimensions.of(MASS=-1, LENGTH=-2, TIME=4, CURRENT=2),
        "ELECTRIC_POTENTIAL": Dimensions.of(MASS=1, LENGTH=2, TIME=-3, CURRENT=-1),
        "ELECTRIC_RESISTANCE": Dimensions.of(MASS=1, LENGTH=2, TIME=-3, CURRENT=-2),
        "ELECTRIC_INDUCTANCE": Dimensions.of(MASS=1, LENGTH=2, TIME=-2, CURRENT=-2),
        "ELECTRIC_CONDUCTANCE": Dimensions.of(MASS=-1, LENGTH=-2, TIME=3, CURRENT=2),
        "MAGNETIC_FLUX": Dimensions.of(MASS=1, LENGTH=2, TIME=-2, CURRENT=-1),
        "MAGNETIC_FLUX_DENSITY": Dimensions.of(MASS=1, TIME=-2, CURRENT=-1),
        "FREQUENCY": Dimensions.of(TIME=-1),
    }
)
