"""Unit values and the factory that creates them.

This module provides:
- The Unit class, an immutable value tagged with a unit expression.
- The UnitFactory class, which parses input into units and owns the numeric
  options, registry and parser every unit it creates is bound to.

Example:
    from unit_arithmetic import unit

    speed = unit("100 km / h")
    speed.to("m / s")       # 27.77777777777778 m / s
    unit("1 m").add("100 cm")  # 2 m
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Self

from .. import errors
from ..numeric import NumericOptions
from .core import (
    combine_duplicates,
    denormalize,
    format_number,
    format_units,
    is_compound,
    normalize,
)
from .dimensions import DIMENSION_TOLERANCE, Dimensions
from .parser import UnitParser
from .registry import UnitRegistry
from .types import UnitPiece

logger = logging.getLogger(__name__)

_MISSING: Any = object()


@dataclass
class _UnitDraft:
    """Mutable unit under construction, turned into a Unit by freeze."""

    factory: "UnitFactory"
    value: Any
    units: list[UnitPiece]
    dimensions: Dimensions

    def freeze(self) -> "Unit":
        return Unit(self.value, tuple(self.units), self.dimensions, self.factory)


@dataclass(frozen=True, eq=False)
class Unit:
    """A value, possibly absent, tagged with a unit expression.

    Attributes:
        value: The magnitude in the units of ``units``, or None for a unit
            expression without a quantity.
        units: Pieces of the unit expression. No two share a base unit.
        dimensions: Dimension vector of the unit expression.
        factory: The factory whose options and registry this unit uses.
    """

    value: Any
    units: tuple[UnitPiece, ...]
    dimensions: Dimensions
    factory: "UnitFactory" = field(repr=False)

    @property
    def options(self) -> NumericOptions:
        """Return the numeric options of the owning factory."""
        return self.factory.options

    def _draft(self, keep_value: bool = True) -> _UnitDraft:
        """Copy this unit into a draft, cloning the value with the clone hook."""
        value = None
        if keep_value and self.value is not None:
            value = self.options.clone(self.value)
        return _UnitDraft(self.factory, value, list(self.units), self.dimensions)

    def _value_or_one(self) -> Any:
        if self.value is None:
            return self.options.from_literal(1)
        return self.value

    def _normalized(self) -> Any:
        return normalize(self.units, self.value, self.options)

    def clone(self) -> "Unit":
        """Create a copy of this unit."""
        return self._draft().freeze()

    def get_units(self) -> "Unit":
        """Return this unit without a value."""
        return self._draft(keep_value=False).freeze()

    def add(self, other: Any) -> "Unit":
        """Add two units. Both must have values and equal dimensions.

        Args:
            other: The unit to add. Strings and numbers are converted to units.

        Returns:
            The sum, expressed in the units of this unit.
        """
        return self._add_or_sub(self.factory.convert(other), "add")

    def sub(self, other: Any) -> "Unit":
        """Subtract a unit from this one. Both must have values and equal dimensions."""
        return self._add_or_sub(self.factory.convert(other), "subtract")

    def _add_or_sub(self, other: "Unit", operation: str) -> "Unit":
        if self.value is None or other.value is None:
            raise errors.u002_error_factory(operation, self, other)
        if not self.equal_dimension(other):
            raise errors.u001_error_factory(operation, self, other)
        combine = self.options.add if operation == "add" else self.options.sub
        result = self._draft()
        result.value = denormalize(
            self.units,
            combine(self._normalized(), other._normalized()),
            self.options,
        )
        return result.freeze()

    def mul(self, other: Any) -> "Unit":
        """Multiply two units.

        If only one operand has a value, the other counts as 1 of its units.
        """
        return self._mul_or_div(self.factory.convert(other), divide=False)

    def div(self, other: Any) -> "Unit":
        """Divide this unit by another."""
        return self._mul_or_div(self.factory.convert(other), divide=True)

    def _mul_or_div(self, other: "Unit", divide: bool) -> "Unit":
        options = self.options
        result = self._draft()
        if divide:
            result.dimensions = self.dimensions - other.dimensions
            appended = [piece.with_power(-piece.power) for piece in other.units]
        else:
            result.dimensions = self.dimensions + other.dimensions
            appended = list(other.units)
        result.units = list(combine_duplicates(result.units + appended, options))

        if self.value is None and other.value is None:
            result.value = None
        else:
            left = normalize(self.units, self._value_or_one(), options)
            right = normalize(other.units, other._value_or_one(), options)
            combine = options.div if divide else options.mul
            result.value = denormalize(result.units, combine(left, right), options)
        return result.freeze()

    def pow(self, power: Any) -> "Unit":
        """Raise this unit to a power."""
        options = self.options
        result = self._draft()
        result.dimensions = self.dimensions.scale(power, options.mul)
        powered = [
            piece.with_power(options.mul(piece.power, power)) for piece in self.units
        ]
        result.units = list(combine_duplicates(powered, options))
        if result.value is not None:
            result.value = options.pow(result.value, power)
        return result.freeze()

    def sqrt(self) -> "Unit":
        """Take the square root of this unit."""
        return self.pow(self.options.from_literal(0.5))

    def to(self, target: Any) -> "Unit":
        """Convert this unit to the units of a valueless target, like "cm".

        Args:
            target: A valueless Unit or a unit string.

        Returns:
            A copy of target carrying this unit's value. A unit without a
            value converts as one of its units, so "m" to "cm" gives 100 cm.
        """
        if not isinstance(target, Unit | str):
            raise errors.u007_error_factory("Parameter must be a Unit or a string.")
        target = self.factory.convert(target)
        if not self.equal_dimension(target):
            raise errors.u001_error_factory("convert", self, target)
        if target.value is not None:
            raise errors.u003_error_factory(self)

        canonical = normalize(self.units, self._value_or_one(), self.options)
        result = target._draft()
        result.value = self.options.clone(
            denormalize(target.units, canonical, self.options)
        )
        return result.freeze()

    def to_si(self) -> "Unit":
        """Convert this unit to SI base units."""
        return self.to_system("si")

    def to_system(self, system: str) -> "Unit":
        """Express this unit in the base units of a unit system, e.g. "cgs".

        Raises:
            InvalidConversionError: if a dimension of this unit has no unit in
                the system, or the system is unknown.
        """
        registry = self.factory.registry
        system_units = registry.system(system)
        pieces: list[UnitPiece] = []
        for dimension, exponent in zip(registry.base_dimensions, self.dimensions):
            if abs(exponent) <= DIMENSION_TOLERANCE:
                continue
            if dimension not in system_units:
                raise errors.u003_system_error_factory(dimension, system)
            system_unit = system_units[dimension]
            pieces.append(UnitPiece(system_unit.unit, system_unit.prefix, exponent))

        result = self._draft(keep_value=False)
        result.units = pieces
        if self.value is not None:
            result.value = self.options.clone(
                denormalize(pieces, self._normalized(), self.options)
            )
        return result.freeze()

    def equals(self, other: Any) -> bool:
        """Check whether two units have equal dimensions and equal values."""
        other = self.factory.convert(other)
        return self.equal_dimension(other) and bool(
            self.options.equals(self._normalized(), other._normalized())
        )

    def equal_dimension(self, other: "Unit") -> bool:
        """Check whether this unit has the same dimensions as another."""
        return self.dimensions.equals(other.dimensions)

    def has_dimension(self, dimension: str | Dimensions) -> bool:
        """Check whether this unit has a named dimension, e.g. "FORCE"."""
        if isinstance(dimension, str):
            found = self.factory.registry.dimension(dimension)
            if found is None:
                return False
            dimension = found
        return self.dimensions.equals(dimension)

    def is_compound(self) -> bool:
        """Return whether the unit is compound (like m/s or cm^2, but not N)."""
        return is_compound(self.units)

    def format(self) -> str:
        """Return the value followed by the unit expression, e.g. "5 m / s^2"."""
        parts = []
        if self.value is not None:
            parts.append(format_number(self.value))
        if unit_str := format_units(self.units):
            parts.append(unit_str)
        return " ".join(parts)

    def __str__(self) -> str:
        """Return a string representation of the unit."""
        return self.format()

    def __repr__(self) -> str:
        """Return a detailed string representation of the unit."""
        return f"Unit({self.format()!r})"

    def __add__(self, other: Any) -> "Unit":
        return self.add(other)

    def __sub__(self, other: Any) -> "Unit":
        return self.sub(other)

    def __mul__(self, other: Any) -> "Unit":
        return self.mul(other)

    def __rmul__(self, other: Any) -> "Unit":
        return self.factory.convert(other).mul(self)

    def __truediv__(self, other: Any) -> "Unit":
        return self.div(other)

    def __rtruediv__(self, other: Any) -> "Unit":
        return self.factory.convert(other).div(self)

    def __pow__(self, power: Any) -> "Unit":
        return self.pow(power)

    def __eq__(self, other: object) -> bool:
        """Check equality of two units, see equals. Unparseable strings are unequal."""
        if not isinstance(other, Unit | str):
            return NotImplemented
        if isinstance(other, str):
            try:
                other = self.factory(other)
            except errors.UnitError:
                return False
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]


class UnitFactory:
    """Creates units bound to one set of numeric options, registry and parser.

    Calling the factory constructs a unit. Accepted signatures are:

        factory()            valueless and dimensionless
        factory("5 m")       value and unit string together
        factory(5)           value without units
        factory(5, "m")      value and unit string
        factory(None, "m")   unit string without value
    """

    def __init__(self, options: NumericOptions | None = None) -> None:
        """Initialise a new factory.

        Args:
            options: Numeric hooks. Defaults to native Python arithmetic.
        """
        self.options = options or NumericOptions()
        self.registry = UnitRegistry(self.options)
        self.parser = UnitParser(self.options, self.registry)

    def __call__(self, value: Any = _MISSING, unit_string: Any = _MISSING) -> Unit:
        """Construct a unit, see the class docstring for accepted signatures."""
        if value is _MISSING and unit_string is _MISSING:
            parsed = self.parser.parse("")
            parsed_value = None
        elif isinstance(value, str) and unit_string is _MISSING:
            parsed = self.parser.parse(value)
            parsed_value = parsed.value
        elif isinstance(unit_string, str) and not isinstance(value, str):
            parsed = self.parser.parse(unit_string)
            parsed_value = None if value is _MISSING else value
        elif unit_string is _MISSING:
            parsed = self.parser.parse("")
            parsed_value = value
        else:
            raise errors.u007_error_factory(
                "To construct a unit, you must supply a single string, a number "
                "and a string, or a custom type and a string."
            )

        units = combine_duplicates(parsed.pieces, self.options)
        if parsed_value is not None and len(units) != len(parsed.pieces):
            canonical = normalize(parsed.pieces, parsed_value, self.options)
            parsed_value = denormalize(units, canonical, self.options)
        return _UnitDraft(self, parsed_value, list(units), parsed.dimensions).freeze()

    def convert(self, param: Any) -> Unit:
        """Return param if it is a Unit, otherwise construct a unit from it."""
        if isinstance(param, Unit):
            return param
        return self(param)

    def configure(self, **overrides: Any) -> Self:
        """Return a new, independent factory with overrides merged onto the options.

        Recognised keys are the NumericOptions hooks. Other keys are kept and
        passed through without interpretation.
        """
        options = self.options.merge(overrides)
        logger.debug("Configuring unit factory with %s", ", ".join(sorted(overrides)))
        return type(self)(options)

    def exists(self, name: str) -> bool:
        """Check whether a unit name, with optional prefix, is known."""
        return self.registry.exists(name)

    def add(self, a: Any, b: Any) -> Unit:
        """Add two units, converting strings and numbers first."""
        return self.convert(a).add(b)

    def sub(self, a: Any, b: Any) -> Unit:
        """Subtract b from a, converting strings and numbers first."""
        return self.convert(a).sub(b)

    def mul(self, a: Any, b: Any) -> Unit:
        """Multiply two units, converting strings and numbers first."""
        return self.convert(a).mul(b)

    def div(self, a: Any, b: Any) -> Unit:
        """Divide a by b, converting strings and numbers first."""
        return self.convert(a).div(b)

    def pow(self, a: Any, power: Any) -> Unit:
        """Raise a unit to a power."""
        return self.convert(a).pow(power)

    def sqrt(self, a: Any) -> Unit:
        """Take the square root of a unit."""
        return self.convert(a).sqrt()

    def to(self, a: Any, target: Any) -> Unit:
        """Convert a unit to the units of a valueless target."""
        return self.convert(a).to(target)

    def to_si(self, a: Any) -> Unit:
        """Convert a unit to SI base units."""
        return self.convert(a).to_si()

    def to_system(self, a: Any, system: str) -> Unit:
        """Convert a unit to the base units of a unit system."""
        return self.convert(a).to_system(system)

    def equals(self, a: Any, b: Any) -> bool:
        """Check whether two units are equal."""
        return self.convert(a).equals(b)
