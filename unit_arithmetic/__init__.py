"""Dimensionally checked arithmetic on values with units.

Example:
    from unit_arithmetic import unit

    unit("5 m").div("2 s")  # 2.5 m / s
    unit("1 m").add("100 cm").format()  # "2 m"
"""

from contextlib import suppress
from importlib.metadata import PackageNotFoundError, version
from typing import Any

from .errors import (
    DimensionMismatchError,
    InvalidArgumentsError,
    InvalidConversionError,
    MissingValueError,
    UnitError,
    UnitParseError,
    UnresolvedUnitError,
    UnsupportedCloneError,
)
from .numeric import NumericOptions
from .units import Dimensions, Unit, UnitFactory

with suppress(PackageNotFoundError):
    __version__ = version("unit-arithmetic")

unit = UnitFactory()

add = unit.add
sub = unit.sub
mul = unit.mul
div = unit.div
pow = unit.pow
sqrt = unit.sqrt
to = unit.to
to_si = unit.to_si
to_system = unit.to_system
equals = unit.equals
exists = unit.exists


def configure(**overrides: Any) -> UnitFactory:
    """Return a new factory with overrides merged onto the default options."""
    return unit.configure(**overrides)


__all__ = [
    "DimensionMismatchError",
    "Dimensions",
    "InvalidArgumentsError",
    "InvalidConversionError",
    "MissingValueError",
    "NumericOptions",
    "Unit",
    "UnitError",
    "UnitFactory",
    "UnitParseError",
    "UnresolvedUnitError",
    "UnsupportedCloneError",
    "add",
    "configure",
    "div",
    "equals",
    "exists",
    "mul",
    "pow",
    "sqrt",
    "sub",
    "to",
    "to_si",
    "to_system",
    "unit",
]
