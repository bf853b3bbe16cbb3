"""Units module."""

from .dimensions import BASE_DIMENSIONS, DIMENSIONLESS, DIMENSIONS, Dimensions
from .registry import UnitRegistry
from .types import BaseUnit, Prefix, SystemUnit, UnitPiece
from .units import Unit, UnitFactory

__all__ = [
    "BASE_DIMENSIONS",
    "DIMENSIONLESS",
    "DIMENSIONS",
    "BaseUnit",
    "Dimensions",
    "Prefix",
    "SystemUnit",
    "Unit",
    "UnitFactory",
    "UnitPiece",
    "UnitRegistry",
]
