"""Registry of prefixes, units and unit systems, and name resolution."""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from .. import errors
from ..numeric import NumericOptions
from . import definitions
from .dimensions import BASE_DIMENSIONS, DIMENSIONS, Dimensions
from .types import BaseUnit, Prefix, SystemUnit

logger = logging.getLogger(__name__)


class UnitRegistry:
    """Owns the unit tables and resolves names such as "cm" to a unit and prefix.

    Tables are built once in the constructor and are read-only afterwards.
    """

    def __init__(self, options: NumericOptions | None = None) -> None:
        """Initialise a new registry from the built-in definitions.

        Args:
            options: numeric options of the owning factory
        """
        self.options = options or NumericOptions()
        self.base_dimensions = BASE_DIMENSIONS
        self.dimensions: Mapping[str, Dimensions] = DIMENSIONS
        self.prefixes: Mapping[str, Mapping[str, Prefix]] = definitions.PREFIXES
        self.units: Mapping[str, BaseUnit] = MappingProxyType(self._build_units())
        self.systems: Mapping[str, Mapping[str, SystemUnit]] = MappingProxyType(
            {
                name: MappingProxyType(self._build_system(system))
                for name, system in definitions.UNIT_SYSTEMS.items()
            }
        )
        logger.debug(
            "Built unit registry with %d units and %d unit systems",
            len(self.units),
            len(self.systems),
        )

    def _build_units(self) -> dict[str, BaseUnit]:
        units: dict[str, BaseUnit] = {}
        for name, dimension, prefixes, value, offset in definitions.UNITS:
            units[name] = BaseUnit(
                name=name,
                dimension=dimension,
                dimensions=self.dimensions[dimension],
                prefixes=self.prefixes[prefixes],
                value=value,
                offset=offset,
            )
        # aliases follow the primary units in resolution order
        for alias, target in definitions.ALIASES.items():
            units[alias] = units[target].alias(alias)
        return units

    def _build_system(
        self, system: Mapping[str, tuple[str, str, str]]
    ) -> dict[str, SystemUnit]:
        return {
            dimension: SystemUnit(self.units[unit], self.prefixes[table][prefix])
            for dimension, (unit, table, prefix) in system.items()
        }

    def resolve(self, name: str) -> tuple[BaseUnit, Prefix] | None:
        """Find the unit and prefix a name refers to.

        An exact unit name wins. Otherwise unit names are tried in table order
        and the first one that ends the name, leaving a prefix the unit
        accepts, is returned. When several units qualify the table order
        decides.

        Args:
            name: A unit name with an optional prefix, like "cm" or "inch".

        Returns:
            The unit and prefix, or None if the name does not resolve.
        """
        if unit := self.units.get(name):
            return unit, unit.prefixes[""]

        for unit_name, unit in self.units.items():
            if not name.endswith(unit_name):
                continue
            prefix = unit.prefixes.get(name[: len(name) - len(unit_name)])
            if prefix is not None:
                return unit, prefix

        logger.debug("Unit name %r did not resolve", name)
        return None

    def find(self, name: str) -> tuple[BaseUnit, Prefix]:
        """Resolve a name, raising UnresolvedUnitError if it is unknown."""
        if (found := self.resolve(name)) is None:
            raise errors.u004_error_factory(name)
        return found

    def exists(self, name: str) -> bool:
        """Check whether a name, with optional prefix, resolves to a unit."""
        return self.resolve(name) is not None

    def system(self, name: str) -> Mapping[str, SystemUnit]:
        """Return the unit system registered under name."""
        try:
            return self.systems[name]
        except KeyError:
            raise errors.u003_unknown_system_error_factory(name) from None

    def dimension(self, name: str) -> Dimensions | None:
        """Return the named dimension, e.g. "FORCE", or None if unknown."""
        return self.dimensions.get(name)
