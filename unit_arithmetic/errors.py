"""Module for creating errors representing invalid unit operations."""

from typing import Any


class UnitError(Exception):
    """Base class for every error raised by a unit operation."""

    code = "U000"

    def __init__(self, message: str):
        """Initialise a new unit error."""
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        """Return a string representation of the error."""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class DimensionMismatchError(UnitError, ValueError):
    """Operand dimensions differ where they are required to match."""

    code = "U001"


class MissingValueError(UnitError, ValueError):
    """An operand has no value where one is required."""

    code = "U002"


class InvalidConversionError(UnitError, ValueError):
    """A conversion target cannot be used."""

    code = "U003"


class UnresolvedUnitError(UnitError, ValueError):
    """A name does not resolve to any unit and prefix."""

    code = "U004"


class UnitParseError(UnitError, ValueError):
    """A unit expression could not be parsed."""

    code = "U005"


class UnsupportedCloneError(UnitError, TypeError):
    """A value cannot be cloned with the configured clone hook."""

    code = "U006"


class InvalidArgumentsError(UnitError, TypeError):
    """Arguments do not match any accepted signature."""

    code = "U007"


def u001_error_factory(operation: str, left: Any, right: Any) -> DimensionMismatchError:
    """Factory for U001: Dimensions do not match."""
    return DimensionMismatchError(
        f"Cannot {operation} {left} and {right}: dimensions do not match"
    )


def u002_error_factory(operation: str, left: Any, right: Any) -> MissingValueError:
    """Factory for U002: Both units must have values."""
    return MissingValueError(
        f"Cannot {operation} {left} and {right}: both units must have values"
    )


def u003_error_factory(unit: Any) -> InvalidConversionError:
    """Factory for U003: Conversion target must be valueless."""
    return InvalidConversionError(
        f"Cannot convert {unit}: target unit must be valueless"
    )


def u003_system_error_factory(dimension: str, system: str) -> InvalidConversionError:
    """Factory for U003: Dimension has no unit in the requested unit system."""
    return InvalidConversionError(
        f"Cannot express dimension {dimension} in {system} units"
    )


def u003_unknown_system_error_factory(system: str) -> InvalidConversionError:
    """Factory for U003: Unit system is not registered."""
    return InvalidConversionError(f"Unknown unit system: {system}")


def u004_error_factory(name: str) -> UnresolvedUnitError:
    """Factory for U004: Unit not found."""
    return UnresolvedUnitError(f'Unit "{name}" not found')


def u005_error_factory(text: str, position: int, detail: str) -> UnitParseError:
    """Factory for U005: Unit expression could not be parsed."""
    return UnitParseError(
        f'Could not parse "{text}" at position {position}: {detail}'
    )


def u006_error_factory(value: Any) -> UnsupportedCloneError:
    """Factory for U006: Value type requires a clone hook."""
    return UnsupportedCloneError(
        "To clone units with value types other than int or float, you must "
        f"configure a custom 'clone' hook. (Value type is {type(value).__name__})"
    )


def u007_error_factory(detail: str) -> InvalidArgumentsError:
    """Factory for U007: Arguments do not match an accepted signature."""
    return InvalidArgumentsError(detail)
