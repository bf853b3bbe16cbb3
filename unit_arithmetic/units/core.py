"""Algebra on lists of unit pieces.

This module provides the building blocks the Unit type is made of:

- combine_duplicates: merge pieces sharing a base unit and drop zero powers.
- is_compound: whether a piece list is more than a single unit of power 1.
- normalize / denormalize: move a value between a unit expression and the
  coherent root units of its dimensions.
- format_units / format_number: render a piece list and its numbers.

Every numeric operation goes through a NumericOptions instance.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from ..numeric import NumericOptions
from .types import UnitPiece

POWER_TOLERANCE = 1e-15


def combine_duplicates(
    pieces: Iterable[UnitPiece], options: NumericOptions
) -> tuple[UnitPiece, ...]:
    """Combine pieces that share a base unit and remove pieces with zero power.

    Powers are accumulated into the first piece seen for each unit name, which
    also keeps its prefix, so "cm m" combines to "cm^2".

    Args:
        pieces: Unit pieces, possibly with repeated units.
        options: Numeric hooks used to add powers.

    Returns:
        A new tuple in first-seen order.
    """
    combined: dict[str, UnitPiece] = {}
    for piece in pieces:
        if first := combined.get(piece.unit.name):
            combined[piece.unit.name] = first.with_power(
                options.add(first.power, piece.power)
            )
        else:
            combined[piece.unit.name] = piece
    return tuple(
        piece for piece in combined.values() if abs(piece.power) >= POWER_TOLERANCE
    )


def is_compound(pieces: Sequence[UnitPiece]) -> bool:
    """Return whether pieces form a compound unit (like m/s or cm^2, but not N)."""
    if not pieces:
        return False
    return len(pieces) > 1 or abs(pieces[0].power - 1) > POWER_TOLERANCE


def _piece_factor(piece: UnitPiece, options: NumericOptions) -> Any:
    conv = options.from_literal
    return options.pow(
        options.mul(conv(piece.unit.value), conv(piece.prefix.value)),
        conv(piece.power),
    )


def normalize(pieces: Sequence[UnitPiece], value: Any, options: NumericOptions) -> Any:
    """Express value, given in the units of pieces, in coherent root units.

    Offsets only apply to a single unit of power 1, like degC. In a compound
    unit such as J kg^-1 degC^-1 the offset is ignored.
    """
    if value is None or not pieces:
        return value
    if is_compound(pieces):
        result = value
        for piece in pieces:
            result = options.mul(result, _piece_factor(piece, options))
        return result

    piece = pieces[0]
    conv = options.from_literal
    return options.mul(
        options.add(value, conv(piece.unit.offset)),
        options.mul(conv(piece.unit.value), conv(piece.prefix.value)),
    )


def denormalize(
    pieces: Sequence[UnitPiece],
    value: Any,
    options: NumericOptions,
    prefix_value: Any = None,
) -> Any:
    """Express value, given in coherent root units, in the units of pieces.

    This is the inverse of normalize. For a single unit of power 1,
    prefix_value replaces the prefix stored in the piece. It is ignored for
    compound units.
    """
    if value is None or not pieces:
        return value
    if is_compound(pieces):
        result = value
        for piece in pieces:
            result = options.div(result, _piece_factor(piece, options))
        return result

    piece = pieces[0]
    conv = options.from_literal
    prefix = conv(piece.prefix.value if prefix_value is None else prefix_value)
    return options.sub(
        options.div(options.div(value, conv(piece.unit.value)), prefix),
        conv(piece.unit.offset),
    )


def format_number(number: Any) -> str:
    """Render a number, dropping the fractional part of integral floats."""
    if isinstance(number, float) and number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    return str(number)


def _format_piece(piece: UnitPiece, power: Any) -> str:
    if abs(power - 1) > POWER_TOLERANCE:
        return f"{piece.symbol}^{format_number(power)}"
    return piece.symbol


def format_units(pieces: Sequence[UnitPiece]) -> str:
    """Return the unit expression of pieces, e.g. "(kg m^2) / (s^3 mol)".

    Positive powers form the numerator and negative powers the denominator.
    Without a numerator, negative powers are written out, e.g. "s^-1".
    """
    numerator = [_format_piece(p, p.power) for p in pieces if p.power > 0]
    negative = [p for p in pieces if p.power < 0]
    if not numerator:
        return " ".join(_format_piece(p, p.power) for p in negative)
    if not negative:
        return " ".join(numerator)

    denominator = [_format_piece(p, -p.power) for p in negative]
    num_str = " ".join(numerator)
    den_str = " ".join(denominator)
    if len(numerator) > 1:
        num_str = f"({num_str})"
    if len(denominator) > 1:
        den_str = f"({den_str})"
    return f"{num_str} / {den_str}"
