"""Parser turning text like "5 kg m / s^2" into a value, unit pieces and dimensions.

Grammar:

    text   := [number] [expr]
    expr   := term ("/" term)*
    term   := factor (["*"] factor)*
    factor := NAME ["^" number] | "(" expr ")" ["^" number]

Juxtaposition and "*" bind tighter than "/", so "kg m / s^2 A" is read as
(kg m) / (s^2 A).
"""

import re
from dataclasses import dataclass
from typing import Any

from .. import errors
from ..numeric import NumericOptions
from .dimensions import DIMENSIONLESS, Dimensions
from .registry import UnitRegistry
from .types import UnitPiece

_TOKEN_RE = re.compile(
    r"(?:"
    r"(?P<number>[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
    r"|(?P<name>[^\W\d]\w*)"
    r"|(?P<op>[\^*/()])"
    r")"
)


@dataclass(frozen=True)
class Token:
    """A lexical token with its position in the source text."""

    kind: str
    text: str
    position: int


@dataclass(frozen=True)
class ParseResult:
    """Raw material for a unit value.

    Attributes:
        value: The leading number converted with the from_literal hook, or None.
        pieces: Unit pieces in the order they appear, duplicates not combined.
        dimensions: Sum of every piece's dimensions times its power.
    """

    value: Any
    pieces: tuple[UnitPiece, ...]
    dimensions: Dimensions


def _literal(text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        return float(text)


def tokenize(text: str) -> list[Token]:
    """Split text into tokens, raising UnitParseError on unknown characters."""
    tokens: list[Token] = []
    position = 0
    while position < len(text):
        if text[position].isspace():
            position += 1
            continue
        match = _TOKEN_RE.match(text, position)
        if not match:
            raise errors.u005_error_factory(
                text, position, f"unexpected character {text[position]!r}"
            )
        kind = match.lastgroup
        assert kind is not None
        tokens.append(Token(kind, match.group(kind), match.start(kind)))
        position = match.end()
    return tokens


class UnitParser:
    """Parses unit expressions against a registry."""

    def __init__(self, options: NumericOptions, registry: UnitRegistry) -> None:
        """Initialise a parser bound to a factory's options and registry."""
        self.options = options
        self.registry = registry

    def parse(self, text: str) -> ParseResult:
        """Parse text into a value, unit pieces and a dimension vector.

        Args:
            text: Representation of the unit, e.g. "5 kg m^2 / s^2". May be empty.
        """
        return _Parse(self, text).run()


class _Parse:
    """State for one call to UnitParser.parse."""

    def __init__(self, parser: UnitParser, text: str) -> None:
        self.parser = parser
        self.text = text
        self.tokens = tokenize(text)
        self.index = 0

    def _peek(self) -> Token | None:
        return self.tokens[self.index] if self.index < len(self.tokens) else None

    def _next(self) -> Token:
        token = self._peek()
        if token is None:
            raise errors.u005_error_factory(
                self.text, len(self.text), "unexpected end of input"
            )
        self.index += 1
        return token

    def _fail(self, token: Token, detail: str) -> errors.UnitParseError:
        return errors.u005_error_factory(self.text, token.position, detail)

    def run(self) -> ParseResult:
        value = None
        token = self._peek()
        if token and token.kind == "number":
            value = self.parser.options.from_literal(_literal(self._next().text))

        pieces: list[UnitPiece] = []
        if self._peek() is not None:
            pieces = self._expr()
        if (token := self._peek()) is not None:
            raise self._fail(token, f"unexpected {token.text!r}")

        mul = self.parser.options.mul
        dimensions = DIMENSIONLESS
        for piece in pieces:
            dimensions = dimensions + piece.unit.dimensions.scale(piece.power, mul)
        return ParseResult(value, tuple(pieces), dimensions)

    def _expr(self) -> list[UnitPiece]:
        pieces = self._term()
        while (token := self._peek()) and token.text == "/":
            self._next()
            pieces.extend(piece.with_power(-piece.power) for piece in self._term())
        return pieces

    def _term(self) -> list[UnitPiece]:
        pieces = self._factor()
        while (token := self._peek()) and (
            token.kind == "name" or token.text in ("(", "*")
        ):
            if token.text == "*":
                self._next()
            pieces.extend(self._factor())
        return pieces

    def _factor(self) -> list[UnitPiece]:
        token = self._next()
        if token.kind == "name":
            unit, prefix = self.parser.registry.find(token.text)
            pieces = [UnitPiece(unit, prefix, 1)]
        elif token.text == "(":
            pieces = self._expr()
            closing = self._next()
            if closing.text != ")":
                raise self._fail(closing, "expected ')'")
        else:
            raise self._fail(token, f"expected a unit name, got {token.text!r}")

        if (token := self._peek()) and token.text == "^":
            self._next()
            exponent = self._next()
            if exponent.kind != "number":
                raise self._fail(exponent, "expected a number after '^'")
            power = _literal(exponent.text)
            pieces = [piece.with_power(piece.power * power) for piece in pieces]
        return pieces
