import pytest

from unit_arithmetic import NumericOptions, UnitParseError, UnresolvedUnitError
from unit_arithmetic.units import Dimensions, UnitRegistry
from unit_arithmetic.units.parser import UnitParser, tokenize


@pytest.fixture(scope="module")
def parser() -> UnitParser:
    options = NumericOptions()
    return UnitParser(options, UnitRegistry(options))


def pieces(result) -> list[tuple[str, float]]:
    """Helper returning (symbol, power) for every parsed piece."""
    return [(piece.symbol, piece.power) for piece in result.pieces]


def test_tokenize():
    tokens = tokenize("5.5e3 kg m^-2")
    assert [(t.kind, t.text) for t in tokens] == [
        ("number", "5.5e3"),
        ("name", "kg"),
        ("name", "m"),
        ("op", "^"),
        ("number", "-2"),
    ]
    assert [t.position for t in tokens] == [0, 6, 9, 10, 11]


@pytest.mark.parametrize("text", ["", "   "])
def test_parse_empty(parser, text):
    result = parser.parse(text)
    assert result.value is None
    assert result.pieces == ()
    assert result.dimensions.is_dimensionless()


@pytest.mark.parametrize(
    ("text", "value"),
    [("5", 5), ("-3 m", -3), ("2.5 m", 2.5), ("1e3 m", 1000.0), (".5 s", 0.5)],
)
def test_parse_value(parser, text, value):
    result = parser.parse(text)
    assert result.value == value
    assert type(result.value) is type(value)


def test_parse_no_value(parser):
    assert parser.parse("m / s").value is None


def test_parse_juxtaposition(parser):
    result = parser.parse("kg m^2")
    assert pieces(result) == [("kg", 1), ("m", 2)]


def test_parse_division_groups_following_term(parser):
    result = parser.parse("kg m / s^2 A")
    assert pieces(result) == [("kg", 1), ("m", 1), ("s", -2), ("A", -1)]
    assert result.dimensions.equals(
        Dimensions.of(MASS=1, LENGTH=1, TIME=-2, CURRENT=-1)
    )


def test_parse_explicit_multiplication(parser):
    assert pieces(parser.parse("N * m")) == [("N", 1), ("m", 1)]


def test_parse_repeated_division(parser):
    assert pieces(parser.parse("m / s / s")) == [("m", 1), ("s", -1), ("s", -1)]


def test_parse_parentheses_with_power(parser):
    result = parser.parse("(m / s)^2")
    assert pieces(result) == [("m", 2), ("s", -2)]


def test_parse_keeps_duplicates(parser):
    result = parser.parse("5 m m cm")
    assert pieces(result) == [("m", 1), ("m", 1), ("cm", 1)]
    assert result.dimensions.equals(Dimensions.of(LENGTH=3))


def test_parse_unknown_name(parser):
    with pytest.raises(UnresolvedUnitError):
        parser.parse("5 blargh")


@pytest.mark.parametrize(
    ("text", "position"),
    [("5 m #", 4), ("5 m^s", 4), ("5 m)", 3), ("5 / m", 2), ("m 5", 2)],
)
def test_parse_error_position(parser, text, position):
    with pytest.raises(UnitParseError) as e:
        parser.parse(text)
    assert f"position {position}" in e.value.message
