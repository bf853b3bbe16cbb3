from dataclasses import FrozenInstanceError

import pytest

from unit_arithmetic import (
    DimensionMismatchError,
    Dimensions,
    InvalidArgumentsError,
    InvalidConversionError,
    MissingValueError,
    Unit,
    UnitError,
    UnitFactory,
    UnitParseError,
    UnresolvedUnitError,
    unit,
)
from unit_arithmetic.units import definitions
from unit_arithmetic.units.core import combine_duplicates
from unit_arithmetic.units.dimensions import DIMENSIONLESS


def symbols(u: Unit) -> list[tuple[str, float]]:
    """Helper returning (symbol, power) for every piece of a unit."""
    return [(piece.symbol, piece.power) for piece in u.units]


def piece_dimensions(u: Unit) -> Dimensions:
    """Helper summing the dimensions contributed by every piece."""
    total = DIMENSIONLESS
    for piece in u.units:
        total = total + Dimensions(e * piece.power for e in piece.unit.dimensions)
    return total


def assert_error(error: pytest.ExceptionInfo[UnitError], code: str, message: str):
    """Assert that an error has the expected code and message content."""
    assert error.value.code == code
    assert message in error.value.message


def test_construct_from_string():
    u = unit("5 m")
    assert u.value == 5
    assert symbols(u) == [("m", 1)]
    assert u.dimensions.equals(Dimensions.of(LENGTH=1))


def test_construct_empty():
    u = unit()
    assert u.value is None
    assert u.units == ()
    assert u.dimensions.is_dimensionless()
    assert str(u) == ""


def test_construct_value_only():
    u = unit(5)
    assert u.value == 5
    assert u.units == ()
    assert str(u) == "5"


def test_construct_value_and_string():
    assert str(unit(5, "m")) == "5 m"
    assert str(unit(2.5, "km / h")) == "2.5 km / h"


def test_construct_valueless_string():
    u = unit(None, "m")
    assert u.value is None
    assert str(u) == "m"
    assert str(unit("kg m")) == "kg m"


@pytest.mark.parametrize(
    "args",
    [(5, 3), ("5", "m"), (5, ["m"])],
)
def test_construct_invalid_arguments(args):
    with pytest.raises(InvalidArgumentsError) as e:
        unit(*args)
    assert e.value.code == "U007"


def test_construct_combines_duplicates():
    u = unit("5 cm m")
    assert symbols(u) == [("cm", 2)]
    assert u.value == pytest.approx(500)


def test_construct_keeps_value_without_duplicates():
    u = unit("5 km")
    assert u.value == 5


def test_construct_unknown_unit():
    with pytest.raises(UnresolvedUnitError) as e:
        unit("5 foo")
    assert_error(e, "U004", '"foo"')


@pytest.mark.parametrize("text", ["5 m^", "5 m $", "5 m)", "5 (m", "5 m / "])
def test_construct_parse_error(text):
    with pytest.raises(UnitParseError) as e:
        unit(text)
    assert e.value.code == "U005"


def test_add_converts_to_left_units():
    result = unit("1 m").add("100 cm")
    assert result.value == pytest.approx(2)
    assert result.format() == "2 m"


def test_add_keeps_left_prefix():
    result = unit("50 cm").add("1 m")
    assert result.value == pytest.approx(150)
    assert symbols(result) == [("cm", 1)]


def test_add_dimension_mismatch():
    with pytest.raises(DimensionMismatchError) as e:
        unit("1 m").add("1 s")
    assert_error(e, "U001", "dimensions do not match")


def test_add_missing_value():
    with pytest.raises(MissingValueError) as e:
        unit("m").add("1 m")
    assert_error(e, "U002", "both units must have values")


def test_add_offset_units_in_kelvin():
    result = unit("1 degC").add("1 degC")
    assert result.value == pytest.approx(275.15)
    assert symbols(result) == [("degC", 1)]


def test_sub():
    result = unit("5 m").sub("20 cm")
    assert result.value == pytest.approx(4.8)
    assert symbols(result) == [("m", 1)]


def test_sub_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        unit("5 m").sub("2 kg")


def test_mul_same_unit():
    result = unit("1 m").mul("1 m")
    assert symbols(result) == [("m", 2)]
    assert result.value == pytest.approx(1)
    assert result.dimensions.equals(Dimensions.of(LENGTH=2))


def test_mul_cancels_to_dimensionless():
    result = unit("1 m").mul("1 m^-1")
    assert result.units == ()
    assert result.value == pytest.approx(1)
    assert result.dimensions.is_dimensionless()


def test_mul_values():
    result = unit("2 m").mul("3 m")
    assert result.format() == "6 m^2"


def test_mul_with_valueless():
    result = unit("2 m").mul("s")
    assert result.value == pytest.approx(2)
    assert str(result) == "2 m s"


def test_mul_both_valueless():
    result = unit("m").mul("s")
    assert result.value is None
    assert str(result) == "m s"


def test_div():
    result = unit("10 m").div("2 s")
    assert result.value == pytest.approx(5)
    assert str(result) == "5 m / s"
    assert result.dimensions.equals(Dimensions.of(LENGTH=1, TIME=-1))


def test_div_same_units():
    result = unit("10 m").div("2 m")
    assert result.units == ()
    assert str(result) == "5"


def test_div_mixed_prefixes():
    result = unit("1 km").div("1 m")
    assert result.dimensions.is_dimensionless()
    assert result.units == ()
    assert result.value == pytest.approx(1000)


def test_pow():
    result = unit("3 m").pow(2)
    assert result.format() == "9 m^2"
    assert result.dimensions.equals(Dimensions.of(LENGTH=2))


def test_pow_zero():
    result = unit("3 m / s").pow(0)
    assert result.units == ()
    assert result.value == 1


def test_sqrt():
    result = unit("9 m^2").sqrt()
    assert result.value == pytest.approx(3)
    assert str(result) == "3 m"


def test_to():
    result = unit("1 m").to("cm")
    assert result.value == pytest.approx(100)
    assert str(result) == "100 cm"


def test_to_compound():
    result = unit("100 km / h").to("m / s")
    assert result.value == pytest.approx(27.7777777778)
    assert symbols(result) == [("m", 1), ("s", -1)]


def test_to_offset_units():
    assert unit("0 degC").to("degF").value == pytest.approx(32)
    assert unit("212 degF").to("degC").value == pytest.approx(100)


def test_to_valueless():
    result = unit("m").to("cm")
    assert result.value == pytest.approx(100)
    assert str(result) == "100 cm"
    assert unit("km / h").to("m / s").value == pytest.approx(1 / 3.6)


def test_to_unit_target():
    result = unit("1 inch").to(unit("cm"))
    assert result.value == pytest.approx(2.54)


def test_to_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        unit("5 m").to("s")


def test_to_valued_target():
    with pytest.raises(InvalidConversionError) as e:
        unit("5 m").to("3 cm")
    assert_error(e, "U003", "must be valueless")


def test_to_invalid_target():
    with pytest.raises(InvalidArgumentsError):
        unit("5 m").to(5)


def test_to_si():
    result = unit("1 km / h").to_si()
    assert symbols(result) == [("m", 1), ("s", -1)]
    assert result.value == pytest.approx(1 / 3.6)


def test_to_si_mass_uses_kilogram():
    result = unit("500 g").to_si()
    assert symbols(result) == [("kg", 1)]
    assert result.value == pytest.approx(0.5)


def test_to_si_temperature():
    result = unit("1 degC").to_si()
    assert str(result) == "274.15 K"


def test_to_si_derived_unit():
    result = unit("2 N").to_si()
    assert symbols(result) == [("kg", 1), ("m", 1), ("s", -2)]
    assert result.value == pytest.approx(2)


@pytest.mark.parametrize(
    "text", ["1 m", "3 kg m / s^2", "5 degF", "2 kWh", "8 B", "1 rad / s", "4 mol"]
)
def test_to_si_never_raises_for_registered_dimensions(text):
    result = unit(text).to_si()
    assert result.dimensions.equals(unit(text).dimensions)


def test_to_si_unmapped_dimension(monkeypatch):
    systems = {name: dict(system) for name, system in definitions.UNIT_SYSTEMS.items()}
    del systems["si"]["BIT"]
    monkeypatch.setattr(definitions, "UNIT_SYSTEMS", systems)
    factory = UnitFactory()
    with pytest.raises(InvalidConversionError) as e:
        factory("8 b").to_si()
    assert_error(e, "U003", "BIT")


def test_to_system_cgs():
    result = unit("1 N").to_system("cgs")
    assert symbols(result) == [("g", 1), ("cm", 1), ("s", -2)]
    assert result.value == pytest.approx(1e5)


def test_to_system_us():
    result = unit("1 m").to_system("us")
    assert symbols(result) == [("ft", 1)]
    assert result.value == pytest.approx(3.280839895)


def test_to_system_unknown():
    with pytest.raises(InvalidConversionError) as e:
        unit("1 m").to_system("imperial")
    assert_error(e, "U003", "imperial")


def test_equals():
    assert unit("1 m").equals("100 cm")
    assert not unit("1 m").equals("99 cm")
    assert not unit("1 m").equals("1 s")


def test_equality_operator():
    assert unit("1 m") == unit("100 cm")
    assert unit("1 m") == "1000 mm"
    assert unit("1 m") != unit("1 s")
    assert unit("1 m") != 5


def test_equality_operator_with_unparseable_string():
    assert unit("1 m") != "hello"
    assert not unit("1 m") == "5 m ^"


def test_clone():
    original = unit("5 m")
    copy = original.clone()
    assert copy is not original
    assert copy.value == 5
    assert copy.units == original.units


def test_get_units():
    result = unit("5 m / s").get_units()
    assert result.value is None
    assert str(result) == "m / s"


@pytest.mark.parametrize(
    ("text", "expected"),
    [("5 N", False), ("5 m / s", True), ("5 cm^2", True), ("5", False), ("m", False)],
)
def test_is_compound(text, expected):
    assert unit(text).is_compound() is expected


def test_has_dimension():
    assert unit("5 N").has_dimension("FORCE")
    assert unit("5 kg m / s^2").has_dimension("FORCE")
    assert not unit("5 J").has_dimension("FORCE")
    assert not unit("5 J").has_dimension("UNKNOWN")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("5 m", "5 m"),
        ("10 m / s^2", "10 m / s^2"),
        ("5 s^-1", "5 s^-1"),
        ("1 kg m^2 / s^3 mol", "1 (kg m^2) / (s^3 mol)"),
        ("2.5 N m", "2.5 N m"),
        ("m / s", "m / s"),
    ],
)
def test_format(text, expected):
    assert unit(text).format() == expected
    assert str(unit(text)) == expected


def test_repr():
    assert repr(unit("5 m")) == "Unit('5 m')"


def test_operators():
    assert (unit("1 m") + "100 cm").format() == "2 m"
    assert (unit("1 m") - "50 cm").value == pytest.approx(0.5)
    assert str(unit("2 m") * unit("3 s")) == "6 m s"
    assert str(unit("6 m") / "2 s") == "3 m / s"
    assert str(unit("3 m") ** 2) == "9 m^2"
    assert str(2 * unit("3 m")) == "6 m"


def test_unit_is_frozen():
    u = unit("5 m")
    with pytest.raises(FrozenInstanceError):
        u.value = 10  # type: ignore[misc]
    with pytest.raises(FrozenInstanceError):
        u.units = ()  # type: ignore[misc]


def test_unit_is_unhashable():
    with pytest.raises(TypeError):
        hash(unit("5 m"))


def test_operations_leave_operands_unchanged():
    a = unit("1 m")
    b = unit("100 cm")
    results = [a.add(b), a.sub(b), a.mul(b), a.div(b), a.pow(3), a.to("mm")]
    assert str(a) == "1 m"
    assert str(b) == "100 cm"
    assert all(result is not a and result is not b for result in results)


@pytest.mark.parametrize(
    "u",
    [
        unit("5 kg m / s^2"),
        unit("5 cm m"),
        unit("1 m").mul("1 s").div("1 kg"),
        unit("2 km / h").pow(3),
        unit("9 m^2").sqrt(),
        unit("1 m").mul("1 m^-1"),
        unit("1 N").to_system("cgs"),
    ],
)
def test_dimensions_match_pieces(u):
    assert u.dimensions.equals(piece_dimensions(u))


@pytest.mark.parametrize(
    "u",
    [unit("5 kg m / s^2"), unit("5 cm m s s"), unit("1 m").mul("1 m").div("1 s")],
)
def test_units_are_combined(u):
    assert combine_duplicates(u.units, u.options) == u.units
    names = [piece.unit.name for piece in u.units]
    assert len(names) == len(set(names))


def test_units_bound_to_factory():
    factory = UnitFactory()
    u = factory("5 m")
    assert u.factory is factory
    assert u.options is factory.options
