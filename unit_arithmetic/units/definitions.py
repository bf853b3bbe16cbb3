"""Static tables of prefixes, units, aliases and unit systems.

These are plain data. UnitRegistry turns them into Prefix and BaseUnit records.
"""

import math
from types import MappingProxyType

from .types import Prefix

PrefixTable = MappingProxyType[str, Prefix]


def _prefix_table(*entries: tuple[str, float, bool]) -> PrefixTable:
    table = {"": Prefix("", 1, True)}
    table.update(
        (name, Prefix(name, value, scientific)) for name, value, scientific in entries
    )
    return MappingProxyType(table)


def _merge(*tables: PrefixTable) -> PrefixTable:
    merged: dict[str, Prefix] = {}
    for table in tables:
        merged.update(table)
    return MappingProxyType(merged)


_SHORT_NAMES = ("da", "h", "k", "M", "G", "T", "P", "E", "Z", "Y")
_SHORT_FRACTIONS = ("d", "c", "m", "u", "n", "p", "f", "a", "z", "y")
_LONG_NAMES = (
    "deca", "hecto", "kilo", "mega", "giga", "tera", "peta", "exa", "zetta", "yotta"
)
_LONG_FRACTIONS = (
    "deci", "centi", "milli", "micro", "nano", "pico", "femto", "atto", "zepto", "yocto"
)
_IEC_SHORT = ("Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi")
_IEC_LONG = ("kibi", "mebi", "gibi", "tebi", "pebi", "exi", "zebi", "yobi")
_EXPONENTS = (1, 2, 3, 6, 9, 12, 15, 18, 21, 24)


def _decimal_table(
    names: tuple[str, ...], fractions: tuple[str, ...], power: int
) -> PrefixTable:
    # da, h, d and c are not preferred for scientific notation
    return _prefix_table(
        *(
            (name, 10.0 ** (exp * power), exp > 2)
            for name, exp in zip(names, _EXPONENTS)
        ),
        *(
            (name, 10.0 ** (-exp * power), exp > 2)
            for name, exp in zip(fractions, _EXPONENTS)
        ),
    )


def _binary_table(names: tuple[str, ...], base: int, start: int) -> PrefixTable:
    return _prefix_table(
        *((name, float(base ** (start + i)), True) for i, name in enumerate(names))
    )


_SHORT = _decimal_table(_SHORT_NAMES, _SHORT_FRACTIONS, 1)
_LONG = _decimal_table(_LONG_NAMES, _LONG_FRACTIONS, 1)
_BINARY_SHORT_SI = _binary_table(_SHORT_NAMES[2:], 1000, 1)
_BINARY_LONG_SI = _binary_table(_LONG_NAMES[2:], 1000, 1)
_BINARY_SHORT_IEC = _binary_table(_IEC_SHORT, 1024, 1)
_BINARY_LONG_IEC = _binary_table(_IEC_LONG, 1024, 1)

# SHORT and the SI binary tables also accept the prefixes merged into them
_SHORTLONG = _merge(_SHORT, _LONG)
_BINARY_SHORT = _merge(_BINARY_SHORT_SI, _BINARY_SHORT_IEC)
_BINARY_LONG = _merge(_BINARY_LONG_SI, _BINARY_LONG_IEC)

PREFIXES = MappingProxyType(
    {
        "NONE": _prefix_table(),
        "SHORT": _SHORTLONG,
        "LONG": _LONG,
        "SQUARED": _decimal_table(_SHORT_NAMES, _SHORT_FRACTIONS, 2),
        "CUBIC": _decimal_table(_SHORT_NAMES, _SHORT_FRACTIONS, 3),
        "BINARY_SHORT_SI": _BINARY_SHORT,
        "BINARY_SHORT_IEC": _BINARY_SHORT_IEC,
        "BINARY_LONG_SI": _BINARY_LONG,
        "BINARY_LONG_IEC": _BINARY_LONG_IEC,
        "BTU": _prefix_table(("MM", 1e6, True)),
        "SHORTLONG": _SHORTLONG,
        "BINARY_SHORT": _BINARY_SHORT,
        "BINARY_LONG": _BINARY_LONG,
    }
)

# name, dimension, prefix table, scale, offset
UNITS: tuple[tuple[str, str, str, float, float], ...] = (
    # length
    ("meter", "LENGTH", "LONG", 1, 0),
    ("inch", "LENGTH", "NONE", 0.0254, 0),
    ("foot", "LENGTH", "NONE", 0.3048, 0),
    ("yard", "LENGTH", "NONE", 0.9144, 0),
    ("mile", "LENGTH", "NONE", 1609.344, 0),
    ("link", "LENGTH", "NONE", 0.201168, 0),
    ("rod", "LENGTH", "NONE", 5.0292, 0),
    ("chain", "LENGTH", "NONE", 20.1168, 0),
    ("angstrom", "LENGTH", "NONE", 1e-10, 0),
    ("m", "LENGTH", "SHORT", 1, 0),
    ("in", "LENGTH", "NONE", 0.0254, 0),
    ("ft", "LENGTH", "NONE", 0.3048, 0),
    ("yd", "LENGTH", "NONE", 0.9144, 0),
    ("mi", "LENGTH", "NONE", 1609.344, 0),
    ("li", "LENGTH", "NONE", 0.201168, 0),
    ("rd", "LENGTH", "NONE", 5.029210, 0),
    ("ch", "LENGTH", "NONE", 20.1168, 0),
    ("mil", "LENGTH", "NONE", 0.0000254, 0),
    # surface
    ("m2", "SURFACE", "SQUARED", 1, 0),
    ("sqin", "SURFACE", "NONE", 0.00064516, 0),
    ("sqft", "SURFACE", "NONE", 0.09290304, 0),
    ("sqyd", "SURFACE", "NONE", 0.83612736, 0),
    ("sqmi", "SURFACE", "NONE", 2589988.110336, 0),
    ("sqrd", "SURFACE", "NONE", 25.29295, 0),
    ("sqch", "SURFACE", "NONE", 404.6873, 0),
    ("sqmil", "SURFACE", "NONE", 6.4516e-10, 0),
    ("acre", "SURFACE", "NONE", 4046.86, 0),
    ("hectare", "SURFACE", "NONE", 10000, 0),
    # volume
    ("m3", "VOLUME", "CUBIC", 1, 0),
    ("L", "VOLUME", "SHORT", 0.001, 0),
    ("l", "VOLUME", "SHORT", 0.001, 0),
    ("litre", "VOLUME", "LONG", 0.001, 0),
    ("cuin", "VOLUME", "NONE", 1.6387064e-5, 0),
    ("cuft", "VOLUME", "NONE", 0.028316846592, 0),
    ("cuyd", "VOLUME", "NONE", 0.764554857984, 0),
    ("teaspoon", "VOLUME", "NONE", 0.000005, 0),
    ("tablespoon", "VOLUME", "NONE", 0.000015, 0),
    ("drop", "VOLUME", "NONE", 5e-8, 0),
    ("gtt", "VOLUME", "NONE", 5e-8, 0),
    ("minim", "VOLUME", "NONE", 0.00000006161152, 0),
    ("fluiddram", "VOLUME", "NONE", 0.0000036966911, 0),
    ("fluidounce", "VOLUME", "NONE", 0.00002957353, 0),
    ("gill", "VOLUME", "NONE", 0.0001182941, 0),
    ("cc", "VOLUME", "NONE", 1e-6, 0),
    ("cup", "VOLUME", "NONE", 0.0002365882, 0),
    ("pint", "VOLUME", "NONE", 0.0004731765, 0),
    ("quart", "VOLUME", "NONE", 0.0009463529, 0),
    ("gallon", "VOLUME", "NONE", 0.003785412, 0),
    ("beerbarrel", "VOLUME", "NONE", 0.1173478, 0),
    ("oilbarrel", "VOLUME", "NONE", 0.1589873, 0),
    ("hogshead", "VOLUME", "NONE", 0.2384810, 0),
    ("fldr", "VOLUME", "NONE", 0.0000036966911, 0),
    ("floz", "VOLUME", "NONE", 0.00002957353, 0),
    ("gi", "VOLUME", "NONE", 0.0001182941, 0),
    ("cp", "VOLUME", "NONE", 0.0002365882, 0),
    ("pt", "VOLUME", "NONE", 0.0004731765, 0),
    ("qt", "VOLUME", "NONE", 0.0009463529, 0),
    ("gal", "VOLUME", "NONE", 0.003785412, 0),
    ("bbl", "VOLUME", "NONE", 0.1173478, 0),
    ("obl", "VOLUME", "NONE", 0.1589873, 0),
    # mass
    ("g", "MASS", "SHORT", 0.001, 0),
    ("gram", "MASS", "LONG", 0.001, 0),
    ("ton", "MASS", "SHORT", 907.18474, 0),
    ("tonne", "MASS", "SHORT", 1000, 0),
    ("grain", "MASS", "NONE", 64.79891e-6, 0),
    ("dram", "MASS", "NONE", 1.7718451953125e-3, 0),
    ("ounce", "MASS", "NONE", 28.349523125e-3, 0),
    ("poundmass", "MASS", "NONE", 453.59237e-3, 0),
    ("hundredweight", "MASS", "NONE", 45.359237, 0),
    ("stick", "MASS", "NONE", 115e-3, 0),
    ("stone", "MASS", "NONE", 6.35029318, 0),
    ("gr", "MASS", "NONE", 64.79891e-6, 0),
    ("dr", "MASS", "NONE", 1.7718451953125e-3, 0),
    ("oz", "MASS", "NONE", 28.349523125e-3, 0),
    ("lbm", "MASS", "NONE", 453.59237e-3, 0),
    ("cwt", "MASS", "NONE", 45.359237, 0),
    # time
    ("s", "TIME", "SHORT", 1, 0),
    ("min", "TIME", "NONE", 60, 0),
    ("h", "TIME", "NONE", 3600, 0),
    ("second", "TIME", "LONG", 1, 0),
    ("sec", "TIME", "LONG", 1, 0),
    ("minute", "TIME", "NONE", 60, 0),
    ("hour", "TIME", "NONE", 3600, 0),
    ("day", "TIME", "NONE", 86400, 0),
    ("week", "TIME", "NONE", 7 * 86400, 0),
    ("month", "TIME", "NONE", 2629800, 0),  # 1/12 Julian year
    ("year", "TIME", "NONE", 31557600, 0),  # Julian year
    ("decade", "TIME", "NONE", 315576000, 0),
    ("century", "TIME", "NONE", 3155760000, 0),
    ("millennium", "TIME", "NONE", 31557600000, 0),
    # frequency
    ("hertz", "FREQUENCY", "LONG", 1, 0),
    ("Hz", "FREQUENCY", "SHORT", 1, 0),
    # angle
    ("rad", "ANGLE", "SHORT", 1, 0),
    ("radian", "ANGLE", "LONG", 1, 0),
    ("deg", "ANGLE", "SHORT", math.pi / 180, 0),
    ("degree", "ANGLE", "LONG", math.pi / 180, 0),
    ("grad", "ANGLE", "SHORT", math.pi / 200, 0),
    ("gradian", "ANGLE", "LONG", math.pi / 200, 0),
    ("cycle", "ANGLE", "NONE", 2 * math.pi, 0),
    ("arcsec", "ANGLE", "NONE", math.pi / 648000, 0),
    ("arcmin", "ANGLE", "NONE", math.pi / 10800, 0),
    # electric current
    ("A", "CURRENT", "SHORT", 1, 0),
    ("ampere", "CURRENT", "LONG", 1, 0),
    # temperature
    ("K", "TEMPERATURE", "NONE", 1, 0),
    ("degC", "TEMPERATURE", "NONE", 1, 273.15),
    ("degF", "TEMPERATURE", "NONE", 1 / 1.8, 459.67),
    ("degR", "TEMPERATURE", "NONE", 1 / 1.8, 0),
    ("kelvin", "TEMPERATURE", "NONE", 1, 0),
    ("celsius", "TEMPERATURE", "NONE", 1, 273.15),
    ("fahrenheit", "TEMPERATURE", "NONE", 1 / 1.8, 459.67),
    ("rankine", "TEMPERATURE", "NONE", 1 / 1.8, 0),
    # amount of substance
    ("mol", "AMOUNT_OF_SUBSTANCE", "SHORT", 1, 0),
    ("mole", "AMOUNT_OF_SUBSTANCE", "LONG", 1, 0),
    # luminous intensity
    ("cd", "LUMINOUS_INTENSITY", "NONE", 1, 0),
    ("candela", "LUMINOUS_INTENSITY", "NONE", 1, 0),
    # force
    ("N", "FORCE", "SHORT", 1, 0),
    ("newton", "FORCE", "LONG", 1, 0),
    ("dyn", "FORCE", "SHORT", 0.00001, 0),
    ("dyne", "FORCE", "LONG", 0.00001, 0),
    ("lbf", "FORCE", "NONE", 4.4482216152605, 0),
    ("poundforce", "FORCE", "NONE", 4.4482216152605, 0),
    ("kip", "FORCE", "LONG", 4448.2216, 0),
    # energy
    ("J", "ENERGY", "SHORT", 1, 0),
    ("joule", "ENERGY", "SHORT", 1, 0),
    ("erg", "ENERGY", "NONE", 1e-7, 0),
    ("Wh", "ENERGY", "SHORT", 3600, 0),
    ("BTU", "ENERGY", "BTU", 1055.05585262, 0),
    ("eV", "ENERGY", "SHORT", 1.602176565e-19, 0),
    ("electronvolt", "ENERGY", "LONG", 1.602176565e-19, 0),
    # power
    ("W", "POWER", "SHORT", 1, 0),
    ("watt", "POWER", "LONG", 1, 0),
    ("hp", "POWER", "NONE", 745.6998715386, 0),
    ("VA", "POWER", "SHORT", 1, 0),
    # pressure
    ("Pa", "PRESSURE", "SHORT", 1, 0),
    ("psi", "PRESSURE", "NONE", 6894.75729276459, 0),
    ("atm", "PRESSURE", "NONE", 101325, 0),
    ("bar", "PRESSURE", "SHORTLONG", 100000, 0),
    ("torr", "PRESSURE", "NONE", 133.322, 0),
    ("mmHg", "PRESSURE", "NONE", 133.322, 0),
    ("mmH2O", "PRESSURE", "NONE", 9.80665, 0),
    ("cmH2O", "PRESSURE", "NONE", 98.0665, 0),
    # electric charge
    ("coulomb", "ELECTRIC_CHARGE", "LONG", 1, 0),
    ("C", "ELECTRIC_CHARGE", "SHORT", 1, 0),
    # electric capacitance
    ("farad", "ELECTRIC_CAPACITANCE", "LONG", 1, 0),
    ("F", "ELECTRIC_CAPACITANCE", "SHORT", 1, 0),
    # electric potential
    ("volt", "ELECTRIC_POTENTIAL", "LONG", 1, 0),
    ("V", "ELECTRIC_POTENTIAL", "SHORT", 1, 0),
    # electric resistance, both Mohm and megaohm are accepted
    ("ohm", "ELECTRIC_RESISTANCE", "SHORTLONG", 1, 0),
    # electric inductance
    ("henry", "ELECTRIC_INDUCTANCE", "LONG", 1, 0),
    ("H", "ELECTRIC_INDUCTANCE", "SHORT", 1, 0),
    # electric conductance
    ("siemens", "ELECTRIC_CONDUCTANCE", "LONG", 1, 0),
    ("S", "ELECTRIC_CONDUCTANCE", "SHORT", 1, 0),
    # magnetic flux
    ("weber", "MAGNETIC_FLUX", "LONG", 1, 0),
    ("Wb", "MAGNETIC_FLUX", "SHORT", 1, 0),
    # magnetic flux density
    ("tesla", "MAGNETIC_FLUX_DENSITY", "LONG", 1, 0),
    ("T", "MAGNETIC_FLUX_DENSITY", "SHORT", 1, 0),
    # binary
    ("b", "BIT", "BINARY_SHORT", 1, 0),
    ("bits", "BIT", "BINARY_LONG", 1, 0),
    ("B", "BIT", "BINARY_SHORT", 8, 0),
    ("bytes", "BIT", "BINARY_LONG", 8, 0),
)

# alias -> registered unit name
ALIASES = MappingProxyType(
    {
        "meters": "meter",
        "inches": "inch",
        "feet": "foot",
        "yards": "yard",
        "miles": "mile",
        "links": "link",
        "rods": "rod",
        "chains": "chain",
        "angstroms": "angstrom",
        "lt": "l",
        "litres": "litre",
        "liter": "litre",
        "liters": "litre",
        "teaspoons": "teaspoon",
        "tablespoons": "tablespoon",
        "minims": "minim",
        "fluiddrams": "fluiddram",
        "fluidounces": "fluidounce",
        "gills": "gill",
        "cups": "cup",
        "pints": "pint",
        "quarts": "quart",
        "gallons": "gallon",
        "beerbarrels": "beerbarrel",
        "oilbarrels": "oilbarrel",
        "hogsheads": "hogshead",
        "gtts": "gtt",
        "grams": "gram",
        "tons": "ton",
        "tonnes": "tonne",
        "grains": "grain",
        "drams": "dram",
        "ounces": "ounce",
        "poundmasses": "poundmass",
        "hundredweights": "hundredweight",
        "sticks": "stick",
        "lb": "lbm",
        "lbs": "lbm",
        "kips": "kip",
        "acres": "acre",
        "hectares": "hectare",
        "sqfeet": "sqft",
        "sqyard": "sqyd",
        "sqmile": "sqmi",
        "sqmiles": "sqmi",
        "mmhg": "mmHg",
        "mmh2o": "mmH2O",
        "cmh2o": "cmH2O",
        "seconds": "second",
        "secs": "second",
        "minutes": "minute",
        "mins": "minute",
        "hours": "hour",
        "hr": "hour",
        "hrs": "hour",
        "days": "day",
        "weeks": "week",
        "months": "month",
        "years": "year",
        "decades": "decade",
        "centuries": "century",
        "millennia": "millennium",
        "radians": "radian",
        "degrees": "degree",
        "gradians": "gradian",
        "cycles": "cycle",
        "arcsecond": "arcsec",
        "arcseconds": "arcsec",
        "arcminute": "arcmin",
        "arcminutes": "arcmin",
        "BTUs": "BTU",
        "watts": "watt",
        "joules": "joule",
        "amperes": "ampere",
        "coulombs": "coulomb",
        "volts": "volt",
        "ohms": "ohm",
        "farads": "farad",
        "webers": "weber",
        "teslas": "tesla",
        "electronvolts": "electronvolt",
        "moles": "mole",
    }
)

# dimension -> (unit name, prefix table, prefix name)
_SI_SYSTEM = {
    "LENGTH": ("m", "SHORT", ""),
    "MASS": ("g", "SHORT", "k"),
    "TIME": ("s", "SHORT", ""),
    "CURRENT": ("A", "SHORT", ""),
    "TEMPERATURE": ("K", "NONE", ""),
    "LUMINOUS_INTENSITY": ("cd", "NONE", ""),
    "AMOUNT_OF_SUBSTANCE": ("mol", "SHORT", ""),
    "ANGLE": ("rad", "SHORT", ""),
    "BIT": ("b", "BINARY_SHORT", ""),
    "FORCE": ("N", "SHORT", ""),
    "ENERGY": ("J", "SHORT", ""),
    "POWER": ("W", "SHORT", ""),
    "PRESSURE": ("Pa", "SHORT", ""),
    "ELECTRIC_CHARGE": ("C", "SHORT", ""),
    "ELECTRIC_CAPACITANCE": ("F", "SHORT", ""),
    "ELECTRIC_POTENTIAL": ("V", "SHORT", ""),
    "ELECTRIC_RESISTANCE": ("ohm", "SHORTLONG", ""),
    "ELECTRIC_INDUCTANCE": ("H", "SHORT", ""),
    "ELECTRIC_CONDUCTANCE": ("S", "SHORT", ""),
    "MAGNETIC_FLUX": ("Wb", "SHORT", ""),
    "MAGNETIC_FLUX_DENSITY": ("T", "SHORT", ""),
    "FREQUENCY": ("Hz", "SHORT", ""),
}

UNIT_SYSTEMS = MappingProxyType(
    {
        "si": MappingProxyType(_SI_SYSTEM),
        "cgs": MappingProxyType(
            {
                **_SI_SYSTEM,
                "LENGTH": ("m", "SHORT", "c"),
                "MASS": ("g", "SHORT", ""),
                "FORCE": ("dyn", "SHORT", ""),
                "ENERGY": ("erg", "NONE", ""),
            }
        ),
        "us": MappingProxyType(
            {
                **_SI_SYSTEM,
                "LENGTH": ("ft", "NONE", ""),
                "MASS": ("lbm", "NONE", ""),
                "TEMPERATURE": ("degF", "NONE", ""),
                "FORCE": ("lbf", "NONE", ""),
                "ENERGY": ("BTU", "BTU", ""),
                "POWER": ("hp", "NONE", ""),
                "PRESSURE": ("psi", "NONE", ""),
            }
        ),
    }
)
