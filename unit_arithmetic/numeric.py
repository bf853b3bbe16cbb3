"""Pluggable arithmetic used for every numeric computation on unit values.

The engine never applies Python operators to values, powers or dimension
exponents directly. It calls the hooks held by a NumericOptions instance, so a
factory configured with, for example, Decimal or Fraction hooks performs all of
its arithmetic in that representation.

Example:
    from decimal import Decimal
    from unit_arithmetic import configure

    unit = configure(
        from_literal=lambda x: Decimal(str(x)),
        clone=lambda x: x,
    )
"""

import operator
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any

from . import errors

BinaryOp = Callable[[Any, Any], Any]


def default_pow(base: Any, exponent: Any) -> Any:
    """Raise base to exponent using native Python semantics."""
    return operator.pow(base, exponent)


def default_from_literal(literal: Any) -> Any:
    """Return the literal unchanged."""
    return literal


def default_clone(value: Any) -> Any:
    """Clone a native number, rejecting every other value type."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise errors.u006_error_factory(value)
    return value


@dataclass(frozen=True)
class NumericOptions:
    """Immutable set of arithmetic hooks.

    Keys that are not hooks are kept in ``extra`` and handed back unchanged by
    ``as_dict`` and ``merge``.
    """

    add: BinaryOp = operator.add
    sub: BinaryOp = operator.sub
    mul: BinaryOp = operator.mul
    div: BinaryOp = operator.truediv
    pow: BinaryOp = default_pow
    equals: Callable[[Any, Any], bool] = operator.eq
    from_literal: Callable[[Any], Any] = default_from_literal
    clone: Callable[[Any], Any] = default_clone
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def hook_names(cls) -> tuple[str, ...]:
        """Return the names of the recognised arithmetic hooks."""
        return tuple(f.name for f in fields(cls) if f.name != "extra")

    def merge(self, overrides: Mapping[str, Any]) -> "NumericOptions":
        """Return new options with ``overrides`` applied on top of these."""
        hook_names = self.hook_names()
        hooks = {k: v for k, v in overrides.items() if k in hook_names}
        extra = dict(self.extra)
        extra.update({k: v for k, v in overrides.items() if k not in hook_names})
        return replace(self, **hooks, extra=MappingProxyType(extra))

    def as_dict(self) -> dict[str, Any]:
        """Return every hook and pass-through option as a plain dictionary."""
        result = {name: getattr(self, name) for name in self.hook_names()}
        result.update(self.extra)
        return result
