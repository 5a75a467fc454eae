"""Validated values and applicative error accumulation.

Monadic chaining (``Ok``/``Err`` with ``and_then``) stops at the first
failure because each step may depend on the previous value. Applicative
combination evaluates every input independently, so ``map_n`` can report
all of the failures at once.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

V = TypeVar("V")
R = TypeVar("R")


@dataclass(frozen=True)
class Valid(Generic[V]):
    value: V

    def is_valid(self) -> bool:
        return True

    def map(self, func: Callable[[V], R]) -> Valid[R]:
        return Valid(func(self.value))


@dataclass(frozen=True)
class Invalid:
    """A failed validation with every reason collected so far, in order."""

    errors: tuple[Any, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))
        if not self.errors:
            raise ValueError("Invalid requires at least one error")

    def is_valid(self) -> bool:
        return False

    def map(self, func: Callable[[Any], Any]) -> Invalid:
        return self


Validated = Union[Valid[V], Invalid]


def valid(value: V) -> Valid[V]:
    return Valid(value)


def invalid(error: Any) -> Invalid:
    return Invalid((error,))


@dataclass(frozen=True)
class ValidatedApplicative:
    """Applicative instance for Validated, accumulating errors left to right."""

    def pure(self, value: V) -> Valid[V]:
        return Valid(value)

    def ap(self, ff: Validated[Callable[[Any], Any]], fa: Validated[Any]) -> Validated[Any]:
        if isinstance(ff, Invalid) and isinstance(fa, Invalid):
            return Invalid(ff.errors + fa.errors)
        if isinstance(ff, Invalid):
            return ff
        if isinstance(fa, Invalid):
            return fa
        return Valid(ff.value(fa.value))

    def map2(self, fa: Validated[Any], fb: Validated[Any], func: Callable[[Any, Any], R]) -> Validated[R]:
        curried = fa.map(lambda a: lambda b: func(a, b))
        return self.ap(curried, fb)


def map_n(func: Callable[..., R], *validated: Validated[Any]) -> Validated[R]:
    """Apply ``func`` to every valid value, or collect every error.

    >>> map_n(lambda a, b: a + b, valid(3), valid(4))
    Valid(value=7)
    """
    errors: tuple[Any, ...] = ()
    values: list[Any] = []
    for item in validated:
        if isinstance(item, Invalid):
            errors += item.errors
        else:
            values.append(item.value)
    if errors:
        return Invalid(errors)
    return Valid(func(*values))
