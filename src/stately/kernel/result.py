"""Result values - Ok / Err for computations that may fail."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

V = TypeVar("V")
E = TypeVar("E")
R = TypeVar("R")
F = TypeVar("F")


class UnwrapError(Exception):
    """Error raised when unwrapping an Err.

    The error payload is preserved for inspection.
    """

    def __init__(self, error: object) -> None:
        self.error = error
        super().__init__(f"Called unwrap on Err({error!r})")


@dataclass(frozen=True)
class Ok(Generic[V]):
    """A successful value."""

    value: V

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, func: Callable[[V], R]) -> Ok[R]:
        return Ok(func(self.value))

    def map_err(self, func: Callable[[Any], Any]) -> Ok[V]:
        return self

    def and_then(self, func: Callable[[V], Result[R, E]]) -> Result[R, E]:
        return func(self.value)

    def unwrap(self) -> V:
        return self.value

    def unwrap_or(self, default: V) -> V:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failure carrying an error payload.

    ``map`` and ``and_then`` pass an Err through untouched, so the first
    failure in a chain is the one that is reported.
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, func: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_err(self, func: Callable[[E], F]) -> Err[F]:
        return Err(func(self.error))

    def and_then(self, func: Callable[[Any], Any]) -> Err[E]:
        return self

    def unwrap(self) -> Any:
        raise UnwrapError(self.error)

    def unwrap_or(self, default: V) -> V:
        return default


Result = Union[Ok[V], Err[E]]


def from_optional(value: V | None, error: E) -> Result[V, E]:
    """Turn an optional value into a Result, using ``error`` when it is None."""
    if value is None:
        return Err(error)
    return Ok(value)


def collect(results: Iterable[Result[V, E]]) -> Result[list[V], E]:
    """Gather Ok values into a list, stopping at the first Err."""
    values: list[V] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
