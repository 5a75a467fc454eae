"""Monoid typeclass and its instances.

A monoid is a way to combine things: an ``empty`` element plus an
associative ``combine``. Instances are ordinary objects passed explicitly
wherever they are needed; a type may have more than one (integers add and
multiply), and nothing chooses between them implicitly.

Laws:
    combine(combine(a, b), c) == combine(a, combine(b, c))
    combine(empty, a) == a == combine(a, empty)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import reduce
from typing import Any, Protocol, TypeVar

A = TypeVar("A")
K = TypeVar("K")


class Monoid(Protocol[A]):
    """Protocol for monoid instances."""

    @property
    def empty(self) -> A:
        """The identity element."""
        ...

    def combine(self, left: A, right: A) -> A:
        """Associatively combine two values."""
        ...


@dataclass(frozen=True)
class IntAddition(Monoid[int]):
    @property
    def empty(self) -> int:
        return 0

    def combine(self, left: int, right: int) -> int:
        return left + right


@dataclass(frozen=True)
class IntMultiplication(Monoid[int]):
    @property
    def empty(self) -> int:
        return 1

    def combine(self, left: int, right: int) -> int:
        return left * right


@dataclass(frozen=True)
class StringConcat(Monoid[str]):
    @property
    def empty(self) -> str:
        return ""

    def combine(self, left: str, right: str) -> str:
        return left + right


@dataclass(frozen=True)
class TupleConcat(Monoid[tuple[Any, ...]]):
    """Concatenate tuples. The usual log monoid for Writer."""

    @property
    def empty(self) -> tuple[Any, ...]:
        return ()

    def combine(self, left: tuple[Any, ...], right: tuple[Any, ...]) -> tuple[Any, ...]:
        return left + right


@dataclass(frozen=True)
class ListConcat(Monoid[list[Any]]):
    @property
    def empty(self) -> list[Any]:
        return []

    def combine(self, left: list[Any], right: list[Any]) -> list[Any]:
        return [*left, *right]


@dataclass(frozen=True)
class SetUnion(Monoid[frozenset[Any]]):
    @property
    def empty(self) -> frozenset[Any]:
        return frozenset()

    def combine(self, left: frozenset[Any], right: frozenset[Any]) -> frozenset[Any]:
        return frozenset(left) | frozenset(right)


@dataclass(frozen=True)
class MapMerge(Monoid[Mapping[Any, Any]]):
    """Merge mappings key by key, combining clashing values with ``inner``.

    Nesting works because ``inner`` may itself be a MapMerge: combining
    ``{person: {state: [zip]}}`` maps merges all the way down.
    """

    inner: Monoid[Any]

    @property
    def empty(self) -> Mapping[Any, Any]:
        return {}

    def combine(self, left: Mapping[K, Any], right: Mapping[K, Any]) -> Mapping[K, Any]:
        merged = dict(left)
        for key, value in right.items():
            if key in merged:
                merged[key] = self.inner.combine(merged[key], value)
            else:
                merged[key] = value
        return merged


@dataclass(frozen=True)
class PairMonoid(Monoid[tuple[Any, Any]]):
    """Combine pairs component-wise."""

    first: Monoid[Any]
    second: Monoid[Any]

    @property
    def empty(self) -> tuple[Any, Any]:
        return self.first.empty, self.second.empty

    def combine(self, left: tuple[Any, Any], right: tuple[Any, Any]) -> tuple[Any, Any]:
        return (
            self.first.combine(left[0], right[0]),
            self.second.combine(left[1], right[1]),
        )


@dataclass(frozen=True)
class IntSubtraction(Monoid[int]):
    """NOT a lawful monoid: subtraction is not associative and 0 is only a right identity.

    Kept as a counter-example. Folding it from the left and from the right
    gives different answers, which is exactly what the laws rule out.
    """

    @property
    def empty(self) -> int:
        return 0

    def combine(self, left: int, right: int) -> int:
        return left - right


def combine_all(values: Iterable[A], monoid: Monoid[A]) -> A:
    """Fold from the left, starting at ``monoid.empty``."""
    return reduce(monoid.combine, values, monoid.empty)


def combine_all_right(values: Iterable[A], monoid: Monoid[A]) -> A:
    """Fold from the right, ending at ``monoid.empty``."""
    acc = monoid.empty
    for value in reversed(list(values)):
        acc = monoid.combine(value, acc)
    return acc
