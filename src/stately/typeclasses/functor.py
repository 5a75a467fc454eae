"""Functor typeclass - things that can be mapped over.

Python has no higher-kinded types, so each instance is written for one
concrete wrapper and passed explicitly. The supported wrappers:

- OptionFunctor: ``T | None``, where ``None`` means "no value"
- ListFunctor: ``list[T]``
- ResultFunctor: ``Ok[T] | Err[E]``, mapping only the Ok side
- FunctionFunctor: ``Callable[[R], T]``, mapping by post-composition
- StateFunctor / ReaderFunctor: mapping the result of a StateAction / Reader

Laws:
    fmap(fa, identity) == fa
    fmap(fmap(fa, f), g) == fmap(fa, compose(f, g))
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from stately.kernel.functions import compose
from stately.kernel.reader import Reader
from stately.kernel.result import Result
from stately.kernel.state import StateAction


class Functor(Protocol):
    """Protocol for functor instances."""

    def fmap(self, fa: Any, func: Callable[[Any], Any]) -> Any:
        """Apply ``func`` inside ``fa`` without changing its shape."""
        ...


@dataclass(frozen=True)
class OptionFunctor(Functor):
    def fmap(self, fa: Any | None, func: Callable[[Any], Any]) -> Any | None:
        if fa is None:
            return None
        return func(fa)


@dataclass(frozen=True)
class ListFunctor(Functor):
    def fmap(self, fa: list[Any], func: Callable[[Any], Any]) -> list[Any]:
        return [func(item) for item in fa]


@dataclass(frozen=True)
class ResultFunctor(Functor):
    def fmap(self, fa: Result[Any, Any], func: Callable[[Any], Any]) -> Result[Any, Any]:
        return fa.map(func)


@dataclass(frozen=True)
class FunctionFunctor(Functor):
    def fmap(self, fa: Callable[[Any], Any], func: Callable[[Any], Any]) -> Callable[[Any], Any]:
        return compose(fa, func)


@dataclass(frozen=True)
class StateFunctor(Functor):
    def fmap(self, fa: StateAction[Any, Any], func: Callable[[Any], Any]) -> StateAction[Any, Any]:
        return fa.map(func)


@dataclass(frozen=True)
class ReaderFunctor(Functor):
    def fmap(self, fa: Reader[Any, Any], func: Callable[[Any], Any]) -> Reader[Any, Any]:
        return fa.map(func)


@dataclass(frozen=True)
class ComposedFunctor(Functor):
    """Map through two nested wrappers, ``outer`` containing ``inner``.

    Functors compose, so the result is again a Functor and can be nested
    further: ``ComposedFunctor(ListFunctor(), ComposedFunctor(OptionFunctor(), ResultFunctor()))``
    maps over a list of optional results.
    """

    outer: Functor
    inner: Functor

    def fmap(self, fa: Any, func: Callable[[Any], Any]) -> Any:
        return self.outer.fmap(fa, lambda ga: self.inner.fmap(ga, func))


@dataclass(frozen=True)
class SortedListFunctor(Functor):
    """NOT a lawful functor: maps, then sorts the result.

    ``fmap(xs, identity)`` reorders any unsorted list, breaking the identity
    law. It is kept as a counter-example of an instance that looks useful
    but cannot be reasoned about with the functor laws.
    """

    def fmap(self, fa: list[Any], func: Callable[[Any], Any]) -> list[Any]:
        return sorted(func(item) for item in fa)


def lift(functor: Functor, func: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Turn ``A -> B`` into ``F[A] -> F[B]`` for the given instance."""
    return lambda fa: functor.fmap(fa, func)
