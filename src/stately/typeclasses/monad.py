"""Monad typeclass and its instances."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from stately.kernel.functions import identity
from stately.kernel.reader import Reader
from stately.kernel.result import Ok, Result
from stately.kernel.state import StateAction
from stately.kernel.transformers import ResultT


class Monad(Protocol):
    """Protocol for monad instances.

    ``pure`` lifts a plain value into the context and ``flat_map`` applies a
    context-returning function without nesting the context.
    """

    def pure(self, value: Any) -> Any:
        ...

    def flat_map(self, ma: Any, func: Callable[[Any], Any]) -> Any:
        ...

    def map(self, ma: Any, func: Callable[[Any], Any]) -> Any:
        ...


@dataclass(frozen=True)
class OptionMonad(Monad):
    """``None`` short-circuits: once a step has no value, nothing after it runs."""

    def pure(self, value: Any) -> Any:
        return value

    def flat_map(self, ma: Any | None, func: Callable[[Any], Any | None]) -> Any | None:
        if ma is None:
            return None
        return func(ma)

    def map(self, ma: Any | None, func: Callable[[Any], Any]) -> Any | None:
        return self.flat_map(ma, func)


@dataclass(frozen=True)
class ListMonad(Monad):
    def pure(self, value: Any) -> list[Any]:
        return [value]

    def flat_map(self, ma: list[Any], func: Callable[[Any], list[Any]]) -> list[Any]:
        return [item for value in ma for item in func(value)]

    def map(self, ma: list[Any], func: Callable[[Any], Any]) -> list[Any]:
        return [func(value) for value in ma]


@dataclass(frozen=True)
class ResultMonad(Monad):
    def pure(self, value: Any) -> Result[Any, Any]:
        return Ok(value)

    def flat_map(self, ma: Result[Any, Any], func: Callable[[Any], Result[Any, Any]]) -> Result[Any, Any]:
        return ma.and_then(func)

    def map(self, ma: Result[Any, Any], func: Callable[[Any], Any]) -> Result[Any, Any]:
        return ma.map(func)


@dataclass(frozen=True)
class StateMonad(Monad):
    def pure(self, value: Any) -> StateAction[Any, Any]:
        return StateAction.pure(value)

    def flat_map(
        self,
        ma: StateAction[Any, Any],
        func: Callable[[Any], StateAction[Any, Any]],
    ) -> StateAction[Any, Any]:
        return ma.and_then(func)

    def map(self, ma: StateAction[Any, Any], func: Callable[[Any], Any]) -> StateAction[Any, Any]:
        return ma.map(func)


@dataclass(frozen=True)
class ReaderMonad(Monad):
    def pure(self, value: Any) -> Reader[Any, Any]:
        return Reader.pure(value)

    def flat_map(self, ma: Reader[Any, Any], func: Callable[[Any], Reader[Any, Any]]) -> Reader[Any, Any]:
        return ma.and_then(func)

    def map(self, ma: Reader[Any, Any], func: Callable[[Any], Any]) -> Reader[Any, Any]:
        return ma.map(func)


@dataclass(frozen=True)
class ResultTMonad(Monad):
    def pure(self, value: Any) -> ResultT[Any, Any, Any]:
        return ResultT.pure(value)

    def flat_map(
        self,
        ma: ResultT[Any, Any, Any],
        func: Callable[[Any], ResultT[Any, Any, Any]],
    ) -> ResultT[Any, Any, Any]:
        return ma.flat_map(func)

    def map(self, ma: ResultT[Any, Any, Any], func: Callable[[Any], Any]) -> ResultT[Any, Any, Any]:
        return ma.map(func)


def flatten(monad: Monad, mma: Any) -> Any:
    """Collapse one level of nesting, e.g. ``[[1], [2, 3]] -> [1, 2, 3]``."""
    return monad.flat_map(mma, identity)
