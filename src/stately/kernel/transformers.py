"""Monad transformers - Ok/Err failure layered over StateAction.

Monads do not compose in general: given a StateAction returning Results,
plain ``and_then`` hands the whole Result to the next step, and every step
has to unwrap it by hand. ``ResultT`` is the custom composition for this
one pair. It runs the state transitions in order and stops at the first
Err, keeping the state reached at that point.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from stately.kernel.result import Err, Ok, Result
from stately.kernel.state import StateAction

S = TypeVar("S")
V = TypeVar("V")
E = TypeVar("E")
R = TypeVar("R")


@dataclass(frozen=True)
class ResultT(Generic[S, V, E]):
    """A StateAction whose result is an Ok or an Err.

    Attributes:
        action: The underlying ``StateAction[S, Result[V, E]]``
    """

    action: StateAction[S, Result[V, E]]

    @staticmethod
    def pure(value: V) -> ResultT[S, V, Any]:
        return ResultT(StateAction.pure(Ok(value)))

    @staticmethod
    def fail(error: E) -> ResultT[S, Any, E]:
        return ResultT(StateAction.pure(Err(error)))

    @staticmethod
    def from_result(result: Result[V, E]) -> ResultT[S, V, E]:
        return ResultT(StateAction.pure(result))

    @staticmethod
    def from_optional(value: V | None, error: E) -> ResultT[S, V, E]:
        """Lift an optional value, failing with ``error`` when it is None."""
        if value is None:
            return ResultT.fail(error)
        return ResultT.pure(value)

    @staticmethod
    def from_either(result: Result[V, Any], to_error: Callable[[Any], E]) -> ResultT[S, V, E]:
        """Lift a Result whose error needs translating into this chain's error type."""
        return ResultT(StateAction.pure(result.map_err(to_error)))

    @staticmethod
    def lift(action: StateAction[S, V]) -> ResultT[S, V, Any]:
        """Lift a plain action that cannot fail."""
        return ResultT(action.map(Ok))

    @staticmethod
    def from_action(action: StateAction[S, Result[V, E]]) -> ResultT[S, V, E]:
        """Wrap an action that already returns a Result."""
        return ResultT(action)

    def run(self, initial: S) -> tuple[S, Result[V, E]]:
        return self.action.run(initial)

    def map(self, func: Callable[[V], R]) -> ResultT[S, R, E]:
        return ResultT(self.action.map(lambda result: result.map(func)))

    def map_err(self, func: Callable[[E], R]) -> ResultT[S, V, R]:
        return ResultT(self.action.map(lambda result: result.map_err(func)))

    def flat_map(self, func: Callable[[V], ResultT[S, R, E]]) -> ResultT[S, R, E]:
        """Continue with ``func`` on Ok; an Err skips every later step."""
        def step(result: Result[V, E]) -> StateAction[S, Result[R, E]]:
            if isinstance(result, Err):
                return StateAction.pure(result)
            return func(result.value).action

        return ResultT(self.action.and_then(step))

    and_then = flat_map

    def __rshift__(self, func: Callable[[V], ResultT[S, R, E]]) -> ResultT[S, R, E]:
        return self.flat_map(func)
