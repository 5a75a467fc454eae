"""ReaderWriterState - Reader, Writer and State fused into one monad.

All three share the same mechanics. A Reader is a State whose environment
is never modified, and a Writer is a State whose log is only ever appended
to. This module threads ``(env, log, state)`` through one StateAction, so it
inherits StateAction's sequencing and stack-safe ``run``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from stately.kernel.state import StateAction

if TYPE_CHECKING:
    from stately.typeclasses.monoid import Monoid

E = TypeVar("E")
L = TypeVar("L")
S = TypeVar("S")
V = TypeVar("V")
R = TypeVar("R")

Triple = tuple[Any, Any, Any]


@dataclass(frozen=True)
class ReaderWriterState(Generic[E, L, S, V]):
    """A computation ``(env, log, state) -> (log, state, value)``.

    The log's Monoid travels with the computation, as it does for Writer.

    Attributes:
        action: Underlying action over ``(env, log, state)`` triples
        monoid: How log entries are combined
    """

    action: StateAction[Triple, V]
    monoid: Monoid[L]

    @staticmethod
    def pure(value: V, monoid: Monoid[L]) -> ReaderWriterState[Any, L, Any, V]:
        return ReaderWriterState(StateAction.pure(value), monoid)

    @staticmethod
    def ask(monoid: Monoid[L]) -> ReaderWriterState[E, L, Any, E]:
        return ReaderWriterState(StateAction.inspect(lambda triple: triple[0]), monoid)

    @staticmethod
    def asks(func: Callable[[E], V], monoid: Monoid[L]) -> ReaderWriterState[E, L, Any, V]:
        return ReaderWriterState(StateAction.inspect(lambda triple: func(triple[0])), monoid)

    @staticmethod
    def tell(entry: L, monoid: Monoid[L]) -> ReaderWriterState[Any, L, Any, None]:
        def append(triple: Triple) -> Triple:
            env, log, state = triple
            return env, monoid.combine(log, entry), state

        return ReaderWriterState(StateAction.modify(append), monoid)

    @staticmethod
    def get(monoid: Monoid[L]) -> ReaderWriterState[Any, L, S, S]:
        return ReaderWriterState(StateAction.inspect(lambda triple: triple[2]), monoid)

    @staticmethod
    def put(state: S, monoid: Monoid[L]) -> ReaderWriterState[Any, L, S, None]:
        return ReaderWriterState.modify(lambda _: state, monoid)

    @staticmethod
    def modify(func: Callable[[S], S], monoid: Monoid[L]) -> ReaderWriterState[Any, L, S, None]:
        def update(triple: Triple) -> Triple:
            env, log, state = triple
            return env, log, func(state)

        return ReaderWriterState(StateAction.modify(update), monoid)

    def run(self, env: E, initial: S) -> tuple[L, S, V]:
        (_, log, state), value = self.action.run((env, self.monoid.empty, initial))
        return log, state, value

    def map(self, func: Callable[[V], R]) -> ReaderWriterState[E, L, S, R]:
        return ReaderWriterState(self.action.map(func), self.monoid)

    def and_then(self, func: Callable[[V], ReaderWriterState[E, L, S, R]]) -> ReaderWriterState[E, L, S, R]:
        def step(value: V) -> StateAction[Triple, R]:
            following = func(value)
            if following.monoid != self.monoid:
                raise TypeError(
                    f"Cannot combine computations logging with {self.monoid!r} and {following.monoid!r}"
                )
            return following.action

        return ReaderWriterState(self.action.and_then(step), self.monoid)

    def __rshift__(self, func: Callable[[V], ReaderWriterState[E, L, S, R]]) -> ReaderWriterState[E, L, S, R]:
        return self.and_then(func)
