"""State monad - the core state-transition combinator."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

S = TypeVar("S")
V = TypeVar("V")
R = TypeVar("R")
T = TypeVar("T")


Transition = Callable[[S], tuple[S, V]]


@dataclass(frozen=True)
class StateAction(Generic[S, V]):
    """A deferred, composable state transition ``S -> (S, V)``.

    An instance is only a description of a computation. Nothing is evaluated
    until ``run`` is called with a concrete initial state, and an instance
    never holds on to the states it has seen, so the same action can be run
    any number of times against different states.

    An instance is either a leaf wrapping a transition (``_run``) or a bind
    node pairing a ``_source`` action with the ``_continuation`` that picks
    the next action from its result. ``run`` unwinds bind nodes in a loop,
    so chains of any length run in constant Python stack depth.

    The wrapped transition is expected to be pure. Purity is not checked;
    an impure transition simply gives non-reproducible results. Exceptions
    raised by caller-supplied functions propagate out of ``run`` unchanged.
    """

    _run: Callable[[S], tuple[S, V]] | None = None
    _source: StateAction[S, Any] | None = None
    _continuation: Callable[[Any], StateAction[S, V]] | None = None

    @classmethod
    def of(cls, transition: Transition[S, V]) -> StateAction[S, V]:
        """Wrap a pure transition function."""
        if not callable(transition):
            raise TypeError(f"Expected a callable transition, got {type(transition).__name__}")
        return cls(_run=transition)

    def run(self, initial: S) -> tuple[S, V]:
        """Run the transition against ``initial`` and return ``(state, value)``."""
        state: Any = initial
        current: StateAction[S, Any] = self
        pending: list[Callable[[Any], StateAction[S, Any]]] = []
        while True:
            while current._source is not None:
                pending.append(current._continuation)  # type: ignore[arg-type]
                current = current._source
            state, value = current._run(state)  # type: ignore[misc]
            if not pending:
                return state, value
            current = pending.pop()(value)

    def run_state(self, initial: S) -> S:
        """Run and keep only the final state."""
        return self.run(initial)[0]

    def run_value(self, initial: S) -> V:
        """Run and keep only the result value."""
        return self.run(initial)[1]

    def _create(self, continuation: Callable[[V], StateAction[S, R]]) -> StateAction[S, R]:
        """Create a bind node continuing from this action."""
        return StateAction(_source=self, _continuation=continuation)

    def map(self, func: Callable[[V], R]) -> StateAction[S, R]:
        """Apply ``func`` to the result, leaving the state untouched."""
        return self._create(lambda value: StateAction.pure(func(value)))

    def and_then(self, func: Callable[[V], StateAction[S, R]]) -> StateAction[S, R]:
        """Sequence a second action chosen from this action's result.

        The second action runs against the state produced by this one.
        Each transition is invoked exactly once per ``run``.
        """
        return self._create(func)

    def __rshift__(self, func: Callable[[V], StateAction[S, R]]) -> StateAction[S, R]:
        return self.and_then(func)

    def then(self, other: StateAction[S, R]) -> StateAction[S, R]:
        """Sequence ``other`` after this action, discarding this result."""
        return self.and_then(lambda _: other)

    def product(self, other: StateAction[S, R]) -> StateAction[S, tuple[V, R]]:
        """Run this action then ``other`` and pair their results."""
        return self.and_then(lambda left: other.map(lambda right: (left, right)))

    @staticmethod
    def pure(value: V) -> StateAction[S, V]:
        """Create an action that returns ``value`` and leaves the state unchanged."""
        def run_func(state: S) -> tuple[S, V]:
            return state, value

        return StateAction(_run=run_func)

    @staticmethod
    def get() -> StateAction[S, S]:
        """Return the current state as the result."""
        return StateAction(_run=lambda state: (state, state))

    @staticmethod
    def put(state: S) -> StateAction[S, None]:
        """Replace the state, ignoring whatever came before."""
        return StateAction(_run=lambda _: (state, None))

    @staticmethod
    def modify(func: Callable[[S], S]) -> StateAction[S, None]:
        """Update the state with ``func``."""
        return StateAction(_run=lambda state: (func(state), None))

    @staticmethod
    def inspect(func: Callable[[S], V]) -> StateAction[S, V]:
        """Project a result out of the state without changing it."""
        return StateAction(_run=lambda state: (state, func(state)))


def sequence(actions: Iterable[StateAction[S, V]]) -> StateAction[S, list[V]]:
    """Run actions left to right, collecting their results in order.

    The iterable is materialized up front so the returned action can be run
    more than once.
    """
    steps = tuple(actions)

    def run_func(state: S) -> tuple[S, list[V]]:
        values: list[V] = []
        current = state
        for step in steps:
            current, value = step.run(current)
            values.append(value)
        return current, values

    return StateAction(_run=run_func)


def traverse(items: Iterable[T], func: Callable[[T], StateAction[S, V]]) -> StateAction[S, list[V]]:
    """Build one action per item with ``func`` and sequence them."""
    return sequence(func(item) for item in items)
