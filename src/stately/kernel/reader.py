"""Reader monad - computations over a read-only environment."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

E = TypeVar("E")
V = TypeVar("V")
R = TypeVar("R")


@dataclass(frozen=True)
class Reader(Generic[E, V]):
    """A computation ``E -> V`` that is handed its environment at run time.

    Every step in a chain receives the same environment. ``local`` is the
    only way to present a different one, and only to the wrapped reader.
    """

    _run: Callable[[E], V]

    @classmethod
    def of(cls, func: Callable[[E], V]) -> Reader[E, V]:
        return cls(_run=func)

    def run(self, env: E) -> V:
        return self._run(env)

    def map(self, func: Callable[[V], R]) -> Reader[E, R]:
        return Reader(_run=lambda env: func(self.run(env)))

    def and_then(self, func: Callable[[V], Reader[E, R]]) -> Reader[E, R]:
        def new_run(env: E) -> R:
            return func(self.run(env)).run(env)

        return Reader(_run=new_run)

    def __rshift__(self, func: Callable[[V], Reader[E, R]]) -> Reader[E, R]:
        return self.and_then(func)

    def local(self, func: Callable[[E], E]) -> Reader[E, V]:
        """Run this reader against an environment adjusted by ``func``."""
        return Reader(_run=lambda env: self.run(func(env)))

    @staticmethod
    def pure(value: V) -> Reader[E, V]:
        return Reader(_run=lambda _: value)

    @staticmethod
    def ask() -> Reader[E, E]:
        """Return the environment itself."""
        return Reader(_run=lambda env: env)

    @staticmethod
    def asks(func: Callable[[E], V]) -> Reader[E, V]:
        """Project a value out of the environment."""
        return Reader(_run=func)
