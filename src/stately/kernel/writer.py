"""Writer monad - values paired with an accumulated log."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from stately.typeclasses.monoid import Monoid

L = TypeVar("L")
V = TypeVar("V")
R = TypeVar("R")


@dataclass(frozen=True)
class Writer(Generic[L, V]):
    """A value together with the log written while producing it.

    The log's Monoid is passed in explicitly and travels with the writer,
    so ``and_then`` knows how to combine logs without any global lookup.

    Attributes:
        log: Entries written so far
        value: The computed value
        monoid: How logs are combined
    """

    log: L
    value: V
    monoid: Monoid[L]

    @staticmethod
    def pure(value: V, monoid: Monoid[L]) -> Writer[L, V]:
        """Lift a value with an empty log."""
        return Writer(log=monoid.empty, value=value, monoid=monoid)

    @staticmethod
    def tell(entry: L, monoid: Monoid[L]) -> Writer[L, None]:
        """Write ``entry`` to the log with no meaningful value."""
        return Writer(log=entry, value=None, monoid=monoid)

    def run(self) -> tuple[L, V]:
        return self.log, self.value

    def written(self) -> L:
        return self.log

    def map(self, func: Callable[[V], R]) -> Writer[L, R]:
        return Writer(log=self.log, value=func(self.value), monoid=self.monoid)

    def and_then(self, func: Callable[[V], Writer[L, R]]) -> Writer[L, R]:
        """Continue with ``func``, appending its log after this one."""
        following = func(self.value)
        if following.monoid != self.monoid:
            raise TypeError(
                f"Cannot combine writers logging with {self.monoid!r} and {following.monoid!r}"
            )
        return Writer(
            log=self.monoid.combine(self.log, following.log),
            value=following.value,
            monoid=self.monoid,
        )

    def __rshift__(self, func: Callable[[V], Writer[L, R]]) -> Writer[L, R]:
        return self.and_then(func)
