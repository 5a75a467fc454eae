"""Memoized recursion with the cache threaded through state.

The cache is an ordinary immutable mapping owned by the caller. Nothing is
stored at module level, so two callers never share entries unless they
pass the same cache in.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import reduce

from stately.kernel.state import StateAction

Cache = Mapping[int, int]


def _lookup(cache: Cache, n: int) -> int:
    if n < 2:
        return n
    return cache[n]


def _remember(n: int, value: int) -> StateAction[Cache, int]:
    return StateAction.modify(lambda cache: {**cache, n: value}).map(lambda _: value)


def _fill(n: int) -> StateAction[Cache, int]:
    """Make sure ``n`` is cached, assuming every smaller entry already is."""
    def step(cache: Cache) -> StateAction[Cache, int]:
        if n in cache:
            return StateAction.pure(cache[n])
        return _remember(n, _lookup(cache, n - 1) + _lookup(cache, n - 2))

    return StateAction.get().and_then(step)


def fibonacci(n: int) -> StateAction[Cache, int]:
    """Compute the n-th Fibonacci number, reading and extending the cache.

    Entries are filled bottom-up as one chain of steps, so large ``n`` does
    not grow the Python stack.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return reduce(
        lambda action, k: action.then(_fill(k)),
        range(2, n + 1),
        StateAction.pure(n),
    )


def memoized_fibonacci(n: int, cache: Cache | None = None) -> tuple[Cache, int]:
    """Run ``fibonacci(n)`` from ``cache`` (empty by default)."""
    return fibonacci(n).run(cache if cache is not None else {})
