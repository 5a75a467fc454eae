"""Plain function composition helpers."""

from __future__ import annotations

from collections.abc import Callable
from functools import reduce
from typing import TypeVar

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def identity(value: A) -> A:
    return value


def compose(first: Callable[[A], B], second: Callable[[B], C]) -> Callable[[A], C]:
    """Return ``first`` followed by ``second``."""
    return lambda value: second(first(value))


def chain(*updates: Callable[[A], A]) -> Callable[[A], A]:
    """Fold ``A -> A`` updates into a single function applied left to right.

    ``chain()`` is the identity function.
    """
    return reduce(compose, updates, identity)
