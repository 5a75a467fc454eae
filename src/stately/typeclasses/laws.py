"""Typeclass laws as executable checks.

Each check evaluates both sides of one algebraic equality and records
whether they agree. Function-shaped values (StateAction, Reader, plain
callables) cannot be compared directly, so every check takes an
``observe`` projection that turns a value into something comparable, for
example ``lambda action: action.run(initial)``.

Laws:
    1. Functor identity: fmap(fa, identity) == fa
    2. Functor composition: fmap(fmap(fa, f), g) == fmap(fa, compose(f, g))
    3. Monad left identity: flat_map(pure(v), f) == f(v)
    4. Monad right identity: flat_map(ma, pure) == ma
    5. Monad associativity:
       flat_map(flat_map(ma, f), g) == flat_map(ma, lambda a: flat_map(f(a), g))
    6. Monoid associativity: combine(combine(a, b), c) == combine(a, combine(b, c))
    7. Monoid identity: combine(empty, a) == a == combine(a, empty)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from stately.kernel.functions import compose, identity

from .functor import Functor
from .monad import Monad
from .monoid import Monoid

logger = logging.getLogger(__name__)

Observe = Callable[[Any], Any]


@dataclass(frozen=True)
class LawCheck:
    """Outcome of checking one law on one set of inputs.

    Attributes:
        law: Name of the law that was checked
        holds: Whether both sides agreed
        left: Observed left-hand side
        right: Observed right-hand side
    """

    law: str
    holds: bool
    left: Any
    right: Any


class LawViolation(Exception):
    """Error raised when one or more law checks fail.

    The failed checks are kept so callers can see both sides of each one.
    """

    def __init__(self, checks: list[LawCheck]) -> None:
        self.checks = checks
        laws = ", ".join(check.law for check in checks)
        super().__init__(f"Law(s) violated: {laws}")


def _check(law: str, left: Any, right: Any) -> LawCheck:
    holds = left == right
    if not holds:
        logger.debug("Law %s violated: %r != %r", law, left, right)
    return LawCheck(law=law, holds=holds, left=left, right=right)


def functor_identity(functor: Functor, fa: Any, observe: Observe = identity) -> LawCheck:
    return _check(
        "functor_identity",
        observe(functor.fmap(fa, identity)),
        observe(fa),
    )


def functor_composition(
    functor: Functor,
    fa: Any,
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    observe: Observe = identity,
) -> LawCheck:
    return _check(
        "functor_composition",
        observe(functor.fmap(functor.fmap(fa, f), g)),
        observe(functor.fmap(fa, compose(f, g))),
    )


def monad_left_identity(
    monad: Monad,
    value: Any,
    f: Callable[[Any], Any],
    observe: Observe = identity,
) -> LawCheck:
    return _check(
        "monad_left_identity",
        observe(monad.flat_map(monad.pure(value), f)),
        observe(f(value)),
    )


def monad_right_identity(monad: Monad, ma: Any, observe: Observe = identity) -> LawCheck:
    return _check(
        "monad_right_identity",
        observe(monad.flat_map(ma, monad.pure)),
        observe(ma),
    )


def monad_associativity(
    monad: Monad,
    ma: Any,
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    observe: Observe = identity,
) -> LawCheck:
    return _check(
        "monad_associativity",
        observe(monad.flat_map(monad.flat_map(ma, f), g)),
        observe(monad.flat_map(ma, lambda a: monad.flat_map(f(a), g))),
    )


def monoid_associativity(monoid: Monoid[Any], a: Any, b: Any, c: Any) -> LawCheck:
    return _check(
        "monoid_associativity",
        monoid.combine(monoid.combine(a, b), c),
        monoid.combine(a, monoid.combine(b, c)),
    )


def monoid_identity(monoid: Monoid[Any], a: Any) -> LawCheck:
    return _check(
        "monoid_identity",
        (monoid.combine(monoid.empty, a), monoid.combine(a, monoid.empty)),
        (a, a),
    )


def assert_lawful(checks: Iterable[LawCheck]) -> None:
    """Raise LawViolation if any of ``checks`` failed."""
    failed = [check for check in checks if not check.holds]
    if failed:
        raise LawViolation(failed)
