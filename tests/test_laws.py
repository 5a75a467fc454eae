import logging

import pytest

from stately import LawViolation, StateAction, assert_lawful
from stately.typeclasses import IntAddition, IntSubtraction, ListFunctor, SortedListFunctor, StateFunctor
from stately.typeclasses.laws import LawCheck, functor_identity, monoid_associativity


def test_assert_lawful_passes_when_every_check_holds() -> None:
    assert_lawful([
        functor_identity(ListFunctor(), [2, 1]),
        monoid_associativity(IntAddition(), 1, 2, 3),
    ])


def test_assert_lawful_reports_failures() -> None:
    checks = [
        functor_identity(SortedListFunctor(), [2, 1]),
        monoid_associativity(IntAddition(), 1, 2, 3),
        monoid_associativity(IntSubtraction(), 1, 2, 3),
    ]
    with pytest.raises(LawViolation) as exc_info:
        assert_lawful(checks)
    assert [check.law for check in exc_info.value.checks] == ["functor_identity", "monoid_associativity"]
    assert "functor_identity" in str(exc_info.value)


def test_violations_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="stately.typeclasses.laws"):
        check = functor_identity(SortedListFunctor(), [2, 1])
    assert check == LawCheck(law="functor_identity", holds=False, left=[1, 2], right=[2, 1])
    assert "functor_identity violated" in caplog.text


def test_observe_projection_compares_state_actions() -> None:
    action = StateAction.of(lambda s: (s + 1, s))
    assert not functor_identity(StateFunctor(), action).holds  # distinct objects
    assert functor_identity(StateFunctor(), action, lambda a: a.run(0)).holds
