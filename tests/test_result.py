import pytest

from stately import Err, Ok, StateAction, UnwrapError
from stately.kernel import collect, from_optional


def test_ok_map_and_then() -> None:
    assert Ok(2).map(lambda v: v + 1) == Ok(3)
    assert Ok(2).and_then(lambda v: Ok(v * 10)) == Ok(20)
    assert Ok(2).and_then(lambda v: Err("nope")) == Err("nope")


def test_err_short_circuits() -> None:
    calls: list[int] = []

    def record(value: int) -> Ok[int]:
        calls.append(value)
        return Ok(value)

    assert Err("first").and_then(record).map(lambda v: v + 1) == Err("first")
    assert calls == []


def test_map_err() -> None:
    assert Err("x").map_err(str.upper) == Err("X")
    assert Ok(1).map_err(str.upper) == Ok(1)


def test_unwrap() -> None:
    assert Ok("v").unwrap() == "v"
    assert Err("e").unwrap_or("default") == "default"
    with pytest.raises(UnwrapError) as exc_info:
        Err("broken").unwrap()
    assert exc_info.value.error == "broken"


def test_from_optional() -> None:
    assert from_optional(3, "missing") == Ok(3)
    assert from_optional(None, "missing") == Err("missing")


def test_collect() -> None:
    assert collect([Ok(1), Ok(2)]) == Ok([1, 2])
    assert collect([Ok(1), Err("a"), Err("b")]) == Err("a")
    assert collect([]) == Ok([])


def test_failure_carried_in_state_action_value() -> None:
    """Domain failure travels as the result value; the action itself never fails."""
    def withdraw(amount: int) -> StateAction[int, Ok[int] | Err[str]]:
        def transition(balance: int):
            if amount > balance:
                return balance, Err(f"insufficient funds for {amount}")
            return balance - amount, Ok(amount)

        return StateAction.of(transition)

    action = withdraw(30).and_then(
        lambda first: withdraw(50).map(lambda second: first.and_then(lambda _: second))
    )
    assert action.run(100) == (20, Ok(50))
    assert action.run(60) == (30, Err("insufficient funds for 50"))
