import pytest

from stately import Err, Ok, ResultT, StateAction
from stately.typeclasses import ResultTMonad
from stately.typeclasses.laws import monad_associativity, monad_left_identity, monad_right_identity


def withdraw(amount: int) -> ResultT[int, int, str]:
    def transition(balance: int):
        if amount > balance:
            return balance, Err(f"insufficient funds for {amount}")
        return balance - amount, Ok(amount)

    return ResultT.from_action(StateAction.of(transition))


def test_flat_map_threads_state_through_ok_steps() -> None:
    total = withdraw(30).flat_map(lambda first: withdraw(20).map(lambda second: first + second))
    assert total.run(100) == (50, Ok(50))


def test_err_skips_every_later_step() -> None:
    """Once a step fails, later steps are never built and their transitions never run."""
    calls: list[str] = []

    def audited(label: str) -> ResultT[int, str, str]:
        calls.append(label)
        return ResultT.lift(StateAction.of(lambda s: (s + 1, label)))

    chain = (
        withdraw(80)
        .flat_map(lambda _: withdraw(80))
        .flat_map(lambda _: audited("after-failure"))
        .map(lambda label: label.upper())
    )
    assert chain.run(100) == (20, Err("insufficient funds for 80"))
    assert calls == []


def test_and_then_and_rshift_are_flat_map() -> None:
    left = (withdraw(10) >> (lambda v: withdraw(v))).run(50)
    right = withdraw(10).and_then(lambda v: withdraw(v)).run(50)
    assert left == right == (30, Ok(10))


def test_lifting_helpers() -> None:
    assert ResultT.pure(1).run("s") == ("s", Ok(1))
    assert ResultT.fail("boom").run("s") == ("s", Err("boom"))
    assert ResultT.from_result(Ok(2)).run("s") == ("s", Ok(2))
    assert ResultT.from_optional(None, "missing").run("s") == ("s", Err("missing"))
    assert ResultT.from_optional(0, "missing").run("s") == ("s", Ok(0))
    assert ResultT.from_either(Err(404), lambda code: f"HTTP {code}").run("s") == ("s", Err("HTTP 404"))
    assert ResultT.lift(StateAction.get()).run("s") == ("s", Ok("s"))


def test_map_err() -> None:
    assert withdraw(500).map_err(len).run(10) == (10, Err(len("insufficient funds for 500")))


def test_long_chain_runs() -> None:
    action = ResultT.pure(0)
    for _ in range(10_000):
        action = action.flat_map(lambda v: ResultT.lift(StateAction.of(lambda s: (s + 1, v + 1))))
    assert action.run(0) == (10_000, Ok(10_000))


@pytest.mark.parametrize("initial", [0, 25, 100])
def test_monad_laws(initial: int) -> None:
    monad = ResultTMonad()

    def observe(action):
        return action.run(initial)

    def f(v: int):
        return withdraw(v + 10)

    def g(v: int):
        return withdraw(v * 2)

    assert monad_left_identity(monad, 5, f, observe).holds
    assert monad_right_identity(monad, withdraw(20), observe).holds
    assert monad_associativity(monad, withdraw(5), f, g, observe).holds
