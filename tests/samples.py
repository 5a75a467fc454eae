from __future__ import annotations

from stately import StateAction


def counter_step(increment: int) -> StateAction[int, str]:
    """Add ``increment`` to an int state and report the old value."""
    return StateAction.of(lambda n: (n + increment, f"was {n}"))


def push(item: str) -> StateAction[tuple[str, ...], int]:
    """Append ``item`` to a tuple state and return the new length."""
    def transition(stack: tuple[str, ...]) -> tuple[tuple[str, ...], int]:
        new_stack = stack + (item,)
        return new_stack, len(new_stack)

    return StateAction.of(transition)


def double_then_label(value: str) -> StateAction[int, str]:
    return StateAction.of(lambda n: (n * 2, f"{value}/doubled"))


def subtract_and_echo(value: str) -> StateAction[int, str]:
    return StateAction.of(lambda n: (n - 3, f"{value}/minus3"))


INITIAL_STATES = [0, 1, -7, 42]
