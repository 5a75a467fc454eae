"""
Typeclass instances passed explicitly.

This example shows:
1. Two monoids for the same type, chosen at the call site
2. A lawful functor next to a lawless one
3. Reader and Writer built from the same bind shape as StateAction
4. Applicative validation collecting every error
"""

from stately import Reader, Writer
from stately.typeclasses import (
    IntAddition,
    IntMultiplication,
    IntSubtraction,
    ListFunctor,
    SortedListFunctor,
    TupleConcat,
    combine_all,
    combine_all_right,
    invalid,
    map_n,
    valid,
)
from stately.typeclasses.laws import functor_identity


def example_monoids() -> None:
    numbers = [1, 2, 3, 4]
    print(f"sum={combine_all(numbers, IntAddition())} product={combine_all(numbers, IntMultiplication())}")

    # Subtraction is not associative, so the fold direction changes the answer
    bad = IntSubtraction()
    print(f"left={combine_all([1, 2, 3], bad)} right={combine_all_right([1, 2, 3], bad)}")


def example_functors() -> None:
    values = [3, 1, 2]
    for functor in (ListFunctor(), SortedListFunctor()):
        check = functor_identity(functor, values)
        print(f"{type(functor).__name__}: identity holds={check.holds} ({check.left} vs {check.right})")


def example_reader_writer() -> None:
    total = Reader.asks(lambda table: table["a"]).and_then(
        lambda a: Reader.asks(lambda table: a + table["b"])
    )
    print(f"reader: {total.run({'a': 2, 'b': 3})}")

    log = TupleConcat()
    writer = Writer.tell(("start",), log).and_then(lambda _: Writer.tell(("finish",), log)).map(lambda _: 42)
    print(f"writer: {writer.run()}")


def example_validation() -> None:
    def non_empty(value: str, what: str):
        return valid(value) if value else invalid(f"Empty {what}")

    print(map_n(lambda first, last: f"{first} {last}", non_empty("", "first"), non_empty("", "last")))


if __name__ == "__main__":
    example_monoids()
    example_functors()
    example_reader_writer()
    example_validation()
