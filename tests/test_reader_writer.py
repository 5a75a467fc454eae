import pytest

from stately import Reader, Writer
from stately.typeclasses import IntAddition, ListConcat, TupleConcat

SYMBOLS = {"a": 2, "b": 3, "c": 7}


def table_name() -> Reader[dict[str, int], str]:
    return Reader.asks(lambda table: "".join(key[0] for key in sorted(table)))


def lookup(symbol: str) -> Reader[dict[str, int], int]:
    return Reader.asks(lambda table: table.get(symbol, 0))


def test_reader_threads_the_same_environment() -> None:
    reader = table_name().and_then(
        lambda name: lookup("a").and_then(
            lambda a: lookup("b").and_then(
                lambda b: lookup("c").map(lambda c: f"{name} :: {(a + b) * c}")
            )
        )
    )
    assert reader.run(SYMBOLS) == "abc :: 42"
    assert reader.run({"a": 1}) == "a :: 0"


def test_reader_ask_pure_local() -> None:
    assert Reader.ask().run("env") == "env"
    assert Reader.pure(5).run("ignored") == 5
    scaled = lookup("a").local(lambda table: {k: v * 10 for k, v in table.items()})
    assert scaled.run(SYMBOLS) == 20
    assert lookup("a").run(SYMBOLS) == 2


def test_reader_rshift() -> None:
    reader = lookup("b") >> (lambda b: Reader.asks(lambda table: b * table["c"]))
    assert reader.run(SYMBOLS) == 21


def gcd(a: int, b: int) -> Writer[tuple[str, ...], int]:
    log = TupleConcat()
    if b == 0:
        return Writer.tell((f"gcd finished with {a}",), log).map(lambda _: a)
    remainder = a % b
    return Writer.tell((f"{a} mod {b} == {remainder}",), log).and_then(lambda _: gcd(b, remainder))


def test_writer_accumulates_log_in_order() -> None:
    log, value = gcd(12, 16).run()
    assert value == 4
    assert log == (
        "12 mod 16 == 12",
        "16 mod 12 == 4",
        "12 mod 4 == 0",
        "gcd finished with 4",
    )


def test_writer_pure_has_empty_log() -> None:
    writer = Writer.pure("v", ListConcat())
    assert writer.run() == ([], "v")
    assert writer.written() == []


def test_writer_with_numeric_log() -> None:
    """Any monoid can serve as the log, e.g. a running cost."""
    cost = IntAddition()
    writer = Writer.tell(3, cost).and_then(lambda _: Writer.tell(4, cost)).map(lambda _: "done")
    assert writer.run() == (7, "done")


def test_writer_rejects_mismatched_monoids() -> None:
    with pytest.raises(TypeError):
        Writer.tell((1,), TupleConcat()).and_then(lambda _: Writer.tell([2], ListConcat()))
