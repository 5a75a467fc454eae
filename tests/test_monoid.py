import pytest

from stately.typeclasses import (
    IntAddition,
    IntMultiplication,
    IntSubtraction,
    ListConcat,
    MapMerge,
    PairMonoid,
    SetUnion,
    StringConcat,
    TupleConcat,
    combine_all,
    combine_all_right,
)
from stately.typeclasses.laws import monoid_associativity, monoid_identity

LAWFUL = [
    (IntAddition(), (1, 2, 3)),
    (IntMultiplication(), (2, 3, 4)),
    (StringConcat(), ("a", "b", "c")),
    (TupleConcat(), ((1,), (2, 3), ())),
    (ListConcat(), ([1], [], [2, 3])),
    (SetUnion(), (frozenset({1}), frozenset({1, 2}), frozenset({3}))),
    (MapMerge(IntAddition()), ({"x": 1}, {"x": 2, "y": 1}, {"y": 5})),
    (PairMonoid(IntAddition(), StringConcat()), ((1, "a"), (2, "b"), (3, "c"))),
]


@pytest.mark.parametrize("monoid, values", LAWFUL)
def test_lawful_monoids(monoid, values) -> None:
    a, b, c = values
    assert monoid_associativity(monoid, a, b, c).holds
    for value in values:
        assert monoid_identity(monoid, value).holds


@pytest.mark.parametrize("monoid, values", LAWFUL)
def test_fold_direction_does_not_matter_for_lawful_monoids(monoid, values) -> None:
    assert combine_all(values, monoid) == combine_all_right(values, monoid)


def test_same_type_different_monoids() -> None:
    assert combine_all([1, 2, 3, 4], IntAddition()) == 10
    assert combine_all([1, 2, 3, 4], IntMultiplication()) == 24
    assert combine_all([], IntMultiplication()) == 1


def test_subtraction_counter_example_is_not_associative() -> None:
    """Counter-example: subtraction breaks associativity and left identity."""
    bad = IntSubtraction()
    assert not monoid_associativity(bad, 1, 2, 3).holds
    assert not monoid_identity(bad, 5).holds
    assert combine_all([1, 2, 3], bad) == -6
    assert combine_all_right([1, 2, 3], bad) == 2


def test_nested_map_merge() -> None:
    people = [
        ("Lanny", "TX", 77055),
        ("Lanny", "CA", 95135),
        ("Lanny", "TX", 77840),
        ("Linda", "TX", 77840),
    ]
    nested = MapMerge(MapMerge(ListConcat()))
    merged = combine_all(({name: {state: [zip_code]}} for name, state, zip_code in people), nested)
    assert merged == {
        "Lanny": {"TX": [77055, 77840], "CA": [95135]},
        "Linda": {"TX": [77840]},
    }


def test_map_merge_with_pair_of_sets() -> None:
    people = [("Lanny", "TX", 77055), ("Linda", "TX", 77840), ("Linda", "AZ", 85023)]
    by_state = MapMerge(PairMonoid(SetUnion(), SetUnion()))
    merged = combine_all(
        ({state: (frozenset({name}), frozenset({zip_code}))} for name, state, zip_code in people),
        by_state,
    )
    assert merged == {
        "TX": (frozenset({"Lanny", "Linda"}), frozenset({77055, 77840})),
        "AZ": (frozenset({"Linda"}), frozenset({85023})),
    }
