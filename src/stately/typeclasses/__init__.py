"""Typeclasses - explicit instances passed at the call site."""

from .applicative import Invalid, Valid, Validated, ValidatedApplicative, invalid, map_n, valid
from .functor import (
    ComposedFunctor,
    Functor,
    FunctionFunctor,
    ListFunctor,
    OptionFunctor,
    ReaderFunctor,
    ResultFunctor,
    SortedListFunctor,
    StateFunctor,
    lift,
)
from .laws import LawCheck, LawViolation, assert_lawful
from .monad import ListMonad, Monad, OptionMonad, ReaderMonad, ResultMonad, ResultTMonad, StateMonad, flatten
from .monoid import (
    IntAddition,
    IntMultiplication,
    IntSubtraction,
    ListConcat,
    MapMerge,
    Monoid,
    PairMonoid,
    SetUnion,
    StringConcat,
    TupleConcat,
    combine_all,
    combine_all_right,
)

__all__ = [
    # Monoid
    "Monoid",
    "IntAddition",
    "IntMultiplication",
    "IntSubtraction",
    "StringConcat",
    "TupleConcat",
    "ListConcat",
    "SetUnion",
    "MapMerge",
    "PairMonoid",
    "combine_all",
    "combine_all_right",
    # Functor
    "Functor",
    "OptionFunctor",
    "ListFunctor",
    "ResultFunctor",
    "FunctionFunctor",
    "StateFunctor",
    "ReaderFunctor",
    "ComposedFunctor",
    "SortedListFunctor",
    "lift",
    # Monad
    "Monad",
    "OptionMonad",
    "ListMonad",
    "ResultMonad",
    "StateMonad",
    "ReaderMonad",
    "ResultTMonad",
    "flatten",
    # Applicative
    "Valid",
    "Invalid",
    "Validated",
    "ValidatedApplicative",
    "valid",
    "invalid",
    "map_n",
    # Laws
    "LawCheck",
    "LawViolation",
    "assert_lawful",
]
