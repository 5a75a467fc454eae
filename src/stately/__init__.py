from .kernel import (
    Err,
    Ok,
    Reader,
    ReaderWriterState,
    Result,
    ResultT,
    StateAction,
    UnwrapError,
    Writer,
    chain,
    compose,
    identity,
    sequence,
    traverse,
)
from .typeclasses import LawCheck, LawViolation, Monoid, assert_lawful

__all__ = [
    # Core
    "StateAction",
    "sequence",
    "traverse",
    # Primitives
    "Reader",
    "Writer",
    "ReaderWriterState",
    "ResultT",
    "Ok",
    "Err",
    "Result",
    "UnwrapError",
    "identity",
    "compose",
    "chain",
    # Typeclasses
    "Monoid",
    "LawCheck",
    "LawViolation",
    "assert_lawful",
]
