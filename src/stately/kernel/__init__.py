"""Kernel layer - pure abstractions for stately."""

from stately.kernel.functions import chain, compose, identity
from stately.kernel.reader import Reader
from stately.kernel.result import Err, Ok, Result, UnwrapError, collect, from_optional
from stately.kernel.rws import ReaderWriterState
from stately.kernel.state import StateAction, sequence, traverse
from stately.kernel.transformers import ResultT
from stately.kernel.writer import Writer

__all__ = [
    "StateAction",
    "sequence",
    "traverse",
    "Reader",
    "Writer",
    "ReaderWriterState",
    "ResultT",
    # Results
    "Ok",
    "Err",
    "Result",
    "UnwrapError",
    "collect",
    "from_optional",
    # Functions
    "identity",
    "compose",
    "chain",
]
