"""Kernel layer - the sequence type, equality and errors."""

from assoc.kernel.config import DEFAULT_OPTIONS, AssocOptions
from assoc.kernel.equality import (
    EQUALITY_NAMES,
    Predicate,
    Test,
    eq,
    eql,
    equal,
    equalp,
    resolve,
)
from assoc.kernel.errors import (
    AssocError,
    MalformedPairError,
    OddLengthError,
    ShapeError,
    UnknownEqualityError,
)
from assoc.kernel.sequence import NOT_FOUND, AssocLike, AssocSequence, Pair, as_pair

__all__ = [
    "AssocSequence",
    "AssocLike",
    "Pair",
    "NOT_FOUND",
    "as_pair",
    # Equality
    "EQUALITY_NAMES",
    "Predicate",
    "Test",
    "eq",
    "eql",
    "equal",
    "equalp",
    "resolve",
    # Config
    "AssocOptions",
    "DEFAULT_OPTIONS",
    # Errors
    "AssocError",
    "MalformedPairError",
    "OddLengthError",
    "ShapeError",
    "UnknownEqualityError",
]
