"""assoc - ordered association sequences with pluggable key equality."""

# Import aliases to register AssocSequence methods
from . import aliases  # noqa: F401
from .kernel import (
    DEFAULT_OPTIONS,
    NOT_FOUND,
    AssocError,
    AssocOptions,
    AssocSequence,
    MalformedPairError,
    OddLengthError,
    Pair,
    ShapeError,
    UnknownEqualityError,
    eq,
    eql,
    equal,
    equalp,
    resolve,
)
from .ops import (
    Traversal,
    assoc_equal,
    contains_key,
    contains_pair,
    copy,
    delete,
    filter_keys,
    filter_pairs,
    filter_values,
    find_entry,
    flatten,
    fold,
    for_each,
    from_duples,
    from_mapping,
    get,
    is_assoc,
    iterate,
    keys,
    make,
    map_keys,
    map_pairs,
    map_values,
    merge,
    partition,
    put,
    reject,
    reject_keys,
    reject_values,
    scan,
    sort_keys,
    to_dict,
    to_duples,
    uniq,
    unzip,
    values,
    zip_lists,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "AssocSequence",
    "Pair",
    "NOT_FOUND",
    # Equality
    "resolve",
    "eq",
    "eql",
    "equal",
    "equalp",
    # Config
    "AssocOptions",
    "DEFAULT_OPTIONS",
    # Errors
    "AssocError",
    "MalformedPairError",
    "OddLengthError",
    "ShapeError",
    "UnknownEqualityError",
    # Fold & iteration
    "Traversal",
    "iterate",
    "fold",
    "scan",
    "for_each",
    # Constructors & converters
    "make",
    "zip_lists",
    "unzip",
    "partition",
    "flatten",
    "merge",
    "uniq",
    "sort_keys",
    "copy",
    "to_duples",
    "from_duples",
    "to_dict",
    "from_mapping",
    # Accessors
    "get",
    "put",
    "delete",
    "find_entry",
    "keys",
    "values",
    "contains_key",
    "contains_pair",
    "is_assoc",
    "assoc_equal",
    # Transforms
    "filter_pairs",
    "reject",
    "filter_keys",
    "filter_values",
    "reject_keys",
    "reject_values",
    "map_pairs",
    "map_keys",
    "map_values",
]
