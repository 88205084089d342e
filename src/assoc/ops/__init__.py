"""Operations over association sequences."""

from .accessors import (
    assoc_equal,
    contains_key,
    contains_pair,
    delete,
    find_entry,
    get,
    is_assoc,
    keys,
    put,
    values,
)
from .constructors import (
    copy,
    flatten,
    from_duples,
    from_mapping,
    make,
    merge,
    partition,
    sort_keys,
    to_dict,
    to_duples,
    uniq,
    unzip,
    zip_lists,
)
from .traversal import Traversal, fold, for_each, iterate, scan
from .transforms import (
    filter_keys,
    filter_pairs,
    filter_values,
    map_keys,
    map_pairs,
    map_values,
    reject,
    reject_keys,
    reject_values,
)

__all__ = [
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
