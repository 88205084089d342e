"""Alias names and AssocSequence method registration.

The core operations are implemented once in assoc.ops; this module only
adds alternative names for them and binds them as methods so that
``seq.get("a")`` works.
"""

from __future__ import annotations

from typing import Any

from assoc.kernel.sequence import AssocSequence
from assoc.ops import accessors, constructors, transforms, traversal

# Alternative names
remove = transforms.reject
remove_keys = transforms.reject_keys
remove_values = transforms.reject_values
aget = accessors.get
alist_keys = accessors.keys
alist_values = accessors.values
pairlis = constructors.zip_lists
plist_to_alist = constructors.partition
alist_to_plist = constructors.flatten
doalist = traversal.for_each
reduce_alist = traversal.fold


def _bind_sequence_last(fn: Any) -> Any:
    """Adapt fn(arg, seq, ...) into method form seq.fn(arg, ...)."""
    def method(self: AssocSequence, first: Any, *args: Any, **kwargs: Any) -> Any:
        return fn(first, self, *args, **kwargs)

    method.__name__ = fn.__name__
    method.__doc__ = fn.__doc__
    return method


_SEQUENCE_FIRST = (
    accessors.get,
    accessors.put,
    accessors.delete,
    accessors.contains_key,
    accessors.contains_pair,
    constructors.unzip,
    constructors.flatten,
    constructors.uniq,
    constructors.sort_keys,
    constructors.copy,
    constructors.to_duples,
    constructors.to_dict,
    traversal.iterate,
)

_SEQUENCE_LAST = (
    accessors.find_entry,
    transforms.filter_pairs,
    transforms.reject,
    transforms.filter_keys,
    transforms.filter_values,
    transforms.reject_keys,
    transforms.reject_values,
    transforms.map_pairs,
    transforms.map_keys,
    transforms.map_values,
    traversal.fold,
    traversal.scan,
    traversal.for_each,
)


def _merge_with(self: AssocSequence, *others: Any, **kwargs: Any) -> AssocSequence:
    return constructors.merge(self, *others, **kwargs)


def _equals(self: AssocSequence, other: Any, **kwargs: Any) -> bool:
    return accessors.assoc_equal(self, other, **kwargs)


def register_methods() -> None:
    """Register the core operations as AssocSequence methods."""
    for fn in _SEQUENCE_FIRST:
        AssocSequence.register_op(fn.__name__, fn)
    for fn in _SEQUENCE_LAST:
        AssocSequence.register_op(fn.__name__, _bind_sequence_last(fn))
    # Not "keys": dict() would then read a sequence as a mapping
    AssocSequence.register_op("alist_keys", alist_keys)
    AssocSequence.register_op("alist_values", alist_values)
    AssocSequence.register_op("merge", _merge_with)
    AssocSequence.register_op("assoc_equal", _equals)
    AssocSequence.register_op("remove", _bind_sequence_last(remove))


register_methods()
