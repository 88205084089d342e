"""Accessors: lookup, update and membership.

Lookups never raise for a missing key; they return a default, the
NOT_FOUND sentinel or False. Updates are pure and return new sequences.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from assoc.kernel.equality import Predicate, Test, resolve
from assoc.kernel.sequence import NOT_FOUND, AssocLike, AssocSequence, Pair

from .traversal import collect, iterate


def _find(same: Predicate, key: Any, seq: AssocLike) -> Pair | Any:
    for pair in iterate(seq):
        if same(key, pair[0]):
            return pair
    return NOT_FOUND


def _distinct(same: Predicate, items: Iterable[Any]) -> list[Any]:
    seen: list[Any] = []
    for item in items:
        if not any(same(item, other) for other in seen):
            seen.append(item)
    return seen


def find_entry(key: Any, seq: AssocLike, test: Test = None) -> Pair | Any:
    """Return the first pair whose key matches, or NOT_FOUND."""
    return _find(resolve(test), key, seq)


def get(seq: AssocLike, key: Any, default: Any = None, test: Test = None) -> Any:
    """Return the value of the first pair whose key matches.

    Args:
        seq: The sequence to search
        key: The key to look up
        default: Returned when no pair matches
        test: Equality test for keys

    Returns:
        The visible value for key, or default
    """
    entry = _find(resolve(test), key, seq)
    if entry is NOT_FOUND:
        return default
    return entry[1]


def put(
    seq: AssocLike,
    key: Any,
    value: Any,
    replace: bool = False,
    test: Test = None,
) -> AssocSequence:
    """Return a sequence with (key, value) at the front.

    Without replace the new pair shadows older pairs for the same key.
    With replace every older pair for the key is removed first.
    """
    current = AssocSequence.of(seq)
    if replace:
        current = delete(current, key, remove_all=True, test=test)
    return AssocSequence(((key, value),) + current.pairs)


def delete(seq: AssocLike, key: Any, remove_all: bool = False, test: Test = None) -> AssocSequence:
    """Return a sequence without the first pair matching key.

    With remove_all every matching pair is removed.
    """
    same = resolve(test)
    kept: list[Pair] = []
    removed = False
    for pair in iterate(seq):
        if (remove_all or not removed) and same(key, pair[0]):
            removed = True
            continue
        kept.append(pair)
    return AssocSequence(tuple(kept))


def keys(seq: AssocLike, test: Test = None) -> list[Any]:
    """Distinct keys in first-occurrence order."""
    same = resolve(test)
    return _distinct(same, collect(lambda key, _value: key, seq))


def values(seq: AssocLike, test: Test = None) -> list[Any]:
    """Distinct values in first-occurrence order."""
    same = resolve(test)
    return _distinct(same, collect(lambda _key, value: value, seq))


def contains_key(seq: AssocLike, key: Any, test: Test = None) -> bool:
    return _find(resolve(test), key, seq) is not NOT_FOUND


def contains_pair(seq: AssocLike, key: Any, value: Any, test: Test = None) -> bool:
    """Whether any pair matches both key and value under test."""
    same = resolve(test)
    return any(same(key, k) and same(value, v) for k, v in iterate(seq))


def is_assoc(obj: Any) -> bool:
    """Whether obj can be read as an association sequence.

    Only sequences qualify, so one-shot iterators are never consumed.
    Strings and mappings are not association sequences.
    """
    if isinstance(obj, AssocSequence):
        return True
    if isinstance(obj, (str, bytes)) or not isinstance(obj, Sequence):
        return False
    return all(isinstance(item, (tuple, list)) and len(item) == 2 for item in obj)


def assoc_equal(a: AssocLike, b: AssocLike, test: Test = None) -> bool:
    """Whether two sequences map the same visible keys to the same values.

    Order and shadowed pairs are ignored.
    """
    same = resolve(test)
    left, right = AssocSequence.of(a), AssocSequence.of(b)
    left_keys = keys(left, test=same)
    if len(left_keys) != len(keys(right, test=same)):
        return False
    for key in left_keys:
        entry = _find(same, key, right)
        if entry is NOT_FOUND or not same(_find(same, key, left)[1], entry[1]):
            return False
    return True
