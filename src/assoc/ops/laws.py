"""Algebraic laws of association sequence operations.

Each function checks one law for concrete inputs and returns a bool.

1. Shadowing: get(s, k) is the value of the first pair whose key is k
2. Merge precedence: merge(a, b) takes shared keys from b and
   duplicates within a from their foremost occurrence
3. Uniq: one pair per distinct key, first (or last) occurrence kept
4. Stable sort: sort_keys never swaps pairs with equivalent keys
5. Round trips: unzip(zip_lists(ks, vs)) == (ks, vs) for equal lengths,
   partition(flatten(s)) == s
6. Complementarity: filter_pairs and reject split s into disjoint parts
7. Determinism: fold yields the same intermediate states every time
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from assoc.kernel.equality import Test, resolve
from assoc.kernel.sequence import NOT_FOUND, AssocLike, AssocSequence

from .accessors import contains_key, find_entry, get, keys
from .constructors import flatten, merge, partition, sort_keys, uniq, unzip, zip_lists
from .traversal import scan
from .transforms import filter_pairs, reject


def shadowing_holds(seq: AssocLike, key: Any, test: Test = None) -> bool:
    same = resolve(test)
    for k, v in AssocSequence.of(seq):
        if same(key, k):
            return get(seq, key, test=same) is v
    return get(seq, key, NOT_FOUND, test=same) is NOT_FOUND


def merge_precedence_holds(a: AssocLike, b: AssocLike, test: Test = None) -> bool:
    same = resolve(test)
    merged = merge(a, b, test=same)
    for key in keys(merged, test=same):
        source = b if contains_key(b, key, test=same) else a
        if get(merged, key, test=same) is not find_entry(key, source, test=same)[1]:
            return False
    return len(merged) == len(keys(AssocSequence.of(a) + b, test=same))


def uniq_holds(seq: AssocLike, keep_last: bool = False, test: Test = None) -> bool:
    same = resolve(test)
    original = AssocSequence.of(seq)
    result = uniq(original, keep_last=keep_last, test=same)
    if len(result) != len(keys(original, test=same)):
        return False
    source = original[::-1] if keep_last else original
    if not all(find_entry(pair[0], source, test=same) is pair for pair in result):
        return False
    return _is_subsequence(result, original)


def sort_is_stable(seq: AssocLike, key_less: Callable[[Any, Any], Any]) -> bool:
    tagged = [(key, i) for i, (key, _value) in enumerate(AssocSequence.of(seq))]
    ordered = list(sort_keys(tagged, key_less))
    for (key, i), (next_key, j) in zip(ordered, ordered[1:]):
        if key_less(next_key, key):
            return False
        if not key_less(key, next_key) and i > j:
            return False
    return True


def _is_subsequence(sub: AssocSequence, full: AssocSequence) -> bool:
    remaining = iter(full)
    return all(any(pair is candidate for candidate in remaining) for pair in sub)


def zip_round_trip_holds(keys_list: Sequence[Any], values_list: Sequence[Any]) -> bool:
    if len(keys_list) != len(values_list):
        return True
    return unzip(zip_lists(keys_list, values_list)) == (list(keys_list), list(values_list))


def partition_round_trip_holds(seq: AssocLike) -> bool:
    return partition(flatten(seq)) == AssocSequence.of(seq)


def filter_reject_complementary(predicate: Callable[[Any, Any], Any], seq: AssocLike) -> bool:
    original = AssocSequence.of(seq)
    kept, dropped = filter_pairs(predicate, original), reject(predicate, original)
    kept_ids = {id(pair) for pair in kept}
    dropped_ids = {id(pair) for pair in dropped}
    return not kept_ids & dropped_ids and kept_ids | dropped_ids == {id(pair) for pair in original}


def fold_is_deterministic(fn: Callable[[Any, Any, Any], Any], seq: AssocLike, init: Any) -> bool:
    return scan(fn, seq, init) == scan(fn, seq, init)
