"""Constructors and converters between the interchange shapes."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from functools import cmp_to_key
from itertools import zip_longest
from typing import Any

from assoc.kernel.config import DEFAULT_OPTIONS, AssocOptions
from assoc.kernel.equality import Test, resolve
from assoc.kernel.errors import MalformedPairError, OddLengthError
from assoc.kernel.sequence import AssocLike, AssocSequence, Pair

from .traversal import collect, fold, iterate
from .transforms import map_pairs, map_values

logger = logging.getLogger(__name__)

_MISSING = object()


def make(keys: Iterable[Any], default: Any = None) -> AssocSequence:
    """One pair per key, every value set to default."""
    return AssocSequence(tuple((key, default) for key in keys))


def zip_lists(keys: Iterable[Any], values: Iterable[Any]) -> AssocSequence:
    """Pair keys with values positionally.

    Extra keys are paired with None; extra values are dropped.
    """
    pairs = []
    for key, value in zip_longest(keys, values, fillvalue=_MISSING):
        if key is _MISSING:
            break
        pairs.append((key, None if value is _MISSING else value))
    return AssocSequence(tuple(pairs))


def unzip(seq: AssocLike) -> tuple[list[Any], list[Any]]:
    """Split a sequence into its key list and value list.

    Every pair contributes, so order and duplicates are kept.
    """
    return (
        collect(lambda key, _value: key, seq),
        collect(lambda _key, value: value, seq),
    )


def partition(flat: Sequence[Any], options: AssocOptions = DEFAULT_OPTIONS) -> AssocSequence:
    """Group a flat [k1, v1, k2, v2, ...] list into pairs.

    Args:
        flat: Alternating keys and values
        options: odd_length decides how a trailing key is handled

    Raises:
        OddLengthError: If flat has odd length and odd_length is "error"
    """
    items = list(flat)
    if len(items) % 2:
        if options.odd_length == "error":
            raise OddLengthError(
                f"Flat key-value list has odd length {len(items)}; key {items[-1]!r} has no value",
                flat,
            )
        logger.warning("Padding trailing key %r with %r", items[-1], options.pad_value)
        items.append(options.pad_value)
    return AssocSequence(tuple(zip(items[::2], items[1::2])))


def flatten(seq: AssocLike) -> list[Any]:
    """Flatten a sequence into [k1, v1, k2, v2, ...]."""
    def step(key: Any, value: Any, acc: list[Any]) -> list[Any]:
        acc.extend((key, value))
        return acc

    return fold(step, seq, [])


def uniq(seq: AssocLike, keep_last: bool = False, test: Test = None) -> AssocSequence:
    """Remove duplicate keys.

    By default the first occurrence of each key is kept in place. With
    keep_last the last occurrence is kept, at the position it held.
    """
    same = resolve(test)
    pairs = AssocSequence.of(seq).pairs
    if keep_last:
        pairs = pairs[::-1]
    kept: list[Pair] = []
    for pair in pairs:
        if not any(same(pair[0], other[0]) for other in kept):
            kept.append(pair)
    if keep_last:
        kept.reverse()
    logger.debug("uniq kept %d of %d pairs", len(kept), len(pairs))
    return AssocSequence(tuple(kept))


def merge(*seqs: AssocLike, test: Test = None) -> AssocSequence:
    """Merge sequences into one with unique keys.

    Semantics:
        - A key present in several sequences takes its value from the
          last sequence (by argument position) that contains it
        - Within one sequence the foremost occurrence of a key wins
        - Keys are ordered by first appearance reading the inputs
          left to right

    Returns:
        A new sequence with one pair per distinct key
    """
    same = resolve(test)
    merged: list[Pair] = []
    for seq in seqs:
        for key, value in iterate(uniq(seq, test=same)):
            for i, (existing, _old) in enumerate(merged):
                if same(existing, key):
                    merged[i] = (existing, value)
                    break
            else:
                merged.append((key, value))
    logger.debug("merge of %d sequences produced %d pairs", len(seqs), len(merged))
    return AssocSequence(tuple(merged))


def sort_keys(seq: AssocLike, key_less: Callable[[Any, Any], Any]) -> AssocSequence:
    """Stable sort of pairs by key.

    Args:
        seq: The sequence to sort
        key_less: Strict "less than" over keys

    Returns:
        A new sequence; pairs with equivalent keys keep their input order
    """
    def compare(a: Pair, b: Pair) -> int:
        if key_less(a[0], b[0]):
            return -1
        if key_less(b[0], a[0]):
            return 1
        return 0

    return AssocSequence(tuple(sorted(AssocSequence.of(seq).pairs, key=cmp_to_key(compare))))


def copy(seq: AssocLike) -> AssocSequence:
    """Shallow duplicate: a new sequence sharing the same pair objects."""
    return AssocSequence(tuple(AssocSequence.of(seq).pairs))


def to_duples(seq: AssocLike) -> list[list[Any]]:
    """Convert to a list of [key, value] duples.

    Each value is wrapped in a singleton list and consed onto its key.
    """
    wrapped = map_values(lambda value: [value], seq)
    return map_pairs(lambda key, rest: [key, *rest], wrapped)


def from_duples(duples: Iterable[Sequence[Any]]) -> AssocSequence:
    """Convert a list of [key, value] duples into a sequence.

    Raises:
        MalformedPairError: If an entry does not hold exactly one value
    """
    conses: list[Pair] = []
    for i, duple in enumerate(duples):
        if isinstance(duple, (str, bytes)) or not isinstance(duple, Sequence) or not duple:
            raise MalformedPairError(f"Expected a [key, value] duple at index {i}, got {duple!r}", duple, index=i)
        conses.append((duple[0], list(duple[1:])))

    def unwrap(rest: list[Any]) -> Any:
        if len(rest) != 1:
            raise MalformedPairError(f"Duple must hold exactly one value, got {len(rest)}", rest)
        return rest[0]

    return map_values(unwrap, conses)


def to_dict(seq: AssocLike, test: Test = None) -> dict[Any, Any]:
    """Convert to a dict of the visible pairs; keys must be hashable."""
    return dict(uniq(seq, test=test).pairs)


def from_mapping(mapping: Mapping[Any, Any]) -> AssocSequence:
    """One pair per mapping item, in the mapping's iteration order."""
    return AssocSequence(tuple(mapping.items()))

