"""Transform pipeline: filter, reject and map over pairs, keys or values.

All transforms return new sequences and preserve input order.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from assoc.kernel.sequence import AssocLike, AssocSequence

from .traversal import iterate

PairPredicate = Callable[[Any, Any], Any]
ItemPredicate = Callable[[Any], Any]


def filter_pairs(predicate: PairPredicate, seq: AssocLike) -> AssocSequence:
    """Keep the pairs for which predicate(key, value) is truthy."""
    return AssocSequence(tuple(pair for pair in iterate(seq) if predicate(pair[0], pair[1])))


def reject(predicate: PairPredicate, seq: AssocLike) -> AssocSequence:
    """Drop the pairs for which predicate(key, value) is truthy."""
    return filter_pairs(lambda key, value: not predicate(key, value), seq)


def filter_keys(predicate: ItemPredicate, seq: AssocLike) -> AssocSequence:
    return filter_pairs(lambda key, _value: predicate(key), seq)


def filter_values(predicate: ItemPredicate, seq: AssocLike) -> AssocSequence:
    return filter_pairs(lambda _key, value: predicate(value), seq)


def reject_keys(predicate: ItemPredicate, seq: AssocLike) -> AssocSequence:
    return reject(lambda key, _value: predicate(key), seq)


def reject_values(predicate: ItemPredicate, seq: AssocLike) -> AssocSequence:
    return reject(lambda _key, value: predicate(value), seq)


def map_pairs(fn: Callable[[Any, Any], Any], seq: AssocLike) -> list[Any]:
    """Apply fn(key, value) to every pair.

    The results are collected into a plain list; they need not be pairs.
    """
    return [fn(key, value) for key, value in iterate(seq)]


def map_keys(fn: Callable[[Any], Any], seq: AssocLike) -> AssocSequence:
    """Replace every key with fn(key), keeping values and order."""
    return AssocSequence(tuple(map_pairs(lambda key, value: (fn(key), value), seq)))


def map_values(fn: Callable[[Any], Any], seq: AssocLike) -> AssocSequence:
    """Replace every value with fn(value), keeping keys and order."""
    return AssocSequence(tuple(map_pairs(lambda key, value: (key, fn(value)), seq)))
