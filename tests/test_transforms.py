"""Tests for the transform pipeline."""

from __future__ import annotations

import pytest

from assoc import (
    AssocSequence,
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
from fakes import PredicateFailure, exploding_predicate, fibonacci_pairs, letters


def greater_than(key: int, value: int) -> bool:
    return key > value


def test_filter_pairs_keeps_matches_in_order() -> None:
    """Test filtering index/Fibonacci pairs where the index is larger."""
    assert filter_pairs(greater_than, fibonacci_pairs()).pairs == ((2, 1), (3, 2), (4, 3))


def test_reject_is_negated_filter() -> None:
    """Test reject keeps exactly what filter drops."""
    assert reject(greater_than, fibonacci_pairs()).pairs == (
        (1, 1), (5, 5), (6, 8), (7, 13), (8, 21),
    )


def test_filter_is_pure() -> None:
    """Test the input sequence is left untouched."""
    original = fibonacci_pairs()
    filter_pairs(greater_than, original)
    assert original == fibonacci_pairs()


def test_filter_and_reject_keys() -> None:
    assert filter_keys(lambda k: k in "ab", letters()).pairs == (("a", 1), ("b", 2), ("b", 3), ("a", 5))
    assert reject_keys(lambda k: k in "ab", letters()).pairs == (("c", 4),)


def test_filter_and_reject_values() -> None:
    assert filter_values(lambda v: v % 2, letters()).pairs == (("a", 1), ("b", 3), ("a", 5))
    assert reject_values(lambda v: v % 2, letters()).pairs == (("b", 2), ("c", 4))


def test_filter_propagates_predicate_error() -> None:
    with pytest.raises(PredicateFailure):
        filter_pairs(exploding_predicate, letters())


def test_map_pairs_returns_plain_list() -> None:
    """Test map_pairs results need not be pairs."""
    assert map_pairs(lambda k, v: f"{k}={v}", letters()) == ["a=1", "b=2", "b=3", "c=4", "a=5"]
    assert map_pairs(lambda k, v: None, [("a", 1)]) == [None]


def test_map_keys() -> None:
    """Test map_keys keeps values and order."""
    assert map_keys(str.upper, [("a", 1), ("b", 2)]).pairs == (("A", 1), ("B", 2))


def test_map_values() -> None:
    """Test map_values keeps keys and order."""
    result = map_values(lambda v: v * 10, letters())
    assert isinstance(result, AssocSequence)
    assert result.pairs == (("a", 10), ("b", 20), ("b", 30), ("c", 40), ("a", 50))


def test_map_values_wrap_and_unwrap() -> None:
    """Test wrapping values into singleton lists and back."""
    wrapped = map_values(lambda v: [v], letters())
    assert wrapped[0] == ("a", [1])
    assert map_values(lambda v: v[0], wrapped) == letters()
