"""Fold and iteration primitives.

Every traversal in the library goes through :func:`iterate`, and every
reduction through :func:`fold`. Both walk pairs strictly left to right.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, TypeVar

from assoc.kernel.sequence import AssocLike, AssocSequence, Pair

A = TypeVar("A")


@dataclass(frozen=True)
class Traversal:
    """A restartable, lazy walk over a sequence.

    Each call to iter() starts again from the first pair; no position
    is kept between walks.
    """

    seq: AssocSequence

    def __iter__(self) -> Iterator[Pair]:
        yield from self.seq.pairs

    def __len__(self) -> int:
        return len(self.seq)


def iterate(seq: AssocLike) -> Traversal:
    """Return a restartable traversal yielding (key, value) in order."""
    return Traversal(AssocSequence.of(seq))


def fold(fn: Callable[[Any, Any, A], A], seq: AssocLike, init: A) -> A:
    """Left fold over a sequence.

    Args:
        fn: Called as fn(key, value, acc) for each pair in order
        seq: The sequence to reduce
        init: The initial accumulator

    Returns:
        The final accumulator
    """
    acc = init
    for key, value in iterate(seq):
        acc = fn(key, value, acc)
    return acc


def scan(fn: Callable[[Any, Any, A], A], seq: AssocLike, init: A) -> list[A]:
    """Like fold, but return every intermediate accumulator.

    The result starts with ``init`` and has one more element than ``seq``.
    """
    def step(key: Any, value: Any, states: list[A]) -> list[A]:
        states.append(fn(key, value, states[-1]))
        return states

    return fold(step, seq, [init])


def collect(fn: Callable[[Any, Any], Any], seq: AssocLike) -> list[Any]:
    """Collect fn(key, value) for every pair into a list, in order."""
    def step(key: Any, value: Any, acc: list[Any]) -> list[Any]:
        acc.append(fn(key, value))
        return acc

    return fold(step, seq, [])


def for_each(fn: Callable[[Any, Any], Any], seq: AssocLike) -> None:
    """Call fn(key, value) for every pair in order."""
    for key, value in iterate(seq):
        fn(key, value)
