from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from assoc import AssocSequence


def letters() -> AssocSequence:
    """The sequence used by the uniq examples."""
    return AssocSequence.of([("a", 1), ("b", 2), ("b", 3), ("c", 4), ("a", 5)])


def fibonacci_pairs() -> AssocSequence:
    """Index to Fibonacci number, 1..8."""
    return AssocSequence.of([(1, 1), (2, 1), (3, 2), (4, 3), (5, 5), (6, 8), (7, 13), (8, 21)])


def string_less(a: str, b: str) -> bool:
    return a < b


class PredicateFailure(RuntimeError):
    pass


def exploding_predicate(a: Any, b: Any) -> bool:
    raise PredicateFailure(f"cannot compare {a!r} and {b!r}")


@dataclass
class RecordingTest:
    """Equality test that records every comparison it makes."""

    calls: list[tuple[Any, Any]] = field(default_factory=list)

    def __call__(self, a: Any, b: Any) -> bool:
        self.calls.append((a, b))
        return a == b
