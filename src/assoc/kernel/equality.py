"""Equality predicates used to compare keys and values.

Every operation that compares keys takes an optional ``test`` argument.
It is resolved exactly once per call with :func:`resolve`, so the
predicate in effect cannot change while the operation runs.

Built-in predicates, from strictest to most relaxed:

- ``eq``: reference identity
- ``eql``: identity, or equal numbers of the same type
- ``equal``: deep structural equality (the default)
- ``equalp``: structural equality ignoring string case, numeric type
  and list/tuple representation
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Set
from numbers import Number
from typing import Any, Literal, Union

from .errors import UnknownEqualityError

Predicate = Callable[[Any, Any], bool]
EqualityName = Literal["eq", "eql", "equal", "equalp"]
Test = Union[EqualityName, Predicate, None]


def eq(a: Any, b: Any) -> bool:
    """Reference identity."""
    return a is b


def eql(a: Any, b: Any) -> bool:
    """Identity, or numbers of the same type with the same value."""
    if a is b:
        return True
    return isinstance(a, Number) and type(a) is type(b) and a == b


def equal(a: Any, b: Any) -> bool:
    """Deep structural equality.

    Numbers compare with ``eql``, so ``1`` and ``1.0`` differ. Lists and
    tuples compare element-wise but a list never equals a tuple.
    Mappings match keys and values with ``equal``.
    """
    if a is b:
        return True
    if isinstance(a, Number) or isinstance(b, Number):
        return eql(a, b)
    if isinstance(a, (str, bytes)) or isinstance(b, (str, bytes)):
        return type(a) is type(b) and a == b
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if len(a) != len(b):
            return False
        return all(
            any(equal(ka, kb) and equal(va, vb) for kb, vb in b.items())
            for ka, va in a.items()
        )
    if isinstance(a, list) and isinstance(b, list):
        return _elementwise(a, b, equal)
    if isinstance(a, tuple) and isinstance(b, tuple):
        return _elementwise(a, b, equal)
    if isinstance(a, (list, tuple, Mapping)) or isinstance(b, (list, tuple, Mapping)):
        return False
    return bool(a == b)


def equalp(a: Any, b: Any) -> bool:
    """Relaxed structural equality.

    Strings compare case-insensitively, numbers compare by value across
    types, lists and tuples are interchangeable and mapping keys are
    matched with ``equalp`` as well.
    """
    if a is b:
        return True
    if isinstance(a, Number) and isinstance(b, Number):
        return bool(a == b)
    if isinstance(a, str) and isinstance(b, str):
        return a.casefold() == b.casefold()
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if len(a) != len(b):
            return False
        return all(
            any(equalp(ka, kb) and equalp(va, vb) for kb, vb in b.items())
            for ka, va in a.items()
        )
    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        return _elementwise(a, b, equalp)
    if isinstance(a, Set) and isinstance(b, Set):
        return len(a) == len(b) and all(any(equalp(x, y) for y in b) for x in a)
    return equal(a, b)


def _elementwise(a: Any, b: Any, same: Predicate) -> bool:
    return len(a) == len(b) and all(same(x, y) for x, y in zip(a, b))


BUILTIN_PREDICATES: dict[str, Predicate] = {
    "eq": eq,
    "eql": eql,
    "equal": equal,
    "equalp": equalp,
}
EQUALITY_NAMES = tuple(BUILTIN_PREDICATES)


def resolve(test: Test = None) -> Predicate:
    """Resolve an equality test into a predicate.

    Args:
        test: None for deep structural equality, a built-in name,
            or a two-argument callable which is returned unchanged.

    Returns:
        The predicate to use for the whole operation

    Raises:
        UnknownEqualityError: If ``test`` is neither a known name nor callable
    """
    if test is None:
        return equal
    if isinstance(test, str):
        try:
            return BUILTIN_PREDICATES[test]
        except KeyError:
            raise UnknownEqualityError(
                f"Unknown equality test '{test}', expected one of {', '.join(EQUALITY_NAMES)}",
                test,
            ) from None
    if callable(test):
        return test
    raise UnknownEqualityError(f"Equality test must be a name or callable, got {type(test).__name__}", test)
