"""Core association sequence type."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Union, overload

from .errors import MalformedPairError

Pair = tuple[Any, Any]


class _NotFound:
    """Sentinel returned when a lookup finds no matching pair."""

    _instance: _NotFound | None = None

    def __new__(cls) -> _NotFound:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __reduce__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = _NotFound()


# Extension registry - class-level storage for AssocSequence methods
_methods_registry: dict[str, Callable[..., Any]] = {}


def as_pair(item: Any, index: int | None = None) -> Pair:
    """Coerce a 2-element tuple or list into a pair.

    Tuples of length two are returned as-is so pair objects are shared.

    Raises:
        MalformedPairError: If the item is not a 2-element tuple or list
    """
    if isinstance(item, tuple) and len(item) == 2:
        return item
    if isinstance(item, list) and len(item) == 2:
        return (item[0], item[1])
    where = f" at index {index}" if index is not None else ""
    raise MalformedPairError(
        f"Expected a (key, value) pair{where}, got {type(item).__name__}: {item!r}",
        item,
        index=index,
    )


@dataclass(frozen=True)
class AssocSequence:
    """
    An ordered sequence of (key, value) pairs.

    Duplicate keys are allowed; the first matching pair shadows the rest.
    Immutable - all operations return new instances. Copies are shallow:
    pair objects are shared between sequences.

    Capabilities can be registered via register_op() for extensibility.
    """

    _pairs: tuple[Pair, ...] = ()

    @classmethod
    def of(cls, items: AssocLike = ()) -> AssocSequence:
        """Build a sequence from an iterable of pairs.

        An existing AssocSequence is returned unchanged. A mapping
        contributes its items in iteration order.

        Raises:
            MalformedPairError: If an element is not a 2-element tuple or list
        """
        if isinstance(items, AssocSequence):
            return items
        if isinstance(items, Mapping):
            return cls(tuple(items.items()))
        if isinstance(items, (str, bytes)):
            raise MalformedPairError(f"Expected an iterable of pairs, got {type(items).__name__}", items)
        return cls(tuple(as_pair(item, i) for i, item in enumerate(items)))

    @classmethod
    def register_op(cls, name: str, fn: Callable[..., Any]) -> None:
        """Register an operation as a method on AssocSequence.

        Args:
            name: The method name (e.g., "get")
            fn: Function taking the sequence as its first argument
        """
        _methods_registry[name] = fn

    def __getattr__(self, name: str) -> Any:
        """Allow calling registered methods."""
        if name in _methods_registry:
            fn = _methods_registry[name]
            return lambda *args, **kwargs: fn(self, *args, **kwargs)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    @property
    def pairs(self) -> tuple[Pair, ...]:
        return self._pairs

    def __iter__(self) -> Iterator[Pair]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    @overload
    def __getitem__(self, index: int) -> Pair: ...

    @overload
    def __getitem__(self, index: slice) -> AssocSequence: ...

    def __getitem__(self, index: int | slice) -> Pair | AssocSequence:
        if isinstance(index, slice):
            return AssocSequence(self._pairs[index])
        return self._pairs[index]

    def __add__(self, other: AssocLike) -> AssocSequence:
        return AssocSequence(self._pairs + AssocSequence.of(other)._pairs)

    def __repr__(self) -> str:
        return f"AssocSequence({list(self._pairs)!r})"


AssocLike = Union[AssocSequence, Iterable[Any], Mapping[Any, Any]]
