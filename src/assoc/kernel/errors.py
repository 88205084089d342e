"""Error types for association sequences."""

from __future__ import annotations


class AssocError(Exception):
    """Base error for association sequence contract violations.

    This error preserves the raw value that caused the failure
    for debugging purposes.
    """

    def __init__(self, message: str, raw_value: object = None) -> None:
        self.raw_value = raw_value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({super().__str__()!r}, raw_value={self.raw_value!r})"


class MalformedPairError(AssocError, ValueError):
    """An element is not a 2-element (key, value) pair."""

    def __init__(self, message: str, raw_value: object = None, index: int | None = None) -> None:
        self.index = index
        super().__init__(message, raw_value)


class OddLengthError(AssocError, ValueError):
    """A flat key-value list has a key with no value."""


class UnknownEqualityError(AssocError, ValueError):
    """An equality predicate name is not recognised."""


class ShapeError(AssocError):
    """Raised when a wire shape cannot be decoded into a sequence."""
