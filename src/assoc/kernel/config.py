"""Configuration options for sequence construction and decoding."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .equality import Predicate, resolve


class AssocOptions(BaseModel):
    """Options passed explicitly to operations that need them.

    Attributes:
        test: Name of the equality predicate used when deduplicating.
        odd_length: What partition does with a trailing key that has no value.
        pad_value: Value paired with a trailing key when odd_length is "pad".
        unique: Whether decoded wire shapes are deduplicated (first wins).
    """

    model_config = ConfigDict(frozen=True)

    test: Literal["eq", "eql", "equal", "equalp"] = "equal"
    odd_length: Literal["error", "pad"] = "error"
    pad_value: Any = None
    unique: bool = Field(default=False)

    def predicate(self) -> Predicate:
        """Resolve the configured equality test."""
        return resolve(self.test)


DEFAULT_OPTIONS = AssocOptions()
