"""Schemas that decode wire shapes into association sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from pydantic import TypeAdapter, ValidationError

from assoc.kernel.config import DEFAULT_OPTIONS, AssocOptions
from assoc.kernel.errors import AssocError, ShapeError
from assoc.kernel.sequence import AssocSequence
from assoc.ops.constructors import from_mapping, partition
from assoc.ops.transforms import map_values

_PAIR_LIST: TypeAdapter[list[tuple[Any, Any]]] = TypeAdapter(list[tuple[Any, Any]])
_FLAT_LIST: TypeAdapter[list[Any]] = TypeAdapter(list[Any])
_OBJECT: TypeAdapter[dict[str, Any]] = TypeAdapter(dict[str, Any])


class ShapeSchema(Protocol):
    """Protocol for wire shape schemas.

    Schemas validate raw decoded JSON and turn it into a sequence.
    """

    def decode(self, raw: Any, options: AssocOptions = DEFAULT_OPTIONS) -> AssocSequence:
        """Validate and convert the raw value.

        Raises:
            ShapeError: If the raw value does not have this shape
        """
        ...

    def describe(self) -> str:
        """Return a human-readable description of this schema."""
        ...


def _validate(adapter: TypeAdapter[Any], raw: Any, shape: str) -> Any:
    try:
        return adapter.validate_python(raw)
    except ValidationError as e:
        raise ShapeError(f"Value is not a valid {shape}: {e.error_count()} error(s)", raw) from e


@dataclass(frozen=True)
class PairListSchema:
    """A list of [key, value] entries."""

    def decode(self, raw: Any, options: AssocOptions = DEFAULT_OPTIONS) -> AssocSequence:
        return AssocSequence(tuple(_validate(_PAIR_LIST, raw, "pair list")))

    def describe(self) -> str:
        return "PairListSchema"


@dataclass(frozen=True)
class FlatListSchema:
    """An alternating [k1, v1, k2, v2, ...] list."""

    def decode(self, raw: Any, options: AssocOptions = DEFAULT_OPTIONS) -> AssocSequence:
        flat = _validate(_FLAT_LIST, raw, "flat list")
        try:
            return partition(flat, options)
        except AssocError as e:
            raise ShapeError(str(e), raw) from e

    def describe(self) -> str:
        return "FlatListSchema"


@dataclass(frozen=True)
class MappingSchema:
    """A JSON object; pairs follow the object's key order."""

    def decode(self, raw: Any, options: AssocOptions = DEFAULT_OPTIONS) -> AssocSequence:
        return from_mapping(_validate(_OBJECT, raw, "object"))

    def describe(self) -> str:
        return "MappingSchema"


@dataclass(frozen=True)
class ValueModelSchema:
    """A pair list whose values are validated against a model.

    The model can be anything pydantic accepts as a type: a BaseModel
    subclass, a dataclass, or a plain type such as int.
    """

    model: Any
    inner: ShapeSchema = PairListSchema()

    def decode(self, raw: Any, options: AssocOptions = DEFAULT_OPTIONS) -> AssocSequence:
        seq = self.inner.decode(raw, options)
        adapter: TypeAdapter[Any] = TypeAdapter(self.model)
        return map_values(lambda value: _validate(adapter, value, self._model_name()), seq)

    def describe(self) -> str:
        return f"ValueModelSchema({self._model_name()}, {self.inner.describe()})"

    def _model_name(self) -> str:
        return getattr(self.model, "__name__", repr(self.model))
