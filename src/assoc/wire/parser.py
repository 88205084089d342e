"""JSON parsing utilities for wire shapes."""

from __future__ import annotations

import json
from typing import Any

from assoc.kernel.errors import ShapeError


def parse_json_if_needed(value: str | bytes | Any) -> Any:
    """Parse JSON text if the value is a string.

    Args:
        value: JSON text, or an already decoded value

    Returns:
        The parsed JSON value, or the original value if not text

    Raises:
        ShapeError: If the value is text but cannot be parsed as JSON
    """
    if isinstance(value, (str, bytes)):
        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            raise ShapeError(f"Invalid JSON: {e.msg} at position {e.pos}", value) from e
    return value
