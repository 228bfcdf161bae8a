"""Compact JSON encoding and class re-attachment on decode."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

from selectorkit.errors import DeserializationError, SerializationError

__all__ = ["get_json", "from_json"]

T = TypeVar("T")


def _encode_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    >>> get_json([1, 2, 3])
    '[1,2,3]'
    """
    try:
        return json.dumps(obj, separators=(",", ":"), default=_encode_default)
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc), cause=exc) from exc


def from_json(cls: type[T], text: str) -> T:
    """Build an instance of *cls* from a JSON object without calling ``__init__``.

    The decoded keys become instance attributes, so methods and properties
    of *cls* are available on the result.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DeserializationError(f"Invalid JSON: {exc}", cause=exc) from exc
    if not isinstance(data, dict):
        raise DeserializationError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )

    obj = cls.__new__(cls)
    for key, value in data.items():
        try:
            setattr(obj, key, value)
        except AttributeError as exc:
            raise DeserializationError(
                f"Cannot set {key!r} on {cls.__name__}: {exc}", cause=exc
            ) from exc
    return obj
