"""Small object helpers: a rectangle value and JSON round-tripping."""

import json
import math
from dataclasses import dataclass
from typing import Any, Type, TypeVar

from .utils.errors import DeserializationError

T = TypeVar("T")


@dataclass
class Rectangle:
    """Rectangle with a width and a height."""

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height


def _finite(value: Any) -> Any:
    # NaN and infinities have no JSON spelling; write them as null
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


def _encode(obj: Any) -> Any:
    if hasattr(obj, "model_dump"):
        return _finite(obj.model_dump())
    if hasattr(obj, "__dict__"):
        return _finite(vars(obj))
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """
    Return the compact JSON representation of ``obj``.

    Plain objects are serialized through their attributes, so
    ``get_json(Rectangle(10, 20))`` gives ``'{"width":10,"height":20}'``.
    Non-finite floats are written as ``null``.
    """
    return json.dumps(_finite(obj), separators=(",", ":"), default=_encode, allow_nan=False)


def from_json(cls: Type[T], json_text: str) -> T:
    """
    Create an instance of ``cls`` from a JSON object.

    The object's values are passed to ``cls`` positionally in document order,
    e.g. ``from_json(Rectangle, '{"width":10,"height":20}')``.

    Raises:
        DeserializationError: if the text is not a JSON object or ``cls``
            rejects the values
    """
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as e:
        raise DeserializationError(f"Invalid JSON: {e}", {"type": cls.__name__})

    if not isinstance(data, dict):
        raise DeserializationError(
            "Expected a JSON object",
            {"type": cls.__name__, "received": type(data).__name__},
        )

    try:
        return cls(*data.values())
    except TypeError as e:
        raise DeserializationError(
            f"Cannot create {cls.__name__} from JSON: {e}",
            {"type": cls.__name__, "keys": list(data)},
        )
