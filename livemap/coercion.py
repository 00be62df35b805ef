"""Coercions: convert between stored property values and typed values."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable

from .errors import CoercionError

_PRIMITIVES = (bool, int, float, str)


@dataclass
class Coercion:
    """A pair of conversions between raw property values and ``T``.

    ``to_value`` converts what the live object holds into the typed
    result handed to callers; ``from_value`` converts a caller's typed
    value into what gets stored. ``None`` passes through both ways.

    Use ``read()`` / ``write()`` rather than calling the functions
    directly: they turn conversion failures into ``CoercionError``.
    """

    to_value: Callable[[Any], Any]
    from_value: Callable[[Any], Any]
    name: str = "value"

    def read(self, raw: Any) -> Any:
        """Convert a stored value to the typed result."""
        if raw is None:
            return None
        try:
            return self.to_value(raw)
        except CoercionError:
            raise
        except (TypeError, ValueError, OverflowError) as e:
            raise CoercionError(raw, self.name, str(e)) from e

    def write(self, value: Any) -> Any:
        """Convert a typed value to what the live object stores."""
        if value is None:
            return None
        try:
            return self.from_value(value)
        except CoercionError:
            raise
        except (TypeError, ValueError, OverflowError) as e:
            raise CoercionError(value, f"stored form of {self.name}", str(e)) from e


def identity() -> Coercion:
    """No conversion in either direction."""
    return Coercion(to_value=lambda v: v, from_value=lambda v: v, name="object")


def typed(cls: type) -> Coercion:
    """Values of ``cls``.

    Instances pass through. For ``bool``, ``int``, ``float`` and
    ``str`` other values are converted by calling the type, the way
    a scripting engine converts its numbers and strings. Anything
    else that is not an instance raises ``CoercionError``.
    """

    def convert(value: Any) -> Any:
        if isinstance(value, cls) and not (
            cls is not bool and isinstance(value, bool)
        ):
            return value
        if cls in _PRIMITIVES:
            return cls(value)
        raise CoercionError(value, cls.__name__)

    return Coercion(to_value=convert, from_value=convert, name=cls.__name__)


def json_value(**dumps_kwargs: Any) -> Coercion:
    """Values stored as JSON text.

    Args:
        **dumps_kwargs: Passed to ``json.dumps`` on write.
    """

    def decode(raw: Any) -> Any:
        if not isinstance(raw, (str, bytes, bytearray)):
            raise TypeError(f"expected JSON text, got {type(raw).__name__}")
        return json.loads(raw)

    def encode(value: Any) -> str:
        return json.dumps(value, **dumps_kwargs)

    return Coercion(to_value=decode, from_value=encode, name="json")


def as_coercion(value_type: Coercion | type | None) -> Coercion:
    """Normalize a view's value type into a Coercion.

    ``None`` and ``object`` mean no conversion; a ``Coercion`` is used
    as given; any other type is handled by ``typed()``.
    """
    if value_type is None or value_type is object:
        return identity()
    if isinstance(value_type, Coercion):
        return value_type
    if isinstance(value_type, type):
        return typed(value_type)
    raise TypeError(
        f"value_type must be a type or Coercion, "
        f"not {type(value_type).__name__}"
    )
