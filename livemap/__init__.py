"""livemap: mapping views over live, externally mutable objects."""

from .coercion import Coercion, as_coercion, identity, json_value, typed
from .errors import CoercionError, ElementNotFound, InvalidKey, LiveMapError
from .factory import live_map
from .live import UNDEFINED, Attributes, LiveObject, Memory, Namespaced
from .view import LiveMapView
from .views import Entry, EntryCursor, EntrySet, ValuesView

__all__ = [
    "Attributes",
    "Coercion",
    "CoercionError",
    "ElementNotFound",
    "Entry",
    "EntryCursor",
    "EntrySet",
    "InvalidKey",
    "LiveMapError",
    "LiveMapView",
    "LiveObject",
    "Memory",
    "Namespaced",
    "UNDEFINED",
    "ValuesView",
    "as_coercion",
    "identity",
    "json_value",
    "live_map",
    "typed",
]
