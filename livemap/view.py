"""LiveMapView: mapping interface over a live object."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from .coercion import Coercion, as_coercion
from .errors import InvalidKey
from .live.base import UNDEFINED, LiveObject
from .live.memory import Memory
from .views import EntryCursor, EntrySet, ValuesView

_logger = logging.getLogger(__name__)


class LiveMapView(MutableMapping[str, Any]):
    """Read/write mapping over a ``LiveObject``.

    Holds no data: every call re-reads the live object, so changes
    made by anyone else holding the object are visible on the next
    call. Keys are stringified with ``str()``; values are converted
    on read and write by the view's ``Coercion``.

    ``put()`` and ``remove()`` read the prior value and then write;
    another writer can slip in between, in which case the returned
    prior value is stale. Callers needing atomicity must synchronize
    externally.

    Views differ on purpose:

    - ``keys()`` / ``key_set()`` return a disconnected ``set`` copy.
    - ``values()`` is live and re-reads on every index access.
    - ``items()`` / ``entry_set()`` is live; its cursor tolerates
      deletions made while iterating.

    Implements ``MutableMapping[str, Any]``.

    Args:
        live_object: The object whose properties are mapped.
        value_type: A type, a ``Coercion``, or ``None`` for no
            conversion.
    """

    def __init__(
        self,
        live_object: LiveObject,
        value_type: Coercion | type | None = None,
    ) -> None:
        if not isinstance(live_object, LiveObject):
            raise TypeError(
                f"LiveMapView requires a LiveObject, "
                f"not {type(live_object).__name__}"
            )
        self._object = live_object
        self._coercion = as_coercion(value_type)

    @classmethod
    def from_mapping(
        cls,
        source: Mapping[Any, Any] | None = None,
        value_type: Coercion | type | None = None,
    ) -> "LiveMapView":
        """Create a view over a fresh ``Memory`` object filled from ``source``."""
        view = cls(Memory(), value_type)
        if source:
            view.put_all(source)
        return view

    @property
    def live_object(self) -> LiveObject:
        """The underlying live object."""
        return self._object

    @property
    def coercion(self) -> Coercion:
        """The value conversion applied on read and write."""
        return self._coercion

    @staticmethod
    def _name(key: Any) -> str:
        if key is None:
            raise InvalidKey("Property key cannot be None")
        return key if isinstance(key, str) else str(key)

    # -- Read operations --

    def size(self) -> int:
        return len(self._object.property_names())

    def is_empty(self) -> bool:
        return self.size() == 0

    def contains_key(self, key: Any) -> bool:
        return self._object.has_property(self._name(key))

    def contains_value(self, value: Any) -> bool:
        """Scan current properties for a value equal to ``value``."""
        for name in self._object.property_names():
            if self.get(name) == value:
                return True
        return False

    def get(self, key: Any, default: Any = None) -> Any:
        """Get the typed value for ``key``, or ``default`` if not set.

        Raises:
            CoercionError: The stored value cannot be converted.
        """
        raw = self._object.get_property(self._name(key))
        if raw is UNDEFINED:
            return default
        return self._coercion.read(raw)

    # -- Write operations --

    def put(self, key: Any, value: Any) -> Any:
        """Set ``key`` to ``value``. Returns the prior value or ``None``."""
        name = self._name(key)
        old_value = self.get(name)
        self._object.set_property(name, self._coercion.write(value))
        return old_value

    def remove(self, key: Any) -> Any:
        """Delete ``key``. Returns the prior value or ``None``."""
        name = self._name(key)
        old_value = self.get(name)
        self._object.delete_property(name)
        return old_value

    def put_all(self, other: Mapping[Any, Any]) -> None:
        """``put()`` every item of ``other`` in its iteration order.

        Not transactional: if one ``put()`` fails, earlier ones stay.
        """
        done = 0
        try:
            for key in other.keys():
                self.put(key, other[key])
                done += 1
        except Exception:
            _logger.debug("put_all stopped after %d of %d entries", done, len(other))
            raise

    def clear(self) -> None:
        """Delete every property present when the call starts.

        Properties added concurrently during the call may survive.
        """
        names = self._object.property_names()
        _logger.debug("Clearing %d properties", len(names))
        for name in names:
            self._object.delete_property(name)

    # -- Views --

    def key_set(self) -> set[str]:
        """A copy of the current property names.

        Changing the returned set does not touch the live object, and
        the set does not see later changes.
        """
        return set(self._object.property_names())

    def keys(self) -> set[str]:  # type: ignore[override]
        return self.key_set()

    def values(self) -> ValuesView:  # type: ignore[override]
        return ValuesView(self)

    def entry_set(self) -> EntrySet:
        return EntrySet(self)

    def items(self) -> EntrySet:  # type: ignore[override]
        return self.entry_set()

    # -- MutableMapping protocol --

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)

    def __getitem__(self, key: str) -> Any:
        raw = self._object.get_property(self._name(key))
        if raw is UNDEFINED:
            raise KeyError(key)
        return self._coercion.read(raw)

    def __setitem__(self, key: str, value: Any) -> None:
        self._object.set_property(self._name(key), self._coercion.write(value))

    def __delitem__(self, key: str) -> None:
        name = self._name(key)
        if not self._object.has_property(name):
            raise KeyError(key)
        self._object.delete_property(name)

    def __iter__(self) -> Iterator[str]:
        return (entry.key for entry in EntryCursor(self))

    def __len__(self) -> int:
        return self.size()

    def update(self, other: Any = (), /, **kwargs: Any) -> None:
        if isinstance(other, Mapping):
            self.put_all(other)
        elif hasattr(other, "keys"):
            for key in other.keys():
                self.put(key, other[key])
        else:
            for key, value in other:
                self.put(key, value)
        if kwargs:
            self.put_all(kwargs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"
