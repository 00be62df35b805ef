"""Value, entry and cursor views over a LiveMapView.

None of these hold data. ``ValuesView`` and ``EntrySet`` re-read the
live object on every access. ``EntryCursor`` remembers a single key
and re-locates it in a freshly fetched name list at every step, so
deleting the entry it just produced (or any key behind it) never
makes it skip or repeat an entry.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence, Set
from typing import TYPE_CHECKING, Any

from .errors import ElementNotFound

if TYPE_CHECKING:
    from .view import LiveMapView

_logger = logging.getLogger(__name__)


class Entry:
    """A key of a LiveMapView, with live access to its value.

    Unpacks as ``(key, value)`` and compares equal to that pair.
    """

    __slots__ = ("_map", "_key")

    def __init__(self, live_map: LiveMapView, key: str) -> None:
        self._map = live_map
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def get_key(self) -> str:
        return self._key

    def get_value(self) -> Any:
        """Current value of the key (``None`` if it is no longer set)."""
        return self._map.get(self._key)

    def set_value(self, value: Any) -> Any:
        """Write through to the live object. Returns the prior value."""
        return self._map.put(self._key, value)

    @property
    def value(self) -> Any:
        return self.get_value()

    @value.setter
    def value(self, value: Any) -> None:
        self.set_value(value)

    def __iter__(self) -> Iterator[Any]:
        yield self._key
        yield self.get_value()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Entry):
            return tuple(self) == tuple(other)
        if isinstance(other, tuple):
            return tuple(self) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"Entry({self._key!r}, {self.get_value()!r})"


class EntryCursor(Iterator[Entry]):
    """Iterator over the entries of a LiveMapView.

    Holds the key to produce next, not a position. ``has_next()`` is
    true while that key is still set. ``remove()`` produces the next
    entry and deletes it; it does not delete the entry returned by a
    preceding ``next()``.
    """

    def __init__(self, live_map: LiveMapView) -> None:
        self._map = live_map
        names = live_map.live_object.property_names()
        self._current: str | None = names[0] if names else None

    @property
    def current(self) -> str | None:
        """The key the next call to ``next()`` will produce."""
        return self._current

    def has_next(self) -> bool:
        if self._current is None:
            return False
        return self._current in self._map.live_object.property_names()

    def next(self) -> Entry:
        """Produce the entry for the remembered key and advance.

        Raises:
            ElementNotFound: The cursor is exhausted, or its key was
                deleted since the last step.
        """
        if self._current is None:
            raise ElementNotFound("Entry cursor is exhausted")

        names = self._map.live_object.property_names()
        try:
            index = names.index(self._current)
        except ValueError:
            _logger.debug("Cursor key %r vanished; ending iteration", self._current)
            self._current = None
            raise ElementNotFound("Cursor key is no longer set") from None

        entry = Entry(self._map, names[index])
        self._current = names[index + 1] if index + 1 < len(names) else None
        return entry

    def remove(self) -> Entry:
        """Advance to the next entry and delete its key.

        Returns the removed entry (its value reads as ``None``).
        """
        entry = self.next()
        self._map.live_object.delete_property(entry.key)
        return entry

    def __next__(self) -> Entry:
        if not self.has_next():
            self._current = None
            raise StopIteration
        try:
            return self.next()
        except ElementNotFound:
            raise StopIteration from None


class EntrySet(Set):
    """Set-shaped view of a LiveMapView's entries.

    Size is the live property count. Membership accepts an ``Entry``
    or a ``(key, value)`` pair.
    """

    def __init__(self, live_map: LiveMapView) -> None:
        self._map = live_map

    def iterator(self) -> EntryCursor:
        return EntryCursor(self._map)

    def size(self) -> int:
        return self._map.size()

    def __iter__(self) -> EntryCursor:
        return self.iterator()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Entry):
            key, value = item.key, item.get_value()
        else:
            try:
                key, value = item  # type: ignore[misc]
            except (TypeError, ValueError):
                return False
        if key is None or not self._map.contains_key(key):
            return False
        return self._map.get(key) == value

    @classmethod
    def _from_iterable(cls, it: Iterable[Any]) -> set:
        return {tuple(e) for e in it}

    def __repr__(self) -> str:
        return f"EntrySet({[tuple(e) for e in self]!r})"


class ValuesView(Sequence):
    """Live, index-addressed view of a LiveMapView's values.

    Every access re-reads the property names, so the contents can shift
    between two accesses if the live object changes in between.
    Iterating while something else mutates the object gives no ordering
    or consistency guarantee.
    """

    def __init__(self, live_map: LiveMapView) -> None:
        self._map = live_map

    def __getitem__(self, index: int) -> Any:  # type: ignore[override]
        if isinstance(index, slice):
            raise TypeError("ValuesView does not support slicing")
        names = self._map.live_object.property_names()
        return self._map.get(names[index])

    def __len__(self) -> int:
        return self._map.size()

    def __contains__(self, value: object) -> bool:
        return self._map.contains_value(value)

    def __repr__(self) -> str:
        return f"ValuesView({list(self)!r})"
