"""In-memory live object."""

import threading
from typing import Any, Mapping

from .base import UNDEFINED, LiveObject


class Memory(LiveObject):
    """A memory-backed live object.

    Properties enumerate in insertion order. Overwriting a property
    keeps its position; deleting and re-adding moves it to the end.

    Args:
        initial: Optional mapping whose items become the initial
            properties (keys are stringified).
    """

    def __init__(self, initial: Mapping[Any, Any] | None = None) -> None:
        self.properties: dict[str, Any] = {}
        self._lock = threading.Lock()
        if initial is not None:
            for key, value in initial.items():
                self.set_property(str(key), value)

    def property_names(self) -> list[str]:
        with self._lock:
            return list(self.properties)

    def has_property(self, name: str) -> bool:
        return name in self.properties

    def get_property(self, name: str) -> Any:
        return self.properties.get(name, UNDEFINED)

    def set_property(self, name: str, value: Any) -> None:
        if not isinstance(name, str):
            raise TypeError(f"Expected str name, got {type(name).__name__}")
        with self._lock:
            self.properties[name] = value

    def delete_property(self, name: str) -> None:
        with self._lock:
            self.properties.pop(name, None)

    def __repr__(self) -> str:
        return f"Memory({self.properties!r})"
