"""Abstract live object interface."""

from abc import ABC, abstractmethod
from typing import Any


class _Undefined:
    """Marker for a property that is not set."""

    _instance = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Any = _Undefined()


class LiveObject(ABC):
    """A mutable, string-keyed property container.

    The object is the only source of truth: anything holding a
    reference may change it at any time. Values are opaque here;
    typing is handled at higher layers (e.g., LiveMapView).
    """

    @abstractmethod
    def property_names(self) -> list[str]:
        """All property names currently set, in the object's own order.

        The order must be repeatable for back-to-back calls with no
        intervening mutation.
        """

    @abstractmethod
    def has_property(self, name: str) -> bool:
        """Check if a property is set."""

    @abstractmethod
    def get_property(self, name: str) -> Any:
        """Get a property value, or ``UNDEFINED`` if not set."""

    @abstractmethod
    def set_property(self, name: str, value: Any) -> None:
        """Set a property value."""

    @abstractmethod
    def delete_property(self, name: str) -> None:
        """Delete a property if present."""
