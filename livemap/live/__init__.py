"""Live object backends."""

from .attributes import Attributes
from .base import UNDEFINED, LiveObject
from .memory import Memory
from .namespaced import Namespaced

__all__ = ["Attributes", "LiveObject", "Memory", "Namespaced", "UNDEFINED"]
