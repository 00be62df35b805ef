"""Live object over a Python object's instance attributes."""

from typing import Any

from .base import UNDEFINED, LiveObject


class Attributes(LiveObject):
    """Expose the public instance attributes of ``target`` as properties.

    Reads and writes go straight to ``vars(target)``, so changes made
    by plain attribute access on the target are visible immediately.
    Names starting with ``_`` are treated as not set.
    """

    def __init__(self, target: Any) -> None:
        if not hasattr(target, "__dict__"):
            raise TypeError(
                f"Attributes requires an object with __dict__, "
                f"not {type(target).__name__}"
            )
        self._target = target

    @property
    def target(self) -> Any:
        return self._target

    @staticmethod
    def _visible(name: str) -> bool:
        return not name.startswith("_")

    def property_names(self) -> list[str]:
        return [name for name in list(vars(self._target)) if self._visible(name)]

    def has_property(self, name: str) -> bool:
        return self._visible(name) and name in vars(self._target)

    def get_property(self, name: str) -> Any:
        if not self._visible(name):
            return UNDEFINED
        return vars(self._target).get(name, UNDEFINED)

    def set_property(self, name: str, value: Any) -> None:
        if not self._visible(name):
            raise ValueError(f"Cannot set private attribute {name!r}")
        setattr(self._target, name, value)

    def delete_property(self, name: str) -> None:
        if self.has_property(name):
            delattr(self._target, name)
