"""Namespaced: prefix-scoped view over another live object."""

from typing import Any

from .base import UNDEFINED, LiveObject


class Namespaced(LiveObject):
    """A namespaced view over a LiveObject.

    Properties are stored on the parent as ``namespace/name``. Nested
    namespaces are supported by wrapping another Namespaced instance.
    Only direct children are enumerated.

    Args:
        parent: Any LiveObject (including another Namespaced).
        namespace: The namespace name (must not contain ``/``).
    """

    def __init__(self, parent: LiveObject, namespace: str) -> None:
        if "/" in namespace:
            raise ValueError("Namespace names cannot contain '/'")
        if not isinstance(parent, LiveObject):
            raise TypeError(
                f"Namespaced requires a LiveObject, "
                f"not {type(parent).__name__}"
            )

        if isinstance(parent, Namespaced):
            self._parent = parent._parent
            self.namespace = f"{parent.namespace}/{namespace}"
        else:
            self._parent = parent
            self.namespace = namespace

    def _prefixed(self, name: str) -> str:
        return f"{self.namespace}/{name}"

    def property_names(self) -> list[str]:
        prefix = f"{self.namespace}/"
        result: list[str] = []
        for name in self._parent.property_names():
            if name.startswith(prefix):
                remainder = name[len(prefix):]
                if remainder and "/" not in remainder:
                    result.append(remainder)
        return result

    def has_property(self, name: str) -> bool:
        if "/" in name:
            return False
        return self._parent.has_property(self._prefixed(name))

    def get_property(self, name: str) -> Any:
        if "/" in name:
            return UNDEFINED
        return self._parent.get_property(self._prefixed(name))

    def set_property(self, name: str, value: Any) -> None:
        if "/" in name:
            raise ValueError("Property names cannot contain '/'")
        self._parent.set_property(self._prefixed(name), value)

    def delete_property(self, name: str) -> None:
        if "/" not in name:
            self._parent.delete_property(self._prefixed(name))
