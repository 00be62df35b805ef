"""LiveMapView factory function."""

from typing import Any, Literal, Mapping

from .coercion import Coercion
from .live.attributes import Attributes
from .live.base import LiveObject
from .live.memory import Memory
from .live.namespaced import Namespaced
from .view import LiveMapView


def live_map(
    source: Mapping[Any, Any] | None = None,
    *,
    value_type: Coercion | type | None = None,
    backend: Literal["memory", "attributes"] = "memory",
    target: Any = None,
    namespace: str | None = None,
) -> LiveMapView:
    """Create a LiveMapView with sensible defaults.

    Args:
        source: Initial items, written through the view (so values
            are converted by ``value_type``).
        value_type: A type, a ``Coercion``, or ``None`` (default) for
            no conversion.
        backend: ``"memory"`` (default) for a fresh ``Memory`` object,
            or ``"attributes"`` to map the attributes of ``target``.
        target: Required when ``backend="attributes"``.
        namespace: Scope the view to ``namespace/``-prefixed
            properties of the backend.

    Returns:
        A ``LiveMapView`` instance.
    """
    live_object: LiveObject
    if backend == "memory":
        live_object = Memory()
    elif backend == "attributes":
        if target is None:
            raise ValueError("target is required when backend='attributes'")
        live_object = Attributes(target)
    else:
        raise ValueError(f"Unknown backend: {backend!r}")

    if namespace is not None:
        live_object = Namespaced(live_object, namespace)

    view = LiveMapView(live_object, value_type)
    if source:
        view.put_all(source)
    return view
