"""livemap error types."""

from typing import Any


class LiveMapError(Exception):
    """Base class for livemap errors."""


class ElementNotFound(LiveMapError, LookupError):
    """Raised when an entry cursor has no element to produce.

    Either the cursor was already exhausted, or the key it remembered
    was deleted from the live object since the last step.
    """


class CoercionError(LiveMapError, TypeError):
    """Raised when a value cannot be converted to or from the view's type.

    Attributes:
        value: The value that failed to convert.
        target: Description of the type conversion that was attempted.
    """

    def __init__(self, value: Any, target: str, reason: str = "") -> None:
        self.value = value
        self.target = target
        message = f"Cannot coerce {type(value).__name__} {value!r} to {target}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidKey(LiveMapError, TypeError):
    """Raised when ``None`` is used where a property key is required."""
