"""Custom exceptions raised by the event emitter."""

from __future__ import annotations

from typing import Any, Callable


def safe_repr(value: object) -> str:
    """Return ``repr(value)``, or the default object repr when that raises."""

    try:
        return repr(value)
    except Exception:
        return object.__repr__(value)


class EmitterError(RuntimeError):
    """Base error for all emitter related exceptions."""


class InvalidArgument(EmitterError, TypeError):
    """Raised when a listener passed to ``register`` is not callable."""


class ListenerFailure(EmitterError):
    """Wraps an exception raised by a listener while an event was dispatched.

    Built and logged inside :meth:`EventEmitter.dispatch`; never raised to the
    caller of ``dispatch``.
    """

    def __init__(self, event_name: str, listener: Callable[..., Any], error: Exception) -> None:
        self.event_name = event_name
        self.listener = listener
        self.error = error
        super().__init__(f"Error in listener for event '{event_name}': {safe_repr(error)}")

    @property
    def listener_name(self) -> str:
        name = getattr(self.listener, "__qualname__", None) or getattr(self.listener, "__name__", None)
        if name is None:
            return safe_repr(self.listener)
        module = getattr(self.listener, "__module__", None)
        return f"{module}.{name}" if module else name
