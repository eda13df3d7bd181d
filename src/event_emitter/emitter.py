"""Synchronous in-process event emitter."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

from .config import EmitterSettings
from .exceptions import InvalidArgument, ListenerFailure, safe_repr
from .logging import get_logger, log_event

Listener = Callable[..., Any]


def _index_of(listeners: List[Listener], listener: Listener) -> int:
    for index, candidate in enumerate(listeners):
        if candidate is listener:
            return index
    return -1


class EventEmitter:
    """Maps event names to ordered listeners and dispatches to them.

    Listeners are matched by identity: registering the same object twice for
    one event is a no-op, and ``unregister`` only removes that exact object.
    Events whose last listener is removed disappear from the mapping.
    """

    def __init__(self, settings: EmitterSettings | None = None) -> None:
        self.settings = settings or EmitterSettings()
        self._events: Dict[str, List[Listener]] = {}
        self._logger = get_logger(self.settings.logger_name, level=self.settings.log_level)

    def register(self, event_name: str, listener: Listener) -> "EventEmitter":
        """Bind ``listener`` to ``event_name`` and return the emitter."""

        if not callable(listener):
            raise InvalidArgument(f"Listener must be callable, got {type(listener).__name__}")

        listeners = self._events.setdefault(event_name, [])
        if _index_of(listeners, listener) == -1:
            listeners.append(listener)
        return self

    def unregister(self, event_name: str, listener: Listener) -> "EventEmitter":
        """Unbind ``listener`` from ``event_name``; unknown pairs are ignored."""

        listeners = self._events.get(event_name)
        if not listeners:
            return self

        index = _index_of(listeners, listener)
        if index != -1:
            del listeners[index]
            if not listeners:
                del self._events[event_name]
        return self

    def dispatch(self, event_name: str, *args: Any) -> bool:
        """Call every listener of ``event_name`` with ``args``.

        Iterates over the listeners registered when the call starts, so
        listeners added or removed by a running listener only take effect on
        the next dispatch. A listener that raises is logged and skipped.
        Returns ``False`` when the event has no listeners.
        """

        listeners = self._events.get(event_name)
        if not listeners:
            return False

        for listener in tuple(listeners):
            try:
                listener(*args)
            except Exception as exc:
                self._report_failure(ListenerFailure(event_name, listener, exc))
        return True

    def clear(self, event_name: str | None = None) -> "EventEmitter":
        """Drop the listeners of ``event_name``, or of every event when omitted."""

        if event_name is None:
            dropped = len(self._events)
            self._events.clear()
            log_event(self._logger, "emitter_cleared", {"events": dropped})
        else:
            self._events.pop(event_name, None)
        return self

    on = register
    off = unregister
    emit = dispatch
    remove_all_listeners = clear

    def listeners(self, event_name: str) -> Tuple[Listener, ...]:
        return tuple(self._events.get(event_name, ()))

    def listener_count(self, event_name: str) -> int:
        return len(self._events.get(event_name, ()))

    def event_names(self) -> Tuple[str, ...]:
        return tuple(self._events)

    @property
    def events(self) -> Dict[str, Tuple[Listener, ...]]:
        """Copy of the event mapping for inspection."""

        return {name: tuple(listeners) for name, listeners in self._events.items()}

    def _report_failure(self, failure: ListenerFailure) -> None:
        self._logger.error(
            str(failure),
            exc_info=failure.error if self.settings.include_traceback else None,
            extra={
                "event": failure.event_name,
                "listener": failure.listener_name,
                "error": safe_repr(failure.error),
            },
        )

    def __contains__(self, event_name: object) -> bool:
        return event_name in self._events

    def __len__(self) -> int:
        return len(self._events)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"EventEmitter(events={len(self._events)})"


__all__ = ["EventEmitter", "Listener"]
