"""Synchronous publish/subscribe event emitter."""

from .config import EmitterSettings, build_settings_from_dict, settings_from_env
from .emitter import EventEmitter, Listener
from .exceptions import EmitterError, InvalidArgument, ListenerFailure
from .logging import get_logger, log_event

__all__ = [
    "EventEmitter",
    "Listener",
    "EmitterSettings",
    "build_settings_from_dict",
    "settings_from_env",
    "EmitterError",
    "InvalidArgument",
    "ListenerFailure",
    "get_logger",
    "log_event",
]
