"""Configuration model for event emitters."""
from __future__ import annotations

import os
from typing import Any, Dict, Mapping

from pydantic import BaseModel, Field, field_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUTHY = {"1", "true", "yes", "on"}


class EmitterSettings(BaseModel):
    """Settings controlling how an emitter reports listener failures."""

    logger_name: str = Field(
        default="emitter",
        min_length=1,
        description="Child logger name under the ``event_emitter`` logger",
    )
    log_level: str | None = Field(
        default=None,
        description=(
            "Explicit logger level; falls back to $LOG_LEVEL when unset. "
            "Applies to the shared logger, so emitters with the same logger_name share it"
        ),
    )
    include_traceback: bool = Field(
        default=True,
        description="Attach the listener traceback to failure records.",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


def build_settings_from_dict(raw: Mapping[str, Any]) -> EmitterSettings:
    """Utility helper to build :class:`EmitterSettings` from a plain mapping."""

    return EmitterSettings.model_validate(dict(raw))


def settings_from_env(environ: Mapping[str, str] | None = None) -> EmitterSettings:
    """Build settings from ``EMITTER_*`` environment variables."""

    env = os.environ if environ is None else environ
    raw: Dict[str, Any] = {}
    if "EMITTER_LOGGER_NAME" in env:
        raw["logger_name"] = env["EMITTER_LOGGER_NAME"]
    if "EMITTER_LOG_LEVEL" in env:
        raw["log_level"] = env["EMITTER_LOG_LEVEL"]
    if "EMITTER_INCLUDE_TRACEBACK" in env:
        raw["include_traceback"] = env["EMITTER_INCLUDE_TRACEBACK"].strip().lower() in _TRUTHY
    return build_settings_from_dict(raw)


__all__ = [
    "EmitterSettings",
    "build_settings_from_dict",
    "settings_from_env",
]
