"""Process-wide coercion settings loaded from the environment.

``COERCION_TIMEZONE``
    Zone used for "now" and for localizing naive parsed dates (default ``UTC``).
``COERCION_DAYFIRST`` / ``COERCION_YEARFIRST``
    Ambiguity hints forwarded to :func:`dateutil.parser.parse`.
``COERCION_LOG_LEVEL``
    Level applied by :func:`coercion.logging_config.setup_logging`.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

import pytz

from .errors import ConfigurationError
from .runtime import clear_default_values, env_bool, env_str

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}

_settings_lock = threading.Lock()
_SETTINGS: Optional["CoercionSettings"] = None


@dataclass(frozen=True)
class CoercionSettings:
    timezone: str = "UTC"
    dayfirst: bool = False
    yearfirst: bool = False
    log_level: str = "WARNING"

    def tzinfo(self):
        return pytz.timezone(self.timezone)


def _validated_timezone(name: str) -> str:
    try:
        pytz.timezone(name)
    except pytz.UnknownTimeZoneError as exc:
        raise ConfigurationError.invalid_value("COERCION_TIMEZONE", name, "Unknown timezone") from exc
    return name


def _validated_log_level(name: str) -> str:
    level = name.upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError.invalid_format("COERCION_LOG_LEVEL", name, ", ".join(sorted(_LOG_LEVELS)))
    return level


def load_settings() -> CoercionSettings:
    """Read settings from the environment without touching the cache."""
    defaults = CoercionSettings()
    return CoercionSettings(
        timezone=_validated_timezone(env_str("COERCION_TIMEZONE", defaults.timezone)),
        dayfirst=bool(env_bool("COERCION_DAYFIRST", defaults.dayfirst)),
        yearfirst=bool(env_bool("COERCION_YEARFIRST", defaults.yearfirst)),
        log_level=_validated_log_level(env_str("COERCION_LOG_LEVEL", defaults.log_level)),
    )


def get_settings() -> CoercionSettings:
    """Return the cached settings, loading them on first use."""
    global _SETTINGS
    with _settings_lock:
        if _SETTINGS is None:
            _SETTINGS = load_settings()
            logger.debug("Loaded coercion settings: %s", _SETTINGS)
        return _SETTINGS


def reset_settings() -> None:
    """Drop cached settings so the environment is read again."""
    global _SETTINGS
    with _settings_lock:
        _SETTINGS = None
        clear_default_values()


__all__ = ["CoercionSettings", "get_settings", "load_settings", "reset_settings"]
