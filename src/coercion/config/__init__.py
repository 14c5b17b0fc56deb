"""Shared configuration helpers."""

from .errors import ConfigurationError
from .runtime import env_bool, env_int, env_str
from .settings import CoercionSettings, get_settings, load_settings, reset_settings

__all__ = [
    "CoercionSettings",
    "ConfigurationError",
    "env_bool",
    "env_int",
    "env_str",
    "get_settings",
    "load_settings",
    "reset_settings",
]
