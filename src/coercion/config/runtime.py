"""Runtime helpers for working with environment-backed configuration.

Variables missing from ``os.environ`` fall back to ``KEY=value`` lines read
from ``./.env`` and ``~/.env`` (the first file to define a key wins).
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Optional

from ..booleans import parse_bool
from .errors import ConfigurationError

_DOTENV_CANDIDATES = (Path(".env"), Path.home() / ".env")
_DOTENV_LINE = re.compile(r"^(?:export\s+)?([A-Za-z_][A-Za-z0-9_.]*)\s*=\s*(.*)$")

_DEFAULT_VALUES: dict[str, str] | None = None


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        return value[1:-1]
    return value


def _read_dotenv(path: Path) -> dict[str, str]:
    """Parse one .env file; a missing file gives no values."""
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        return {}
    except OSError as exc:
        raise ConfigurationError.load_failed("configuration", str(path)) from exc

    values: dict[str, str] = {}
    for line in lines:
        stripped = line.strip()
        if stripped.startswith("#"):
            continue
        match = _DOTENV_LINE.match(stripped)
        if match:
            values[match.group(1)] = _unquote(match.group(2).strip())
    return values


def _load_default_values() -> dict[str, str]:
    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is not None:
        return _DEFAULT_VALUES

    defaults: dict[str, str] = {}
    for path in _DOTENV_CANDIDATES:
        for key, value in _read_dotenv(path).items():
            defaults.setdefault(key, value)

    _DEFAULT_VALUES = defaults
    return defaults


def clear_default_values() -> None:
    """Forget cached .env values so the next lookup re-reads the files."""
    global _DEFAULT_VALUES
    _DEFAULT_VALUES = None


def _default_value(name: str) -> Optional[str]:
    return _load_default_values().get(name)


def _normalize(value: str | None, *, strip: bool) -> str | None:
    if value is None:
        return None
    return value.strip() if strip else value


def env_str(
    name: str,
    or_value: str | None = None,
    *,
    required: bool = False,
    strip: bool = True,
    allow_blank: bool = False,
) -> str | None:
    """Fetch an environment variable as a string with validation."""

    value = _normalize(os.getenv(name), strip=strip)

    if value is None or (not allow_blank and value == ""):
        configured_default = _default_value(name)
        if configured_default is not None:
            value = _normalize(configured_default, strip=strip)

    if value is None or (not allow_blank and value == ""):
        if required:
            raise ConfigurationError.missing_value(name, "required environment variable is not set")
        return or_value
    return value


def env_int(name: str, or_value: int | None = None, *, required: bool = False) -> int | None:
    """Fetch an environment variable and coerce it to ``int``."""

    raw = env_str(name, strip=True, allow_blank=False)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError.missing_value(name, "required environment variable is not set")
        return or_value
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Environment variable {name!r} must be an integer (got {raw!r})") from exc


def env_bool(name: str, or_value: bool | None = None, *, required: bool = False) -> bool | None:
    """Fetch an environment variable and coerce it to ``bool`` (words as in :func:`coercion.parse_bool`)."""

    raw = env_str(name, strip=True, allow_blank=False)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError.missing_value(name, "required environment variable is not set")
        return or_value

    parsed = parse_bool(raw)
    if parsed is not None:
        return parsed
    raise ConfigurationError(f"Environment variable {name!r} must be a boolean (got {raw!r})")


__all__ = ["clear_default_values", "env_bool", "env_int", "env_str"]
