"""String coercion."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from decimal import Decimal
from numbers import Real
from typing import Any, Optional

from .enums import enum_to_string, is_enum_member
from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

_TEXT_TYPES = (str, bytes, bytearray)


def _has_custom_str(value: Any) -> bool:
    return type(value).__str__ is not object.__str__


def is_stringable(value: Any) -> bool:
    """Return True for strings, bytes, real numbers, enum members and objects defining ``__str__``."""
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, _TEXT_TYPES) or isinstance(value, (Real, Decimal)):
        return True
    if is_enum_member(value):
        return True
    if isinstance(value, type):
        return False
    return _has_custom_str(value)


def try_string(value: Any, non_empty: bool = False) -> Optional[str]:
    """
    Coerce value to string, returning None when it is not stringable.

    Args:
        value: Value to convert
        non_empty: Treat an empty result as unconvertible

    Returns:
        String value or None
    """
    if not is_stringable(value):
        return None

    if isinstance(value, str):
        result = value
    elif isinstance(value, (bytes, bytearray)):
        result = bytes(value).decode("utf-8", errors="ignore")
    elif is_enum_member(value):
        result = enum_to_string(value)
    else:
        try:
            result = str(value)
        except Exception as exc:
            logger.debug("str() failed for %s: %s", type(value).__name__, exc)
            return None

    if non_empty and result == "":
        return None
    return result


def as_string(value: Any) -> str:
    """Coerce value to string, raising InvalidArgumentError when it is not stringable."""
    result = try_string(value)
    if result is None:
        raise InvalidArgumentError.for_target(str, value)
    return result


def to_string(value: Any) -> str:
    """
    Best-effort string conversion that never raises.

    Booleans become ``"true"``/``"false"``. Collections are flattened: each
    element is converted recursively and the non-empty parts are joined with a
    single space. Anything else that is not stringable becomes ``""``.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_stringable(value):
        return try_string(value) or ""
    if isinstance(value, Mapping):
        return _join_parts(value.values())
    if isinstance(value, Iterable):
        return _join_parts(value)
    logger.debug("Value of type %s is not stringable", type(value).__name__)
    return ""


def _join_parts(items: Iterable[Any]) -> str:
    parts = (to_string(item) for item in items)
    return " ".join(part for part in parts if part)


__all__ = ["as_string", "is_stringable", "to_string", "try_string"]
