"""
Integer and float coercion.

Three strictness tiers per target type:

* ``as_int`` / ``as_float`` raise :class:`InvalidArgumentError`;
* ``try_int`` / ``try_float`` return None;
* ``to_int`` / ``to_float`` fall back to zero.

Numeric strings follow the usual decimal notation (optional sign, optional
fraction, optional exponent, surrounding whitespace allowed). Values are
truncated toward zero when an integer is requested.
"""

from __future__ import annotations

import logging
import math
import re
from decimal import Decimal, InvalidOperation
from numbers import Real
from typing import Any, Optional, TypeVar, Union

from .enums import enum_to_int, is_enum_member
from .exceptions import InvalidArgumentError
from .strings import try_string

logger = logging.getLogger(__name__)

Number = TypeVar("Number", int, float)

_NUMERIC_PATTERN = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$")
_FULL_TURN = 360.0


def is_numeric(value: Any) -> bool:
    """Return True for real numbers (bool excluded) and numeric strings."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (Real, Decimal)):
        return True
    if isinstance(value, (str, bytes, bytearray)):
        text = value if isinstance(value, str) else bytes(value).decode("utf-8", errors="ignore")
        return bool(_NUMERIC_PATTERN.match(text))
    return False


def _parse_int(text: str) -> Optional[int]:
    if not _NUMERIC_PATTERN.match(text):
        return None
    stripped = text.strip()
    try:
        return int(stripped)
    except ValueError:
        pass
    try:
        parsed = Decimal(stripped)
    except InvalidOperation:
        logger.debug("Rejected numeric text %r", text)
        return None
    return int(parsed)


def _parse_float(text: str) -> Optional[float]:
    if not _NUMERIC_PATTERN.match(text):
        return None
    return float(text.strip())


def _truncate(value: Union[Real, Decimal]) -> Optional[int]:
    if isinstance(value, Decimal):
        return int(value) if value.is_finite() else None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return int(value)


def try_int(value: Any) -> Optional[int]:
    """
    Coerce value to int or return None.

    Booleans become 1/0, enum members reduce to their numeric payload or
    ordinal index, and stringable objects are stringified before parsing.

    Examples:
        >>> try_int("3.9")
        3
        >>> try_int("abc") is None
        True
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return int(value)
    if is_enum_member(value):
        return enum_to_int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, (Real, Decimal)):
        return _truncate(value)
    text = try_string(value)
    if text is None:
        return None
    return _parse_int(text)


def as_int(value: Any) -> int:
    result = try_int(value)
    if result is None:
        raise InvalidArgumentError.for_target(int, value)
    return result


def to_int(value: Any) -> int:
    result = try_int(value)
    return result if result is not None else 0


def try_float(value: Any) -> Optional[float]:
    """
    Coerce value to float or return None.

    Enum members are only accepted when they are numbers themselves
    (``IntEnum``); ordinal and string-backed members are rejected.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return float(value)
    if is_enum_member(value) and not isinstance(value, (int, float)):
        return None
    if isinstance(value, (Real, Decimal)):
        try:
            return float(value)
        except OverflowError:
            logger.debug("Numeric value %r overflows float", value)
            return None
    text = try_string(value)
    if text is None:
        return None
    return _parse_float(text)


def as_float(value: Any) -> float:
    result = try_float(value)
    if result is None:
        raise InvalidArgumentError.for_target(float, value)
    return result


def to_float(value: Any) -> float:
    result = try_float(value)
    return result if result is not None else 0.0


def _clamp(value: Number, min_value: Optional[Number], max_value: Optional[Number]) -> Number:
    # max first, so min wins when the bounds are inverted
    if max_value is not None:
        value = min(value, max_value)
    if min_value is not None:
        value = max(value, min_value)
    return value


def clamp_int(value: Any, min_value: Optional[int] = None, max_value: Optional[int] = None) -> Optional[int]:
    """Coerce with :func:`as_int` then clamp; None passes through."""
    if value is None:
        return None
    return _clamp(as_int(value), min_value, max_value)


def clamp_float(value: Any, min_value: Optional[float] = None, max_value: Optional[float] = None) -> Optional[float]:
    """Coerce with :func:`as_float` then clamp; None passes through."""
    if value is None:
        return None
    return _clamp(as_float(value), min_value, max_value)


def clamp_degrees(value: Any, min_value: Optional[float] = None, max_value: Optional[float] = None) -> Optional[float]:
    """
    Normalize an angle into ``[0, 360)`` and optionally clamp it.

    Examples:
        >>> clamp_degrees(-10)
        350.0
        >>> clamp_degrees(370)
        10.0
        >>> clamp_degrees(359.5)
        359.5
    """
    if value is None:
        return None
    degrees = as_float(value)
    if not math.isfinite(degrees):
        raise InvalidArgumentError(f"Angle must be finite, got {degrees!r}", target="degrees", value=value)

    normalized = degrees % _FULL_TURN
    # tiny negative inputs can round up to a full turn
    if normalized >= _FULL_TURN:
        normalized -= _FULL_TURN
    return _clamp(normalized, min_value, max_value)


__all__ = [
    "as_float",
    "as_int",
    "clamp_degrees",
    "clamp_float",
    "clamp_int",
    "is_numeric",
    "to_float",
    "to_int",
    "try_float",
    "try_int",
]
