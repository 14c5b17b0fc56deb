"""Boolean coercion.

``to_bool``/``try_bool`` are permissive: any string that is not one of the
recognised false words counts as True. ``parse_bool`` is strict and reports
unrecognised words as unknown (``None``).
"""

from __future__ import annotations

from decimal import Decimal
from numbers import Real
from typing import Any, Optional

_FALSE_WORDS = frozenset({"", "0", "false", "no", "off"})
_TRUTHY_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSY_WORDS = frozenset({"0", "false", "no", "off"})


def _normalized_text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value.strip().lower()
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="ignore").strip().lower()
    return None


def to_bool(value: Any) -> bool:
    """Coerce value to bool; never raises."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    text = _normalized_text(value)
    if text is not None:
        return text not in _FALSE_WORDS
    return bool(value)


def try_bool(value: Any) -> Optional[bool]:
    """Like :func:`to_bool` but missing values (None, empty string) give None."""
    if value is None:
        return None
    text = _normalized_text(value)
    if text == "":
        return None
    return to_bool(value)


def parse_bool(value: Any) -> Optional[bool]:
    """
    Strictly interpret common truthy/falsy words.

    Examples:
        >>> parse_bool("On")
        True
        >>> parse_bool("off")
        False
        >>> parse_bool("banana") is None
        True
    """
    if isinstance(value, bool):
        return value
    text = _normalized_text(value)
    if text is not None:
        if text in _TRUTHY_WORDS:
            return True
        if text in _FALSY_WORDS:
            return False
        return None
    if isinstance(value, (Real, Decimal)):
        return value != 0
    return None


__all__ = ["parse_bool", "to_bool", "try_bool"]
