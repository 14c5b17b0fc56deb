"""
Duration coercion.

Integers are ambiguous: a small number is a count of seconds while a large
one is a Unix timestamp. Anything below one tenth of the current timestamp
(roughly 5.5 years' worth of seconds today) is read as seconds; larger values
are read as a moment and turned into the distance between that moment and now.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime
from decimal import Decimal
from numbers import Real
from typing import Any, Optional

from dateutil.relativedelta import relativedelta

from ..exceptions import InvalidArgumentError
from ..numeric import is_numeric
from ..strings import try_string
from . import clock
from .date_time import DURATION_TYPES, Duration, try_date_time
from .durations import parse_iso_duration, parse_relative_duration

logger = logging.getLogger(__name__)

TIMESTAMP_THRESHOLD_DIVISOR = 10


def diff_from_now(moment: datetime) -> relativedelta:
    """Return ``moment - now`` as a relativedelta (positive for future moments)."""
    return relativedelta(moment, clock.current_time_like(moment))


def _from_integer(value: int) -> Optional[relativedelta]:
    threshold = clock.get_current_time().timestamp() / TIMESTAMP_THRESHOLD_DIVISOR
    if value < threshold:
        return relativedelta(seconds=value)
    moment = try_date_time(value)
    if moment is None:
        return None
    return diff_from_now(moment)


def _from_text(text: str) -> Optional[relativedelta]:
    stripped = text.strip()
    if not stripped:
        return None
    if " " not in stripped:
        try:
            return parse_iso_duration(stripped)
        except ValueError:
            logger.debug("%r is not an ISO-8601 duration", stripped)
    try:
        return parse_relative_duration(stripped)
    except ValueError as exc:
        logger.debug("Rejected duration %r: %s", stripped, exc)
        return None


def try_date_interval(value: Any) -> Optional[Duration]:
    """
    Coerce value to a duration, returning None when not possible.

    Existing ``relativedelta``/``timedelta`` values pass through; datetimes
    and dates give their distance from now; numbers and numeric strings are
    seconds or timestamps (see module docstring); other strings are read as
    ISO-8601 when they contain no space, falling back to relative expressions
    like ``3 days``.
    """
    if value is None:
        return None
    if isinstance(value, DURATION_TYPES):
        return value
    if isinstance(value, datetime):
        return diff_from_now(value)
    if isinstance(value, date):
        moment = try_date_time(value)
        return diff_from_now(moment) if moment is not None else None
    if isinstance(value, bool):
        return None
    if isinstance(value, (Real, Decimal)) and not isinstance(value, int):
        try:
            seconds = float(value)
        except (OverflowError, ValueError):
            return None
        if not math.isfinite(seconds):
            return None
        value = int(seconds)
    if isinstance(value, int):
        return _from_integer(int(value))

    text = try_string(value)
    if text is None:
        return None
    if is_numeric(text):
        return try_date_interval(float(text))
    return _from_text(text)


def as_date_interval(value: Any) -> Duration:
    result = try_date_interval(value)
    if result is None:
        if isinstance(value, str):
            raise InvalidArgumentError.unparsable("date interval", value)
        raise InvalidArgumentError.for_target("date interval", value)
    return result


def to_date_interval(value: Any) -> Duration:
    """Best-effort duration that falls back to a zero duration."""
    result = try_date_interval(value)
    return result if result is not None else relativedelta()


__all__ = [
    "as_date_interval",
    "diff_from_now",
    "to_date_interval",
    "try_date_interval",
]
