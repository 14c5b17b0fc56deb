"""Date/time coercion."""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from numbers import Real
from typing import Any, Optional, Union

from dateutil.relativedelta import relativedelta

from ..exceptions import InvalidArgumentError
from ..numeric import is_numeric
from ..strings import try_string
from . import clock
from .natural_language import parse_date_time

logger = logging.getLogger(__name__)

DURATION_TYPES = (timedelta, relativedelta)
Duration = Union[relativedelta, timedelta]


def _from_timestamp(value: Any) -> Optional[datetime]:
    try:
        return clock.from_timestamp(float(value))
    except (OverflowError, OSError, ValueError) as exc:
        logger.debug("Timestamp %r out of range: %s", value, exc)
        return None


def try_date_time(value: Any) -> Optional[datetime]:
    """
    Coerce value to a datetime, returning None when not possible.

    * datetimes pass through unchanged (zone and subclass preserved);
    * dates become midnight in the configured zone;
    * durations are added to the current time;
    * numbers and numeric strings are Unix timestamps in the configured zone;
    * stringable values go through :func:`parse_date_time`.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return clock.localize(datetime.combine(value, time()), clock.get_timezone())
    if isinstance(value, DURATION_TYPES):
        try:
            return clock.shift(clock.get_current_time(), value)
        except (OverflowError, ValueError) as exc:
            logger.debug("Duration %r moves past the supported date range: %s", value, exc)
            return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (Real, Decimal)):
        return _from_timestamp(value)

    text = try_string(value)
    if text is None:
        return None
    if is_numeric(text):
        return _from_timestamp(text)
    try:
        return parse_date_time(text, clock.get_current_time())
    except ValueError as exc:
        logger.debug("Rejected date/time %r: %s", text, exc)
        return None


def as_date_time(value: Any) -> datetime:
    result = try_date_time(value)
    if result is None:
        if isinstance(value, str):
            raise InvalidArgumentError.unparsable(datetime, value)
        raise InvalidArgumentError.for_target(datetime, value)
    return result


def to_date_time(value: Any) -> datetime:
    """Best-effort datetime that falls back to the current time."""
    result = try_date_time(value)
    return result if result is not None else clock.get_current_time()


__all__ = ["DURATION_TYPES", "Duration", "as_date_time", "to_date_time", "try_date_time"]
