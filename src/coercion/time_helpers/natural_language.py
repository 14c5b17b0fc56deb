"""
Permissive date/time parsing.

Understands, in order:

* ``@<unix timestamp>``;
* the keywords ``now``, ``today``, ``midnight``, ``noon``, ``tomorrow`` and
  ``yesterday``, optionally followed by a time (``tomorrow 10:30``) or a
  relative offset (``today +2 hours``);
* ``next``/``last``/``this`` followed by a weekday or a duration unit
  (``next friday``, ``last month``);
* relative offsets from now (``+1 day``, ``3 weeks ago``, ``in 2 hours``);
* everything :func:`dateutil.parser.parse` accepts (ISO-8601, calendar
  dates, RFC 2822, ...), with missing fields taken from today at midnight.

Naive results are localized into the zone of the reference time.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Callable, Dict, Optional

from dateutil import parser as dateutil_parser
from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta

from ..config import get_settings
from . import clock
from .durations import UNIT_ALIASES, parse_relative_duration

logger = logging.getLogger(__name__)

EMPTY_DATE_ERROR = "Empty date/time string"
INVALID_DATE_ERROR_TEMPLATE = "Unable to parse date/time '{}'"

_WEEKDAYS = {
    "monday": MO,
    "mon": MO,
    "tuesday": TU,
    "tue": TU,
    "wednesday": WE,
    "wed": WE,
    "thursday": TH,
    "thu": TH,
    "friday": FR,
    "fri": FR,
    "saturday": SA,
    "sat": SA,
    "sunday": SU,
    "sun": SU,
}

_KEYWORDS: Dict[str, Callable[[datetime], datetime]] = {
    "now": lambda now: now,
    "today": clock.start_of_day,
    "midnight": clock.start_of_day,
    "noon": lambda now: clock.shift(clock.start_of_day(now), relativedelta(hours=12)),
    "tomorrow": lambda now: clock.shift(clock.start_of_day(now), relativedelta(days=1)),
    "yesterday": lambda now: clock.shift(clock.start_of_day(now), relativedelta(days=-1)),
}

_TIMESTAMP_PATTERN = re.compile(r"^@([+-]?\d+(?:\.\d+)?)$")
_ANCHOR_PATTERN = re.compile(r"^(next|last|this)\s+([a-z]+)$")


def _shift(base: datetime, delta: relativedelta, text: str) -> datetime:
    try:
        return clock.shift(base, delta)
    except (OverflowError, ValueError) as exc:
        raise ValueError(INVALID_DATE_ERROR_TEMPLATE.format(text)) from exc


def _parse_timestamp(text: str, now: datetime) -> Optional[datetime]:
    match = _TIMESTAMP_PATTERN.match(text)
    if match is None:
        return None
    try:
        moment = clock.from_timestamp(float(match.group(1)), now.tzinfo)
    except (OverflowError, OSError, ValueError) as exc:
        raise ValueError(INVALID_DATE_ERROR_TEMPLATE.format(text)) from exc
    return moment.replace(tzinfo=None) if now.tzinfo is None else moment


def _parse_keyword(lowered: str, original: str, now: datetime) -> Optional[datetime]:
    keyword, _, rest = lowered.partition(" ")
    builder = _KEYWORDS.get(keyword)
    if builder is None:
        return None

    base = builder(now)
    if not rest:
        return base
    try:
        offset = parse_relative_duration(rest)
    except ValueError:
        offset = None
    if offset is not None:
        return _shift(base, offset, original)
    remainder = original.split(" ", 1)[1]
    return _parse_with_dateutil(remainder, base)


def _parse_anchor(lowered: str, now: datetime) -> Optional[datetime]:
    match = _ANCHOR_PATTERN.match(lowered)
    if match is None:
        return None
    direction, word = match.groups()

    weekday = _WEEKDAYS.get(word)
    if weekday is not None:
        midnight = clock.start_of_day(now)
        if direction == "next":
            delta = relativedelta(days=1, weekday=weekday(+1))
        elif direction == "last":
            delta = relativedelta(days=-1, weekday=weekday(-1))
        else:
            delta = relativedelta(weekday=weekday(+1))
        return _shift(midnight, delta, lowered)

    unit = UNIT_ALIASES.get(word)
    if unit is None:
        return None
    if direction == "this":
        return now
    field, multiplier = unit
    step = multiplier if direction == "next" else -multiplier
    return _shift(now, relativedelta(**{field: step}), lowered)


def _parse_with_dateutil(text: str, reference: datetime) -> datetime:
    settings = get_settings()
    default = reference.replace(tzinfo=None, hour=0, minute=0, second=0, microsecond=0)
    try:
        parsed = dateutil_parser.parse(
            text,
            default=default,
            dayfirst=settings.dayfirst,
            yearfirst=settings.yearfirst,
        )
    except (ValueError, OverflowError) as exc:
        raise ValueError(INVALID_DATE_ERROR_TEMPLATE.format(text)) from exc
    return clock.localize(parsed, reference.tzinfo)


def parse_date_time(text: str, now: Optional[datetime] = None) -> datetime:
    """
    Parse a calendar, ISO-8601 or relative date/time expression.

    Args:
        text: Expression to parse
        now: Reference time for relative expressions (current time by default)

    Returns:
        Parsed datetime, aware whenever ``now`` is aware

    Raises:
        ValueError: If the expression cannot be parsed

    Examples:
        >>> ref = datetime(2024, 3, 15, 9, 30)
        >>> parse_date_time("tomorrow", ref)
        datetime.datetime(2024, 3, 16, 0, 0)
        >>> parse_date_time("2 hours ago", ref)
        datetime.datetime(2024, 3, 15, 7, 30)
    """
    if now is None:
        now = clock.get_current_time()

    cleaned = " ".join(text.split())
    if not cleaned:
        raise ValueError(EMPTY_DATE_ERROR)
    lowered = cleaned.lower()

    for attempt in (
        lambda: _parse_timestamp(lowered, now),
        lambda: _parse_keyword(lowered, cleaned, now),
        lambda: _parse_anchor(lowered, now),
    ):
        result = attempt()
        if result is not None:
            return result

    try:
        offset = parse_relative_duration(lowered)
    except ValueError:
        logger.debug("%r is not a relative offset; trying calendar formats", cleaned)
        return _parse_with_dateutil(cleaned, now)
    return _shift(now, offset, cleaned)


__all__ = ["parse_date_time"]
