"""Timezone and clock helper functions."""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo

from ..config import get_settings

logger = logging.getLogger(__name__)


def get_timezone() -> tzinfo:
    """Return the configured timezone (``COERCION_TIMEZONE``, UTC by default)."""
    return get_settings().tzinfo()


def get_current_time() -> datetime:
    """Return the current time as a timezone-aware datetime in the configured zone."""
    return datetime.now(get_timezone())


def current_time_like(value: datetime) -> datetime:
    """Current time matching the awareness of ``value`` (naive in, naive out)."""
    now = get_current_time()
    if value.tzinfo is None:
        return now.replace(tzinfo=None)
    return now.astimezone(value.tzinfo)


def localize(value: datetime, zone: tzinfo | None) -> datetime:
    """Attach ``zone`` to a naive datetime; aware values are returned unchanged."""
    if value.tzinfo is not None or zone is None:
        return value
    if hasattr(zone, "localize"):
        return zone.localize(value)
    return value.replace(tzinfo=zone)


def shift(value: datetime, delta) -> datetime:
    """Add a duration using wall-clock arithmetic, re-resolving the UTC offset afterwards."""
    moved = value + delta
    if value.tzinfo is None or not hasattr(value.tzinfo, "localize"):
        return moved
    return localize(moved.replace(tzinfo=None), value.tzinfo)


def start_of_day(value: datetime) -> datetime:
    midnight = value.replace(tzinfo=None, hour=0, minute=0, second=0, microsecond=0)
    return localize(midnight, value.tzinfo)


def from_timestamp(timestamp: float, zone: tzinfo | None = None) -> datetime:
    """Convert a Unix timestamp to an aware datetime in ``zone`` (configured zone by default)."""
    return datetime.fromtimestamp(timestamp, tz=zone or get_timezone())


__all__ = [
    "current_time_like",
    "from_timestamp",
    "get_current_time",
    "get_timezone",
    "localize",
    "shift",
    "start_of_day",
]
