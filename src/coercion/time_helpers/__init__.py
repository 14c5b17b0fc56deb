"""Date/time and duration coercion helpers."""

from .clock import get_current_time, get_timezone
from .date_interval import as_date_interval, diff_from_now, to_date_interval, try_date_interval
from .date_time import Duration, as_date_time, to_date_time, try_date_time
from .durations import parse_iso_duration, parse_relative_duration
from .natural_language import parse_date_time

__all__ = [
    "Duration",
    "as_date_interval",
    "as_date_time",
    "diff_from_now",
    "get_current_time",
    "get_timezone",
    "parse_date_time",
    "parse_iso_duration",
    "parse_relative_duration",
    "to_date_interval",
    "to_date_time",
    "try_date_interval",
    "try_date_time",
]
