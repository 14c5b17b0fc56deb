"""
Duration parsing.

Two notations are supported:

* ISO-8601 durations such as ``P1Y2M3DT4H5M6S`` or ``P2W``
  (:func:`parse_iso_duration`);
* relative expressions such as ``3 days``, ``2 weeks 1 day``,
  ``an hour and 30 minutes``, ``in 2 hours`` or ``5 minutes ago``
  (:func:`parse_relative_duration`).

Both return :class:`dateutil.relativedelta.relativedelta` so calendar units
(months, years) survive unchanged.
"""

from __future__ import annotations

import re
from collections import defaultdict
from decimal import Decimal

from dateutil.relativedelta import relativedelta

# Error messages
EMPTY_DURATION_ERROR = "Empty duration string"
INVALID_ISO_DURATION_ERROR_TEMPLATE = "Invalid ISO-8601 duration '{}'"
INVALID_RELATIVE_DURATION_ERROR_TEMPLATE = "Invalid relative duration '{}'"
UNKNOWN_UNIT_ERROR_TEMPLATE = "Unknown duration unit '{}' in '{}'"

_ISO_PATTERN = re.compile(
    r"^P(?!$)"
    r"(?:(?P<years>\d+)Y)?"
    r"(?:(?P<months>\d+)M)?"
    r"(?:(?P<weeks>\d+)W)?"
    r"(?:(?P<days>\d+)D)?"
    r"(?:T(?=\d)"
    r"(?:(?P<hours>\d+)H)?"
    r"(?:(?P<minutes>\d+)M)?"
    r"(?:(?P<seconds>\d+(?:[.,]\d+)?)S)?"
    r")?$"
)

# sign, digit run, letter run, or any other single character
_TOKEN_PATTERN = re.compile(r"[+-]|\d+|[a-z]+|\S")
_CONNECTOR_PATTERN = re.compile(r",|\band\b")

# unit alias -> (relativedelta field, multiplier)
UNIT_ALIASES: dict[str, tuple[str, int]] = {}
for _field, _multiplier, _aliases in (
    ("microseconds", 1, ("us", "usec", "usecs", "microsecond", "microseconds")),
    ("microseconds", 1000, ("ms", "msec", "msecs", "millisecond", "milliseconds")),
    ("seconds", 1, ("s", "sec", "secs", "second", "seconds")),
    ("minutes", 1, ("min", "mins", "minute", "minutes")),
    ("hours", 1, ("h", "hr", "hrs", "hour", "hours")),
    ("days", 1, ("d", "day", "days")),
    ("weeks", 1, ("w", "wk", "wks", "week", "weeks")),
    ("days", 14, ("fortnight", "fortnights")),
    ("months", 1, ("mon", "mons", "month", "months")),
    ("years", 1, ("y", "yr", "yrs", "year", "years")),
):
    for _alias in _aliases:
        UNIT_ALIASES[_alias] = (_field, _multiplier)


def parse_iso_duration(text: str) -> relativedelta:
    """
    Parse an ISO-8601 duration literal.

    Examples:
        >>> parse_iso_duration("P1D")
        relativedelta(days=+1)
        >>> parse_iso_duration("PT1H30M")
        relativedelta(hours=+1, minutes=+30)

    Raises:
        ValueError: If the literal is malformed
    """
    match = _ISO_PATTERN.match(text.strip())
    if match is None:
        raise ValueError(INVALID_ISO_DURATION_ERROR_TEMPLATE.format(text))

    parts = {name: value for name, value in match.groupdict().items() if value is not None}
    seconds_text = parts.pop("seconds", None)
    amounts = {name: int(value) for name, value in parts.items()}

    if seconds_text is not None:
        seconds = Decimal(seconds_text.replace(",", "."))
        whole = int(seconds)
        amounts["seconds"] = whole
        fraction = seconds - whole
        if fraction:
            amounts["microseconds"] = int((fraction * 1_000_000).to_integral_value())

    return relativedelta(**amounts)


def _is_amount(token: str) -> bool:
    return token in ("a", "an") or token.isdecimal()


def _split_terms(cleaned: str, text: str) -> list[tuple[str, str, str]]:
    """Group tokens into ``(sign, amount, unit)`` triples, rejecting anything else."""
    tokens = _TOKEN_PATTERN.findall(cleaned)
    if not tokens:
        raise ValueError(INVALID_RELATIVE_DURATION_ERROR_TEMPLATE.format(text))

    terms = []
    index = 0
    while index < len(tokens):
        sign = ""
        if tokens[index] in ("+", "-"):
            sign = tokens[index]
            index += 1
        if index + 1 >= len(tokens):
            raise ValueError(INVALID_RELATIVE_DURATION_ERROR_TEMPLATE.format(text))
        amount, unit = tokens[index], tokens[index + 1]
        if not _is_amount(amount) or not (unit.isascii() and unit.isalpha()):
            raise ValueError(INVALID_RELATIVE_DURATION_ERROR_TEMPLATE.format(text))
        terms.append((sign, amount, unit))
        index += 2
    return terms


def parse_relative_duration(text: str) -> relativedelta:
    """
    Parse a relative duration expression made of ``<amount> <unit>`` terms.

    Terms may carry their own sign, be separated by commas or ``and``, and use
    ``a``/``an`` for one. A leading ``in`` is ignored and a trailing ``ago``
    negates the whole expression.

    Raises:
        ValueError: If the expression is empty or contains unknown units
    """
    cleaned = text.strip().lower()
    if not cleaned:
        raise ValueError(EMPTY_DURATION_ERROR)

    negate = False
    if cleaned.endswith(" ago"):
        negate = True
        cleaned = cleaned[: -len(" ago")]
    elif cleaned.startswith("in "):
        cleaned = cleaned[len("in ") :]

    cleaned = _CONNECTOR_PATTERN.sub(" ", cleaned)

    amounts: defaultdict[str, int] = defaultdict(int)
    for sign, amount, unit in _split_terms(cleaned, text):
        if unit not in UNIT_ALIASES:
            raise ValueError(UNKNOWN_UNIT_ERROR_TEMPLATE.format(unit, text))
        field, multiplier = UNIT_ALIASES[unit]
        quantity = 1 if amount in ("a", "an") else int(amount)
        if sign == "-":
            quantity = -quantity
        amounts[field] += quantity * multiplier

    duration = relativedelta(**amounts)
    return -duration if negate else duration


__all__ = ["UNIT_ALIASES", "parse_iso_duration", "parse_relative_duration"]
