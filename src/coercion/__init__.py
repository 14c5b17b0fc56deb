"""
Coercion of loosely-typed values into precise types.

Every target type comes in three strictness tiers:

* ``as_*`` raises :class:`InvalidArgumentError` when conversion is impossible;
* ``try_*`` returns None instead;
* ``to_*`` falls back to a default (``""``, ``0``, ``[]``, now, ...).
"""

from .booleans import parse_bool, to_bool, try_bool
from .enums import enum_ordinal, enum_to_int, enum_to_string
from .exceptions import InvalidArgumentError
from .lazy import is_initialized, is_lazy, new_lazy_ghost, new_lazy_proxy
from .numeric import (
    as_float,
    as_int,
    clamp_degrees,
    clamp_float,
    clamp_int,
    is_numeric,
    to_float,
    to_int,
    try_float,
    try_int,
)
from .objects import (
    as_object,
    as_std_class,
    as_type,
    to_object,
    to_std_class,
    try_object,
    try_std_class,
    try_type,
)
from .sequences import (
    as_array,
    as_iterable,
    is_generator_callable,
    iterable_to_array,
    to_array,
    to_iterable,
    try_array,
    try_iterable,
)
from .strings import as_string, is_stringable, to_string, try_string
from .time_helpers import (
    as_date_interval,
    as_date_time,
    parse_date_time,
    to_date_interval,
    to_date_time,
    try_date_interval,
    try_date_time,
)

__all__ = [
    "InvalidArgumentError",
    "as_array",
    "as_date_interval",
    "as_date_time",
    "as_float",
    "as_int",
    "as_iterable",
    "as_object",
    "as_std_class",
    "as_string",
    "as_type",
    "clamp_degrees",
    "clamp_float",
    "clamp_int",
    "enum_ordinal",
    "enum_to_int",
    "enum_to_string",
    "is_generator_callable",
    "is_initialized",
    "is_lazy",
    "is_numeric",
    "is_stringable",
    "iterable_to_array",
    "new_lazy_ghost",
    "new_lazy_proxy",
    "parse_bool",
    "parse_date_time",
    "to_array",
    "to_bool",
    "to_date_interval",
    "to_date_time",
    "to_float",
    "to_int",
    "to_iterable",
    "to_object",
    "to_std_class",
    "to_string",
    "try_array",
    "try_bool",
    "try_date_interval",
    "try_date_time",
    "try_float",
    "try_int",
    "try_iterable",
    "try_object",
    "try_std_class",
    "try_string",
    "try_type",
]
