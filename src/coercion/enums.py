"""Reduction of enumeration members to scalars.

Two shapes of enumeration are recognised:

* ordinal members (plain :class:`enum.Enum`) which reduce to their name or to
  their zero-based declaration index;
* value-backed members (enums mixing in ``int`` or ``str``, e.g.
  :class:`enum.IntEnum`) which carry a scalar payload.

Plain :class:`enum.Flag` members are bit sets, so they reduce to their
integer value rather than a declaration index; combined flags such as
``Perm.R | Perm.W`` have no declaration index at all.
"""

from __future__ import annotations

import re
from enum import Enum, Flag
from typing import Any

_INTEGER_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$")


def is_enum_member(value: Any) -> bool:
    return isinstance(value, Enum)


def is_backed_enum_member(value: Any) -> bool:
    return isinstance(value, Enum) and isinstance(value, (int, str))


def enum_ordinal(member: Enum) -> int:
    """
    Return the zero-based declaration index of ``member``.

    Aliases resolve to their canonical member.

    Raises:
        ValueError: For combined flag values, which were never declared
    """
    declared = list(type(member))
    if member not in declared:
        raise ValueError(f"{member!r} has no declaration index")
    return declared.index(member)


def _backing_value(member: Enum) -> Any:
    if isinstance(member, int):
        return int(member)
    if isinstance(member, str):
        return str.__str__(member)
    return member.value


def enum_to_string(member: Enum) -> str:
    """Ordinal members and numerically backed members give their name; string backed give the payload."""
    if not is_backed_enum_member(member):
        # combined flags are unnamed before Python 3.11
        return member.name if member.name is not None else str(member.value)
    payload = _backing_value(member)
    if isinstance(payload, int) or _INTEGER_PATTERN.match(payload):
        return member.name
    return payload


def enum_to_int(member: Enum) -> int:
    """Numeric payload when there is one, the bit value for flags, otherwise the ordinal index."""
    if is_backed_enum_member(member):
        payload = _backing_value(member)
        if isinstance(payload, int):
            return payload
        if _INTEGER_PATTERN.match(payload):
            return int(payload)
    if isinstance(member, Flag):
        return int(member.value)
    return enum_ordinal(member)


__all__ = [
    "enum_ordinal",
    "enum_to_int",
    "enum_to_string",
    "is_backed_enum_member",
    "is_enum_member",
]
