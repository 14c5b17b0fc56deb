"""
Object, generic-record and type-narrowing coercion.

Generic records are :class:`types.SimpleNamespace` instances. Arbitrary
objects are converted by snapshotting their instance state: every entry of
``__dict__`` and every populated ``__slots__`` field along the MRO, private
(name-mangled) attributes included. The snapshot holds the values current at
call time and is not bound to the source object afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from numbers import Number
from types import SimpleNamespace
from typing import Any, Dict, Optional, Type, TypeVar

from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_SCALAR_TYPES = (str, bytes, bytearray, bool, Number)
_COLLECTION_TYPES = (list, tuple, dict, set, frozenset)
_SKIPPED_SLOTS = frozenset({"__dict__", "__weakref__"})


def is_object_instance(value: Any) -> bool:
    """True for instances that are not None, scalars, builtin collections or classes."""
    if value is None or isinstance(value, type):
        return False
    return not isinstance(value, _SCALAR_TYPES + _COLLECTION_TYPES)


def _storage_name(owner: type, name: str) -> str:
    if name.startswith("__") and not name.endswith("__"):
        return f"_{owner.__name__.lstrip('_')}{name}"
    return name


def _slot_names(owner: type) -> tuple[str, ...]:
    slots = owner.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        return (slots,)
    return tuple(slots)


def snapshot_fields(value: Any) -> Dict[str, Any]:
    """Copy the declared instance fields of ``value`` into a new dict."""
    fields: Dict[str, Any] = {}
    for owner in reversed(type(value).__mro__):
        for name in _slot_names(owner):
            if name in _SKIPPED_SLOTS:
                continue
            stored = _storage_name(owner, name)
            try:
                fields[stored] = getattr(value, stored)
            except AttributeError:
                # unset slot
                continue

    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, dict):
        fields.update(instance_dict)
    return fields


def try_std_class(value: Any) -> Optional[SimpleNamespace]:
    """
    Coerce value to a generic record, returning None when not possible.

    Records pass through, mappings and lists/tuples become records keyed by
    their (stringified) keys or indexes, other objects are snapshotted.
    """
    if value is None or isinstance(value, type):
        return None
    if isinstance(value, SimpleNamespace):
        return value
    if isinstance(value, Mapping):
        return SimpleNamespace(**{str(key): item for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return SimpleNamespace(**{str(index): item for index, item in enumerate(value)})
    if not is_object_instance(value):
        logger.debug("Cannot build record from %s", type(value).__name__)
        return None
    return SimpleNamespace(**snapshot_fields(value))


def as_std_class(value: Any) -> SimpleNamespace:
    result = try_std_class(value)
    if result is None:
        raise InvalidArgumentError.for_target(SimpleNamespace, value)
    return result


def to_std_class(value: Any) -> SimpleNamespace:
    result = try_std_class(value)
    return result if result is not None else SimpleNamespace()


def try_object(value: Any) -> Optional[object]:
    """Object instances pass through unchanged; other values go through :func:`try_std_class`."""
    if is_object_instance(value):
        return value
    return try_std_class(value)


def as_object(value: Any) -> object:
    result = try_object(value)
    if result is None:
        raise InvalidArgumentError.for_target(object, value)
    return result


def to_object(value: Any) -> object:
    result = try_object(value)
    return result if result is not None else SimpleNamespace()


def try_type(value: Any, target: Type[T]) -> Optional[T]:
    """Return value itself when it is an instance of ``target``, otherwise None."""
    if isinstance(value, target):
        return value
    return None


def as_type(value: Any, target: Type[T]) -> T:
    """
    Narrow value to ``target`` without converting it.

    Raises:
        InvalidArgumentError: If value is not an instance of ``target``
    """
    if not isinstance(value, target):
        raise InvalidArgumentError.for_target(target, value)
    return value


__all__ = [
    "as_object",
    "as_std_class",
    "as_type",
    "is_object_instance",
    "snapshot_fields",
    "to_object",
    "to_std_class",
    "try_object",
    "try_std_class",
    "try_type",
]
