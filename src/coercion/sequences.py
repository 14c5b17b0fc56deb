"""
Array and iterable coercion.

An "array" is a ``list`` for positional data or a ``dict`` for keyed data.
Text (``str``/``bytes``) is treated as a scalar, never as a sequence of
characters.

A generator-producing callable is a plain function, bound method or
``functools.partial`` that can be called without arguments and returns an
iterator. Generator functions and callables annotated as returning a
``Generator``/``Iterator`` are recognised without being called. An
unannotated zero-argument callable (typically a lambda wrapping a generator
call) cannot be classified without running it, so :func:`is_generator_callable`
only reports it as a candidate; the coercion functions call it once and reject
it when the result is not an iterator.
"""

from __future__ import annotations

import functools
import inspect
import logging
import typing
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Dict, List, Optional, Union

from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

ArrayLike = Union[List[Any], Dict[Any, Any]]

_TEXT_TYPES = (str, bytes, bytearray)
_ITERATOR_NAMES = frozenset({"Generator", "Iterator"})
_AMBIGUOUS_NAMES = frozenset({"Iterable"})


def _is_plain_callable(value: Any) -> bool:
    return inspect.isfunction(value) or inspect.ismethod(value) or isinstance(value, functools.partial)


def _accepts_no_arguments(func: Any) -> bool:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return False
    for parameter in signature.parameters.values():
        if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
            continue
        if parameter.default is parameter.empty:
            return False
    return True


def _unwrap(func: Any) -> Any:
    while isinstance(func, functools.partial):
        func = func.func
    return inspect.unwrap(func)


def _declares_iterator(func: Any) -> Optional[bool]:
    """True when declared to produce an iterator, False when declared otherwise, None when unknown."""
    target = _unwrap(func)
    if inspect.isgeneratorfunction(target):
        return True

    annotation = inspect.signature(func).return_annotation
    if annotation is inspect.Signature.empty:
        return None
    if isinstance(annotation, str):
        name = annotation.split("[", 1)[0].rsplit(".", 1)[-1].strip()
        if name in _ITERATOR_NAMES:
            return True
        return None if name in _AMBIGUOUS_NAMES else False

    origin = typing.get_origin(annotation) or annotation
    if not isinstance(origin, type):
        return False
    if issubclass(origin, Iterator):
        return True
    if origin is Iterable:
        return None
    return False


def is_generator_callable(value: Any) -> bool:
    """
    Return True when value is a zero-argument callable that may produce an iterator.

    The answer is definite for generator functions and for callables with a
    return annotation. Unannotated callables are never called here, so
    ``is_generator_callable(lambda: 5)`` is True even though the lambda returns
    an int; :func:`try_array` and friends reject it once it has been called.
    """
    if not _is_plain_callable(value) or not _accepts_no_arguments(value):
        return False
    return _declares_iterator(value) is not False


def _produce_iterator(value: Any) -> Optional[Iterator[Any]]:
    produced = value()
    if isinstance(produced, Iterator):
        return produced
    logger.debug("Callable %r returned %s instead of an iterator", value, type(produced).__name__)
    return None


def _items_to_dict(value: Any) -> Optional[Dict[Any, Any]]:
    try:
        return dict(value.items())
    except (TypeError, ValueError) as exc:
        logger.debug("Object %s exposes items() but could not be converted: %s", type(value).__name__, exc)
        return None


def _has_items(value: Any) -> bool:
    return callable(getattr(value, "items", None)) and not isinstance(value, type)


def try_array(value: Any) -> Optional[ArrayLike]:
    """
    Coerce value to a list or dict, returning None when not possible.

    Generator-producing callables are invoked and drained, lists and dicts
    pass through, mappings (and objects exposing ``items()``) become dicts
    with later keys overwriting earlier ones, and other iterables are drained
    into a list.
    """
    if is_generator_callable(value):
        value = _produce_iterator(value)
    if value is None or isinstance(value, _TEXT_TYPES):
        return None
    if isinstance(value, (list, dict)):
        return value
    if isinstance(value, Mapping) or _has_items(value):
        return _items_to_dict(value)
    if isinstance(value, Iterable):
        return list(value)
    return None


def as_array(value: Any) -> ArrayLike:
    result = try_array(value)
    if result is None:
        raise InvalidArgumentError.for_target("array", value)
    return result


def to_array(value: Any) -> ArrayLike:
    """Best-effort array: None gives ``[]``, other unconvertible values are wrapped in a list."""
    if value is None:
        return []
    result = try_array(value)
    if result is None:
        return [value]
    return result


def try_iterable(value: Any) -> Optional[Iterable[Any]]:
    """
    Coerce value to an iterable without draining lazy sources.

    Generator-producing callables are invoked to obtain their iterator; any
    other iterable (lists, dicts, generators, custom iterables) is returned
    as-is.
    """
    if is_generator_callable(value):
        return _produce_iterator(value)
    if value is None or isinstance(value, _TEXT_TYPES):
        return None
    if isinstance(value, Iterable):
        return value
    if _has_items(value):
        return _items_to_dict(value)
    return None


def as_iterable(value: Any) -> Iterable[Any]:
    result = try_iterable(value)
    if result is None:
        raise InvalidArgumentError.for_target("iterable", value)
    return result


def to_iterable(value: Any) -> Iterable[Any]:
    if value is None:
        return []
    result = try_iterable(value)
    if result is None:
        return [value]
    return result


def iterable_to_array(value: Any) -> ArrayLike:
    """
    Eagerly drain an iterable or a generator-producing callable.

    Raises:
        InvalidArgumentError: If a callable does not produce an iterator, or
            if value is neither iterable nor callable
    """
    if value is None or isinstance(value, _TEXT_TYPES):
        raise InvalidArgumentError.for_target("iterable", value)
    if isinstance(value, Iterable):
        result = try_array(value)
        if result is None:
            raise InvalidArgumentError.for_target("iterable", value)
        return result
    if callable(value):
        produced = _produce_iterator(value) if is_generator_callable(value) else None
        if produced is None:
            raise InvalidArgumentError.not_generator_callable(value)
        return list(produced)
    raise InvalidArgumentError.for_target("iterable", value)


__all__ = [
    "ArrayLike",
    "as_array",
    "as_iterable",
    "is_generator_callable",
    "iterable_to_array",
    "to_array",
    "to_iterable",
    "try_array",
    "try_iterable",
]
