"""
Deferred construction of objects.

``new_lazy_ghost`` returns an uninitialized instance that fills in its own
state the first time it is touched. ``new_lazy_proxy`` returns a placeholder
that asks a factory for the real instance on first touch and forwards every
attribute access to it from then on.

Both handles are instances of a private, per-handle subclass of the requested
class, so ``isinstance`` checks hold before initialization. Note that
creating that subclass runs the class's ``__init_subclass__`` hook.
Operations that never read instance state (``type()``, ``id()`` and
``isinstance`` against the requested class) do not trigger initialization.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Type, TypeVar

from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_realize_lock = threading.RLock()
_local = threading.local()

_GHOST = "ghost"
_PROXY = "proxy"


def _lazy_kind(value: Any) -> Any:
    return type(value).__dict__.get("_lazy_kind")


def _build_subclass(cls: type, kind: str, namespace: dict) -> type:
    if not isinstance(cls, type):
        raise InvalidArgumentError.not_lazy_compatible(type(cls), "expected a class")
    namespace.update(
        {
            "_lazy_kind": kind,
            "_lazy_target": cls,
            "__module__": cls.__module__,
            "__qualname__": cls.__qualname__,
        }
    )
    try:
        return type(cls.__name__, (cls,), namespace)
    except TypeError as exc:
        raise InvalidArgumentError.not_lazy_compatible(cls, str(exc)) from exc


def _allocate(subclass: type, cls: type) -> Any:
    try:
        return object.__new__(subclass)
    except TypeError as exc:
        raise InvalidArgumentError.not_lazy_compatible(cls, str(exc)) from exc


# ---------------------------------------------------------------------------
# Ghosts
# ---------------------------------------------------------------------------


def _initializing() -> set:
    """Ids of the ghosts whose initializer is running on this thread."""
    pending = getattr(_local, "ghosts", None)
    if pending is None:
        pending = _local.ghosts = set()
    return pending


def _realize_ghost(instance: Any) -> None:
    ghost_cls = type(instance)
    with _realize_lock:
        if type(instance) is not ghost_cls or _lazy_kind(instance) != _GHOST:
            return
        target = ghost_cls._lazy_target
        pending = _initializing()
        pending.add(id(instance))
        try:
            ghost_cls._lazy_initializer(instance)
        finally:
            pending.discard(id(instance))
        # only now do other threads stop waiting on the lock
        object.__setattr__(instance, "__class__", target)
    logger.debug("Initialized lazy ghost of %s", target.__qualname__)


def _ghost_getattribute(self: Any, name: str) -> Any:
    if id(self) in _initializing():
        return super(type(self), self).__getattribute__(name)
    _realize_ghost(self)
    return getattr(self, name)


def _ghost_setattr(self: Any, name: str, value: Any) -> None:
    if id(self) in _initializing():
        super(type(self), self).__setattr__(name, value)
        return
    _realize_ghost(self)
    setattr(self, name, value)


def _ghost_delattr(self: Any, name: str) -> None:
    if id(self) in _initializing():
        super(type(self), self).__delattr__(name)
        return
    _realize_ghost(self)
    delattr(self, name)


def new_lazy_ghost(cls: Type[T], initializer: Callable[[T], Any]) -> T:
    """
    Create an instance of ``cls`` whose state is populated on first access.

    ``initializer`` receives the instance and sets its state in place; its
    own attribute reads and writes reach the instance directly. The instance
    only becomes a plain ``cls`` instance once the initializer returns, and
    other threads touching it block until then. It runs exactly once; if it
    raises, the instance stays a ghost and the next access retries.

    Raises:
        InvalidArgumentError: If ``cls`` cannot be instantiated without
            calling its constructor or cannot be subclassed
    """
    ghost_cls = _build_subclass(
        cls,
        _GHOST,
        {
            "__slots__": (),
            "_lazy_initializer": staticmethod(initializer),
            "__getattribute__": _ghost_getattribute,
            "__setattr__": _ghost_setattr,
            "__delattr__": _ghost_delattr,
        },
    )
    return _allocate(ghost_cls, cls)


# ---------------------------------------------------------------------------
# Proxies
# ---------------------------------------------------------------------------


def _proxy_target(proxy: Any) -> Any:
    try:
        return object.__getattribute__(proxy, "_lazy_real")
    except AttributeError:
        pass

    proxy_cls = type(proxy)
    with _realize_lock:
        try:
            return object.__getattribute__(proxy, "_lazy_real")
        except AttributeError:
            pass
        target = proxy_cls._lazy_target
        real = proxy_cls._lazy_factory(proxy)
        if not isinstance(real, target) or _lazy_kind(real) == _PROXY:
            raise InvalidArgumentError.for_target(target, real)
        object.__setattr__(proxy, "_lazy_real", real)
    logger.debug("Resolved lazy proxy of %s", target.__qualname__)
    return real


def _proxy_getattribute(self: Any, name: str) -> Any:
    return getattr(_proxy_target(self), name)


def _proxy_setattr(self: Any, name: str, value: Any) -> None:
    setattr(_proxy_target(self), name, value)


def _proxy_delattr(self: Any, name: str) -> None:
    delattr(_proxy_target(self), name)


def new_lazy_proxy(cls: Type[T], factory: Callable[[T], T]) -> T:
    """
    Create a placeholder for ``cls`` that is replaced by ``factory``'s result on first access.

    ``factory`` receives the placeholder and must return an instance of
    ``cls``; afterwards every attribute read, write and delete on the
    placeholder is forwarded to that instance.

    Raises:
        InvalidArgumentError: If ``cls`` cannot back a placeholder, or (on
            first access) if the factory returns something that is not a
            ``cls`` instance
    """
    proxy_cls = _build_subclass(
        cls,
        _PROXY,
        {
            "__slots__": ("_lazy_real",),
            "_lazy_factory": staticmethod(factory),
            "__getattribute__": _proxy_getattribute,
            "__setattr__": _proxy_setattr,
            "__delattr__": _proxy_delattr,
        },
    )
    return _allocate(proxy_cls, cls)


def is_lazy(value: Any) -> bool:
    """True for proxies and for ghosts that have not been initialized yet."""
    return _lazy_kind(value) in (_GHOST, _PROXY)


def is_initialized(value: Any) -> bool:
    """Report whether a lazy handle has been realized, without triggering it."""
    kind = _lazy_kind(value)
    if kind == _GHOST:
        return False
    if kind == _PROXY:
        try:
            object.__getattribute__(value, "_lazy_real")
        except AttributeError:
            return False
    return True


__all__ = ["is_initialized", "is_lazy", "new_lazy_ghost", "new_lazy_proxy"]
