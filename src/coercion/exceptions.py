"""Exception types raised by coercion operations.

Every ``as_*`` operation raises :class:`InvalidArgumentError` when a value
cannot be converted. ``try_*`` and ``to_*`` operations never raise it.
"""

from __future__ import annotations

from typing import Any


def describe_target(target: Any) -> str:
    """Return a readable name for a coercion target (type, tuple of types or label)."""
    if isinstance(target, tuple):
        return " | ".join(describe_target(item) for item in target)
    if isinstance(target, type):
        return target.__qualname__
    return str(target)


class InvalidArgumentError(ValueError):
    """Raised when a value cannot be coerced to the requested type."""

    def __init__(self, message: str = "", *, target: Any = None, value: Any = None) -> None:
        if not message:
            message = "Value could not be coerced"
        super().__init__(message)
        self.target = target
        self.value = value

    @classmethod
    def for_target(cls, target: Any, value: Any = None) -> "InvalidArgumentError":
        """Create error for a value that could not be coerced to ``target``."""
        name = describe_target(target)
        return cls(f"Value could not be coerced to {name}", target=target, value=value)

    @classmethod
    def unparsable(cls, target: Any, text: str) -> "InvalidArgumentError":
        """Create error for a string the date/duration parsers rejected."""
        name = describe_target(target)
        return cls(f"Unable to parse {text!r} as {name}", target=target, value=text)

    @classmethod
    def not_generator_callable(cls, value: Any) -> "InvalidArgumentError":
        """Create error for a callable that does not produce an iterator."""
        name = getattr(value, "__qualname__", type(value).__name__)
        return cls(f"Callable {name} does not produce a generator", target="iterable", value=value)

    @classmethod
    def not_lazy_compatible(cls, target: type, reason: str = "") -> "InvalidArgumentError":
        """Create error for a class that cannot back a lazy object."""
        msg = f"Cannot create lazy instance of {describe_target(target)}"
        if reason:
            msg += f": {reason}"
        return cls(msg, target=target)


__all__ = ["InvalidArgumentError", "describe_target"]
