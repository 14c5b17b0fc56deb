"""
Logging configuration for the coercion package.

The package logs through ``logging.getLogger(__name__)`` in every module and
never installs handlers on import. Applications that want to see the DEBUG
traces emitted when ``try_*`` operations reject a value call
:func:`setup_logging` once.
"""

import logging
import sys
import threading
from typing import Optional, Union

from coercion.config import get_settings

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_PACKAGE_LOGGER_NAME = "coercion"
_HANDLER_NAME = "coercion-console"
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level {level!r}")
        return resolved
    return int(level)


def _find_console_handler(logger: logging.Logger) -> Optional[logging.Handler]:
    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return handler
    return None


def _build_console_handler() -> logging.Handler:
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    return console_handler


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Configure the ``coercion`` logger; repeated calls only update the level."""

    with _config_lock:
        package_logger = logging.getLogger(_PACKAGE_LOGGER_NAME)
        resolved = _resolve_level(level)

        handler = _find_console_handler(package_logger)
        if handler is None:
            handler = _build_console_handler()
            package_logger.addHandler(handler)

        handler.setLevel(resolved)
        package_logger.setLevel(resolved)
        package_logger.propagate = False
        return package_logger


def teardown_logging() -> None:
    """Remove the handler installed by :func:`setup_logging`."""
    with _config_lock:
        package_logger = logging.getLogger(_PACKAGE_LOGGER_NAME)
        handler = _find_console_handler(package_logger)
        if handler is not None:
            package_logger.removeHandler(handler)
            handler.close()
        package_logger.setLevel(logging.NOTSET)
        package_logger.propagate = True


__all__ = ["setup_logging", "teardown_logging"]
