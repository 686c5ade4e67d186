"""Logging for pathid.

Every module logs through a child of the ``pathid`` logger, which owns the
only handler. Its level comes from, in order: an explicit
:func:`set_global_log_level` call (the CLI's ``--verbose``, ``--quiet`` and
``--log-level``), the ``PATHID_LOG_LEVEL`` environment variable, or INFO.
"""

import logging
import os
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "pathid"

#: Environment variable holding the default level name (``DEBUG``, ``info``,
#: ``30`` ...).
LOG_LEVEL_ENV = "PATHID_LOG_LEVEL"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_CONFIGURED = False


def parse_log_level(value: Union[str, int]) -> int:
    """Convert a level name or number into a ``logging`` level.

    Names are case-insensitive; ``WARN`` is accepted as ``WARNING``.

    Raises:
        ValueError: If ``value`` names no standard level.
    """
    if isinstance(value, int):
        return value
    text = value.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    if not isinstance(level, int):
        raise ValueError(
            f"Unknown log level {value!r}; expected one of "
            "DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )
    return level


def default_log_level() -> int:
    """Level taken from ``PATHID_LOG_LEVEL``, or INFO when unset or invalid."""
    env_level = os.getenv(LOG_LEVEL_ENV)
    if not env_level:
        return logging.INFO
    try:
        return parse_log_level(env_level)
    except ValueError:
        return logging.INFO


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the single stdout handler to the ``pathid`` logger.

    Later calls are no-ops until :func:`reset_logging`.

    Args:
        level: Logging level. Defaults to :func:`default_log_level`.
        format_string: Formatter pattern (default :data:`DEFAULT_FORMAT`).
        handler: Handler to install instead of a stdout ``StreamHandler``.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(default_log_level() if level is None else level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees pathid records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True

    env_level = os.getenv(LOG_LEVEL_ENV)
    if level is None and env_level:
        try:
            parse_log_level(env_level)
        except ValueError:
            root_logger.warning(
                f"Ignoring {LOG_LEVEL_ENV}={env_level!r}: not a log level"
            )


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(name)`` with the package root configured.

    The returned logger has no level of its own and follows ``pathid``.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: Union[str, int]) -> None:
    """Set the level of the ``pathid`` logger and its handlers.

    Args:
        level: A ``logging`` level or a name accepted by :func:`parse_log_level`.
    """
    setup_root_logger()

    level = parse_log_level(level)
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Go back to the default level (``PATHID_LOG_LEVEL`` or INFO)."""
    set_global_log_level(default_log_level())


def reset_logging() -> None:
    """Drop the handler and level so the next call configures from scratch."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
