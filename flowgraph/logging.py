"""Logging shared by every flowgraph module.

All package loggers sit below the ``flowgraph`` logger, which owns a single
stdout handler. Modules ask for ``get_logger(__name__)``; the CLI chooses the
level from its ``--verbose``/``--quiet`` flags.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "flowgraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Install the package handler on the ``flowgraph`` logger once.

    Later calls return the already configured logger unchanged.

    Args:
        level: Initial level (default: INFO).
        format_string: Handler format; defaults to `DEFAULT_FORMAT`.
        handler: Handler to install; defaults to a stdout StreamHandler.

    Returns:
        logging.Logger: The ``flowgraph`` logger.
    """
    global _configured

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _configured:
        return package_logger

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    # pytest's caplog listens on the stdlib root logger
    package_logger.propagate = True

    _configured = True
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger below ``flowgraph``; it has no handler of its own."""
    setup_root_logger()
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Set the level of the ``flowgraph`` logger and of its handlers.

    Child loggers keep level NOTSET, so they follow this value.
    """
    package_logger = setup_root_logger()
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def level_from_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI flags to a log level. ``verbose`` wins over ``quiet``."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


setup_root_logger()
