"""Logging helpers for ppr.

Every module logs through a child of the ``ppr`` logger. Library use never
installs handlers; only the command line calls configure_logging, and that
touches the ``ppr`` logger alone, so an embedding application keeps its
root logger as it configured it.

Example:
    >>> from ppr.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Exporting document")
"""

from __future__ import annotations

import logging
from typing import TextIO

ROOT_LOGGER = "ppr"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Handler installed by the last configure_logging call
_cli_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``ppr`` namespace.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("lexer").name
        'ppr.lexer'
    """
    if not (name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}.")):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Send ppr log records to stream (stderr by default).

    Warnings and errors only, or everything down to debug when verbose.
    Calling it again replaces the previous handler instead of adding one.

    Returns:
        The configured ``ppr`` logger
    """
    global _cli_handler

    logger = logging.getLogger(ROOT_LOGGER)
    if _cli_handler is not None:
        logger.removeHandler(_cli_handler)

    _cli_handler = logging.StreamHandler(stream)
    _cli_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_cli_handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
