"""Centralized logging configuration for spgraph.

Every module logs through ``get_logger(__name__)``, so all records end up under
the ``"spgraph"`` logger. One stdout handler is attached there the first time a
logger is requested. The solver reports its per-query traversal counters at
DEBUG; loaders and the CLI report progress at INFO.
"""

import logging
import sys
from typing import Optional

_ROOT_LOGGER_NAME = "spgraph"
_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_root_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``"spgraph"`` logger.

    Later calls are no-ops until `reset_logging` runs.

    Args:
        level: Initial level of the package logger.
        format_string: Record format. Defaults to timestamp, logger name, level
            and message.
        handler: Destination handler. Defaults to a stdout ``StreamHandler``.
    """
    global _root_configured

    if _root_configured:
        return

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees package records.
    root_logger.propagate = True

    _root_configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, inheriting the package level."""
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and its handlers."""
    setup_root_logger()

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def cli_log_level(verbose: bool, quiet: bool) -> int:
    """Map the CLI ``--verbose``/``--quiet`` flags to a logging level.

    ``--verbose`` wins when both are given.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def reset_logging() -> None:
    """Drop the package handler so the next logger request reconfigures it."""
    global _root_configured
    _root_configured = False

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
