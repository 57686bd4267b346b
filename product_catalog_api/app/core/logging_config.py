"""
Logging configuration for the Product Catalog API.

Two loggers matter here: the root logger, which receives store and
error messages, and ``product_catalog_api.access``, which receives one
line per request from the middleware chain.  ``setup_logging`` applies
the configured level to both on every call, so an application built
with ``LOG_LEVEL=WARNING`` stays quiet even when another component
(a test runner, an ASGI server) has already attached handlers.
Handlers themselves are attached only once.
"""

import logging
from pathlib import Path
from typing import Optional

ACCESS_LOGGER_NAME = "product_catalog_api.access"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its numeric value (INFO if unknown)."""
    numeric_level = logging.getLevelName(level.upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    root: Optional[logging.Logger] = None,
) -> None:
    """Configure the root and access loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.  Request lines are logged at INFO and their
        timings at DEBUG, so ``WARNING`` silences the access log.
    logfile : Optional[str]
        Path to a file to log messages to.  Only honoured on the call
        that attaches handlers.
    root : Optional[logging.Logger]
        Logger to configure instead of the root logger.
    """
    numeric_level = resolve_level(level)
    root = root or logging.getLogger()
    root.setLevel(numeric_level)
    logging.getLogger(ACCESS_LOGGER_NAME).setLevel(numeric_level)

    if root.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
