"""Logging helpers for the note digest package.

Modules log through ``get_logger(__name__)``. Only the entry points
(CLI, API server) call :func:`setup_logging`, which configures the
``notedigest`` package logger and leaves the root logger alone so an
embedding application keeps control of its own handlers.
"""

import logging
import sys
from typing import TextIO

PACKAGE_LOGGER = "notedigest"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "notedigest-console"


def setup_logging(
    level: str = "INFO", stream: TextIO | None = None
) -> logging.Logger:
    """Attach a console handler to the package logger and set its level.

    Repeated calls only adjust the level; the handler is installed once.

    Args:
        level: Level name such as ``"DEBUG"``. Unknown names mean INFO.
        stream: Output stream for the handler. Defaults to stdout.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(
        logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
    )

    if not any(h.get_name() == _HANDLER_NAME for h in package_logger.handlers):
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        package_logger.addHandler(handler)
    return package_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
