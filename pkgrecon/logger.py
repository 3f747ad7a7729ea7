"""Logging configuration shared by the pipeline and the CLI.

Modules create their own loggers with ``logging.getLogger(__name__)``; this
module only attaches a single stderr handler to the ``pkgrecon`` root logger.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

_ROOT_LOGGER = "pkgrecon"
_HANDLER_NAME = "pkgrecon-stderr"


def _create_handler() -> logging.StreamHandler:
    """Create a StreamHandler (stderr) so log lines never mix with the report."""
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the ``pkgrecon`` logger tree and return its root logger.

    Calling this more than once replaces the handler it installed earlier;
    handlers attached by anyone else are left alone.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.handlers = [h for h in logger.handlers if h.get_name() != _HANDLER_NAME]
    logger.addHandler(_create_handler())
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.propagate = False
    return logger
