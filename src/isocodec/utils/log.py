"""Logging setup for hosts embedding isocodec.

The library itself only creates module loggers; nothing is printed unless the
host configures logging, for example with configure_logging().
"""

from __future__ import annotations

import logging
from typing import Union

from pythonjsonlogger.json import JsonFormatter

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(
    level: Union[int, str] = "WARNING", json_format: bool = False
) -> logging.Logger:
    """Route isocodec events to stderr.

    Args:
        level: Log level name or number
        json_format: Emit one JSON object per event (structured ``extra`` fields
            such as ``mti`` and ``fields`` become keys)

    Returns:
        The ``isocodec`` package logger

    Example:
        >>> configure_logging("DEBUG", json_format=True)
    """
    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(JsonFormatter(LOG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("isocodec")
    for existing in list(logger.handlers):
        if not isinstance(existing, logging.NullHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
