"""Logging configuration for applications embedding the OpenSearch client.

Nothing is configured at import time. Modules take their logger from
``get_logger(__name__)``; applications call ``setup_logging`` once.
"""

import logging
import sys
from enum import Enum
from typing import TextIO

PACKAGE_LOGGER = "search_api"

# opensearch-py reports every request and failure on this logger
CONNECTION_LOGGER = "opensearch"


class LogLevel(Enum):
    """Logging level enumeration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _numeric_level(level: str | LogLevel) -> int:
    level_str = level.value if isinstance(level, LogLevel) else level.upper()
    return getattr(logging, level_str, logging.INFO)


def setup_logging(
    level: str | LogLevel = LogLevel.INFO,
    *,
    connection_level: str | LogLevel = LogLevel.WARNING,
    include_timestamp: bool = True,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling it again replaces the handler installed by the previous call, so
    the level can be changed at runtime without duplicating output.

    Args:
        level: Level for ``search_api`` loggers, as string or LogLevel enum
        connection_level: Level for opensearch-py's per-request ``opensearch`` logger
        include_timestamp: Whether to include timestamps in log lines
        stream: Destination stream (default: stderr)

    Returns:
        The package logger

    """
    fmt = "%(name)s  %(levelname)s  %(message)s"
    if include_timestamp:
        fmt = "%(asctime)s  " + fmt

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S"))
    handler.set_name(PACKAGE_LOGGER)

    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in [h for h in logger.handlers if h.get_name() == PACKAGE_LOGGER]:
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(_numeric_level(level))

    logging.getLogger(CONNECTION_LOGGER).setLevel(_numeric_level(connection_level))
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance

    """
    return logging.getLogger(name)
