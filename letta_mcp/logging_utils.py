"""
Standardized logging configuration.

All server output goes to stderr: stdout carries the MCP stdio stream.
"""

import logging
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "letta_mcp"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger by module name."""
    return logging.getLogger(name)


def configure_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    Safe to call more than once; later calls only adjust the level.
    """
    global _configured
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    if level is None:
        level = logging.INFO
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    if not _configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
        _configured = True

    return logger
