"""Loguru configuration for the command line.

The library logs under the ``dashstats`` name and stays disabled until
:func:`configure` is called.
"""

from __future__ import annotations

import sys

from loguru import logger

FORMAT = (
    "<dim>{time:YYYY-MM-DD HH:mm:ss}</dim> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure(level: str = "INFO") -> None:
    """Send ``dashstats`` log records at *level* and above to stderr."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), colorize=True, format=FORMAT)
    logger.enable("dashstats")
