# shelfloom/log_config.py
"""Logging configuration for the shelfloom library using Loguru.

Modules in the package import ``logger`` from here so that a single call to
``configure_logging`` controls the output of the whole client.
"""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(level: str = "INFO", sink=sys.stderr):
    """
    Configures the Loguru logger used by shelfloom.

    Drops any previously installed handlers and installs one handler with the
    shared format.

    Args:
        level: The minimum logging level (e.g., "DEBUG", "INFO", "WARNING").
        sink: The output sink (e.g., sys.stderr, "shelfloom.log").
    """
    logger.remove()
    logger.add(
        sink,
        level=level.upper(),
        format=LOG_FORMAT,
        colorize=sink is sys.stderr,
        backtrace=True,
        diagnose=True,
    )
    logger.info(
        f"Loguru logger configured with level={level.upper()} writing to {sink}"
    )


__all__ = ["LOG_FORMAT", "configure_logging", "logger"]
