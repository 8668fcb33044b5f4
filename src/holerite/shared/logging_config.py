"""Loguru sink configuration.

Library modules only emit through ``loguru.logger``; sinks are installed
by the application entry point.
"""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(verbose: bool = False) -> None:
    """Replace the default sink with a stderr sink.

    Args:
        verbose: Emit DEBUG messages (per-calculation details) when True
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "INFO",
        format=LOG_FORMAT,
        colorize=True,
    )
