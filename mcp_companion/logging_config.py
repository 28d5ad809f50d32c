"""Loguru logging setup."""

import sys

from loguru import logger


def setup_logging(level: str) -> None:
    """Configure the loguru log level; output goes to stderr."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<level>{time:YYYY-MM-DD HH:mm:ss} | {name}:{function}:{line} | {message}</level>",
        level=level.upper(),
        colorize=True,
        backtrace=True,
        diagnose=False,
    )
