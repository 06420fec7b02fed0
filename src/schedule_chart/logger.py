# SPDX-License-Identifier: MIT

import sys

from loguru import logger


def setup_logger(level: str = "WARNING") -> None:
    """Route the package's log records to stderr at the given level.

    The package disables its own logging on import so library callers stay
    silent; this turns it back on for the CLI.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level.upper(),
        colorize=True,
    )
    logger.enable("schedule_chart")
