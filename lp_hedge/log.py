"""
Logging setup for the hedge engine (loguru)

Core modules log through ``from loguru import logger``; this module only
installs sinks. Call ``setup_logging()`` once from the embedding process.
"""

import sys
from typing import Optional

from loguru import logger

from .config import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> | "
    "<level>{message}</level>"
)

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | "
    "{level:<8} | "
    "{name}:{function}:{line} | "
    "{message}"
)


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Replace loguru's default sink with the engine's console (and optional file) sinks.

    Args:
        level: Minimum log level (defaults to settings.LOG_LEVEL)
        log_file: Optional path for a rotating file sink (defaults to settings.LOG_FILE)
    """
    level = (level or settings.LOG_LEVEL).upper()
    log_file = log_file or settings.LOG_FILE

    logger.remove()
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=level,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    if log_file:
        logger.add(
            log_file,
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="10 MB",
            retention=5,
            compression="zip",
            enqueue=True,
            backtrace=False,
            diagnose=False,
        )
