from loguru import logger
import sys
import os
from typing import Optional

from .config import LOG_LEVEL_ENV, LOG_FILE_ENV

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} - {message}"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure loguru for a CLI run.

    Console output goes to stderr so it never mixes with the rendered report,
    and is off entirely when no level is given.

    Args:
        level: Minimum level for the console handler, empty to disable.
            None reads COINDL_LOG_LEVEL.
        log_file: Optional path of a rotating debug log. None reads COINDL_LOG_FILE.
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "")
    if log_file is None:
        log_file = os.getenv(LOG_FILE_ENV, "")

    logger.remove()  # Remove default handler

    if level:
        logger.add(sys.stderr, level=level.upper())

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        logger.add(
            log_file,
            rotation="1 day",    # New file is created each day
            retention="1 week",  # Logs are kept for 1 week
            level="DEBUG",
            format=LOG_FORMAT,
            backtrace=True,
            diagnose=False
        )


def get_logger(name):
    """Get a logger with the specified name"""
    return logger.bind(name=name)
