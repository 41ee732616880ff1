"""Logging configuration."""

import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}"


def setup_logging(level: str = "INFO", to_file: bool = False, log_dir: Path | None = None):
    """Log to stderr; with ``to_file``, also keep a daily DEBUG log in ``log_dir``."""
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if to_file:
        log_dir = log_dir or LOG_DIR
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "poll_{time:YYYY-MM-DD}.log",
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
        )
        logger.info("Logging to {}", log_dir)

    return logger
