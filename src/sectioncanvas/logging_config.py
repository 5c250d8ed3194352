"""
Logging Configuration
Sets up the 'sectioncanvas' logger for the application.

The level can be overridden without code changes through the
SECTIONCANVAS_LOG_LEVEL environment variable (e.g. DEBUG to trace every
gesture start, end and cancellation).
"""
import logging
import os
import sys
from typing import Optional, Union

LOG_LEVEL_ENV = "SECTIONCANVAS_LOG_LEVEL"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def level_from_env(default: int = logging.INFO) -> int:
    """Return the level named in SECTIONCANVAS_LOG_LEVEL, or `default` if unset or unknown."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the package logger and returns it.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG")
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger("sectioncanvas")
    logger.setLevel(level)

    # Re-creating the window must not duplicate handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized (level %s).", logging.getLevelName(logger.level))
    return logger
