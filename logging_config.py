"""Logging configuration for the application.

Console output for whoever launched the app, plus a daily log file so
failed database calls can be diagnosed after the fact.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

__all__ = [
    "setup_logging",
    "get_logger",
    "LOGGER_NAME",
]

LOGGER_NAME = "simplecrud"

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(
    level: int = logging.INFO,
    log_dir: Optional[Path] = None,
    log_to_file: bool = True,
    log_to_console: bool = True,
) -> logging.Logger:
    """Set up the application logger.

    Args:
        level: Logging level for the console (default: INFO)
        log_dir: Directory for the daily log file (default: ./logs)
        log_to_file: Whether to write simplecrud_YYYYMMDD.log
        log_to_console: Whether to log to stdout

    Returns:
        The configured root logger for the application
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(console_handler)

    if log_to_file:
        log_dir = Path(log_dir or "logs")
        log_dir.mkdir(parents=True, exist_ok=True)
        today = datetime.now().strftime("%Y%m%d")
        file_handler = logging.FileHandler(log_dir / f"{LOGGER_NAME}_{today}.log", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # Capture all levels to file
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger under the application namespace.

    Args:
        name: Module name (will be prefixed with 'simplecrud.')
    """
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
