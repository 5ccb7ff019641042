"""
Logging setup for the command-line tools.
"""

import os
import sys
import logging
from typing import Optional
from logging.handlers import RotatingFileHandler

# Constants
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(
    level: str = None,
    log_file: Optional[str] = None,
    console: bool = True,
    format_str: Optional[str] = None
) -> None:
    """
    Configure the root logger for the application.

    Args:
        level: Logging level name, e.g. "DEBUG"
        log_file: Optional file to log to
        console: Whether to log to console
        format_str: Optional custom format string
    """
    level_value = getattr(logging, level.upper(), logging.INFO) if level else logging.INFO

    formatter = logging.Formatter(format_str or LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level_value)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level_value)
        root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level_value)
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
