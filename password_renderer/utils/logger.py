"""
Logger for the password renderer.

Handles logger creation, logging configuration and log levels.
"""

import logging
import sys
from typing import Optional

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _level_value(level: str) -> int:
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level}")
    return getattr(logging, level.upper())


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance for module.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    if not name or not isinstance(name, str):
        raise ValueError("Logger name must be a non-empty string")

    logger = logging.getLogger(name)

    # Console output only when nothing upstream handles the record
    if not logger.handlers and not logging.getLogger().handlers:
        logger.setLevel(logging.INFO)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt=DEFAULT_DATE_FORMAT
        ))
        logger.addHandler(console_handler)

    return logger


def configure_logging(level: str = "INFO", format_string: Optional[str] = None,
                      logger_name: Optional[str] = None) -> logging.Logger:
    """
    Configure console logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        logger_name: Logger to configure, the root logger when omitted

    Returns:
        The configured logger
    """
    level_value = _level_value(level)

    target = logging.getLogger(logger_name)
    target.setLevel(level_value)
    target.handlers.clear()

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level_value)
    console_handler.setFormatter(formatter)
    target.addHandler(console_handler)

    return target


def set_log_level(level: str, logger_name: Optional[str] = None) -> None:
    """
    Set log level on a logger and all of its handlers.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        logger_name: Logger to update, the root logger when omitted
    """
    level_value = _level_value(level)

    target = logging.getLogger(logger_name)
    target.setLevel(level_value)
    for handler in target.handlers:
        handler.setLevel(level_value)
