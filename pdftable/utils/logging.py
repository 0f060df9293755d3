"""Logging configuration using loguru"""

import sys
from enum import Enum

from loguru import logger


class LogLevel(Enum):
    """Log levels accepted by configure_logging"""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def get_logger():
    """Get the loguru logger instance with pdftable context"""
    return logger.bind(name="pdftable")


def configure_logging(log_level: LogLevel | str) -> None:
    """Send log records to stderr at the given level"""
    level = log_level.value if isinstance(log_level, LogLevel) else str(log_level)
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
