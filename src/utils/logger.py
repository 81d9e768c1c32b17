"""
Logging Configuration and Utilities

Loggers for the resolver live under the ``lint_todo`` hierarchy. The library
only emits DEBUG records; host tools opt in to output with ``setup_logging``.

Author: lint-todo-config Project
License: MIT
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from logging.handlers import RotatingFileHandler
from pythonjsonlogger import jsonlogger
from typing import Optional

ROOT_LOGGER_NAME = "lint_todo"

TEXT_FORMAT = '[%(asctime)s] %(levelname)s - %(name)s - %(message)s'
JSON_FORMAT = '%(asctime)s %(name)s %(levelname)s %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class LogLevel(str, Enum):
    """Logging level options."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ColoredFormatter(logging.Formatter):
    """
    Formatter that colors the level name for terminal output.
    """

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
        'RESET': '\033[0m'
    }

    def format(self, record):
        # Color a copy so other handlers still see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        log_color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        record.levelname = f"{log_color}{record.levelname}{self.COLORS['RESET']}"
        return super().format(record)


def _build_formatter(json_format: bool, colored: bool) -> logging.Formatter:
    if json_format:
        return jsonlogger.JsonFormatter(JSON_FORMAT)
    if colored:
        return ColoredFormatter(TEXT_FORMAT, datefmt=DATE_FORMAT)
    return logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(
    log_level: str = "INFO",
    json_format: bool = False,
    log_file_path: Optional[str] = None,
    log_rotation_size: int = 10485760,  # 10MB
    log_retention_count: int = 5,
    stream=None
) -> logging.Logger:
    """
    Configure output for the ``lint_todo`` loggers.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Emit JSON records instead of colored text
        log_file_path: Also write to this file, rotated by size
        log_rotation_size: Max log file size before rotation (bytes)
        log_retention_count: Number of backup log files to keep
        stream: Console stream (defaults to stdout)

    Returns:
        Configured logger instance

    Raises:
        ValueError: If log_level is not a known level
    """
    level = getattr(logging, LogLevel(log_level.upper()).value)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(_build_formatter(json_format, colored=True))
    logger.addHandler(console_handler)

    if log_file_path:
        Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file_path,
            maxBytes=log_rotation_size,
            backupCount=log_retention_count,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(_build_formatter(json_format, colored=False))
        logger.addHandler(file_handler)

    logger.propagate = False

    logger.debug(f"Logging initialized at {log_level.upper()} level")

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger below the ``lint_todo`` hierarchy.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
