"""
Logging setup for the style engine.

Every module logs through ``logging.getLogger(__name__)``, so all records end
up under the ``style_engine`` package logger configured here.
"""

import logging
import os
import sys
import time
from typing import Optional

PACKAGE_LOGGER_NAME = "style_engine"

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"


class LogFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    LEVEL_COLORS = {
        'DEBUG': '\033[34m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[1;31m'
    }

    def __init__(self, colored: bool, fmt: str, datefmt: Optional[str] = None):
        super().__init__(fmt, datefmt)
        self.colored = colored

    def format(self, record: logging.LogRecord) -> str:
        formatted_msg = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelname)
        if self.colored and color:
            formatted_msg = formatted_msg.replace(record.levelname, f"{color}{record.levelname}\033[0m", 1)
        return formatted_msg


def _level(name: str, default: int) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else default


def setup_logging(log_file: Optional[str] = None,
                  console_level: str = "WARNING",
                  file_level: str = "DEBUG") -> logging.Logger:
    """
    Configure the package logger, replacing handlers from an earlier call.

    Args:
        log_file: Path to log file (None for no file logging)
        console_level: Level name for stderr output
        file_level: Level name for the log file

    Returns:
        logging.Logger: The ``style_engine`` package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_level_value = _level(console_level, logging.WARNING)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level_value)
    colored = sys.platform != 'win32' and sys.stderr.isatty()
    console_handler.setFormatter(LogFormatter(colored, CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(console_handler)
    logger.setLevel(console_level_value)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_level_value = _level(file_level, logging.DEBUG)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(file_level_value)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)
        logger.setLevel(min(console_level_value, file_level_value))

    return logger


def log_exception(logger: logging.Logger, exception: Exception,
                  message: str = "An exception occurred") -> None:
    """Log an exception together with its traceback."""
    exc_info = (type(exception), exception, exception.__traceback__)
    logger.error(f"{message}: {exception}", exc_info=exc_info)


class PerformanceLogger:
    """
    Context manager that logs how long its block took.

    Example::

        with PerformanceLogger(logger, "style tree build"):
            ...
    """

    def __init__(self, logger: logging.Logger, operation: str, level: int = logging.DEBUG):
        self.logger = logger
        self.operation = operation
        self.level = level
        self.duration: Optional[float] = None
        self._start = 0.0

    def __enter__(self) -> 'PerformanceLogger':
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.duration = time.perf_counter() - self._start
        if exc_type is None:
            self.logger.log(self.level, f"{self.operation} took {self.duration:.4f} seconds")
