"""
Logging Configuration
Routes the package logger's records to stdout and, optionally, a log file.
"""
import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = __name__.split('.')[0]
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def resolve_level(level: Union[int, str]) -> int:
    """Accept a logging level number or a level name such as "debug" or "INFO"."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def _with_format(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the package logger. Calling it again replaces the handlers
    installed by the previous call.

    Args:
        level: Level number or name, applied to the logger and its handlers
        log_file: Optional path; the file is truncated on each call.
    """
    level = resolve_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_with_format(logging.StreamHandler(sys.stdout), level))
    if log_file:
        logger.addHandler(_with_format(logging.FileHandler(log_file, mode='w', encoding='utf-8'), level))

    logger.debug("Logging at %s%s", logging.getLevelName(level), f", also to {log_file}" if log_file else "")
    return logger
