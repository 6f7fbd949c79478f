"""
Logging configuration and utilities.

Sets up the ``health_tracker`` logger for the CLI. Command output goes to
stdout, so log records go to stderr and/or a log file, and chatter from the
data libraries is held at a separate level.
"""

import logging
import sys
from pathlib import Path

from health_tracker.utils.parameters import LoggingConfig


def quiet_libraries(config: LoggingConfig) -> None:
    """
    Set the level of third-party loggers.

    Args:
        config: Logging configuration listing the library loggers and their level.
    """
    library_level = getattr(logging, config.library_level.upper())
    for name in config.library_loggers:
        logging.getLogger(name).setLevel(library_level)


def setup_logging(config: LoggingConfig, logger_name: str | None = None) -> logging.Logger:
    """
    Set up logging for the application.

    When neither console nor file output is enabled the logger gets a
    ``NullHandler`` and stops propagating, so warnings never reach the
    interpreter's fallback stderr handler and mix with command output.

    Args:
        config: Logging configuration.
        logger_name: Optional logger name. If None, returns root logger.

    Returns:
        Configured logger instance.
    """
    level = getattr(logging, config.level.upper())

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = True

    formatter = logging.Formatter(config.format)

    if config.console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if config.file:
        log_file = Path(config.file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
        logger.propagate = False

    quiet_libraries(config)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance by name (typically ``__name__``)."""
    return logging.getLogger(name)
