"""
Logger utility for consistent logging across the repository package.

Library modules only ever call ``logging.getLogger(__name__)``; host
applications that want the package's default output call
:func:`setup_logging` once at startup.

Features:
- Consistent log format across all modules
- Log level taken from settings (``LOG_LEVEL``/``DEBUG``)
- Stream handler to stdout, rotating file handler for errors
- SQLAlchemy engine logging follows ``DEBUG`` so executed SQL can be traced
- Prevents duplicate handlers when called multiple times
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Union

from sql_repository.utils.config import get_settings

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
VERBOSE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

PACKAGE_LOGGER = 'sql_repository'


def _level_from_settings() -> int:
    settings = get_settings()
    return getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)


def setup_logging(log_dir: Optional[Union[str, Path]] = "logs") -> logging.Logger:
    """
    Configure global logging for an application using the package.

    Args:
        log_dir: Directory for the rotating ``error.log``. ``None`` disables
            file logging entirely.

    Returns:
        logging.Logger: The package logger
    """
    settings = get_settings()
    log_level = _level_from_settings()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates when reloading
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    standard_formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    verbose_formatter = logging.Formatter(VERBOSE_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(standard_formatter)
    console_handler.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)
    root_logger.addHandler(console_handler)

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        error_file_handler = logging.handlers.RotatingFileHandler(
            log_path / "error.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5
        )
        error_file_handler.setLevel(logging.ERROR)
        error_file_handler.setFormatter(verbose_formatter)
        root_logger.addHandler(error_file_handler)

    logging.getLogger('sqlalchemy.engine').setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.info(f"Logging initialized with level {logging.getLevelName(log_level)}")

    return logger


def get_logger(name: Optional[str] = None, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger with the package's formatting.

    A stdout handler is only attached when neither the logger nor the root
    logger has handlers, so calling this repeatedly never duplicates output.

    Args:
        name: Logger name, usually ``__name__``. Defaults to the package logger.
        level: Logging level. Defaults to ``LOG_LEVEL`` from settings.

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name or PACKAGE_LOGGER)
    logger.setLevel(level if level is not None else _level_from_settings())

    root_logger = logging.getLogger()
    if not logger.handlers and not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        logger.addHandler(handler)

    return logger
