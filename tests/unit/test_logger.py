"""
Unit tests for logging setup.
"""

import logging
import logging.handlers

from sql_repository.utils.logger import PACKAGE_LOGGER, get_logger, setup_logging


def test_setup_logging_writes_error_log(tmp_path):
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    try:
        logger = setup_logging(log_dir=tmp_path / "logs")

        assert logger.name == PACKAGE_LOGGER
        assert (tmp_path / "logs").is_dir()
        assert any(
            isinstance(handler, logging.handlers.RotatingFileHandler)
            for handler in root_logger.handlers
        )
    finally:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root_logger.addHandler(handler)


def test_get_logger_uses_given_level():
    logger = get_logger("sql_repository.tests", level=logging.DEBUG)

    assert logger.name == "sql_repository.tests"
    assert logger.level == logging.DEBUG
