"""Unit tests for logging configuration module.

Tests verify that the logging configuration functions work correctly with different
scenarios including various log levels, formats, and file logging options.
"""

import logging
from unittest.mock import patch

import pytest

from postboard.core import logging_config
from postboard.core.logging_config import (
    DETAILED_FORMAT,
    JSON_FORMAT,
    MODULE_LOG_LEVELS,
    SIMPLE_FORMAT,
    get_logger,
    setup_logging,
)


def _console_handler() -> logging.Handler:
    return next(h for h in logging.getLogger().handlers if type(h) is logging.StreamHandler)


class TestSetupLogging:
    @pytest.mark.parametrize(
        "log_level,expected_level",
        [
            ("DEBUG", logging.DEBUG),
            ("WARNING", logging.WARNING),
            ("error", logging.ERROR),
        ],
    )
    def test_setup_logging_with_different_levels(self, log_level, expected_level):
        setup_logging(log_level=log_level, enable_file=False)
        assert _console_handler().level == expected_level

    @pytest.mark.parametrize(
        "log_format,expected",
        [("simple", SIMPLE_FORMAT), ("detailed", DETAILED_FORMAT), ("json", JSON_FORMAT), ("bogus", DETAILED_FORMAT)],
    )
    def test_setup_logging_formats(self, log_format, expected):
        setup_logging(log_format=log_format, enable_file=False)
        assert _console_handler().formatter._fmt == expected

    def test_handlers_are_replaced_not_stacked(self):
        setup_logging(enable_file=False)
        setup_logging(enable_file=False)
        stream_handlers = [h for h in logging.getLogger().handlers if type(h) is logging.StreamHandler]
        assert len(stream_handlers) == 1

    def test_module_levels_applied(self):
        setup_logging(enable_file=False)
        for name, level in MODULE_LOG_LEVELS.items():
            assert logging.getLogger(name).level == logging.getLevelName(level)

    def test_file_logging(self, tmp_path):
        with (
            patch.object(logging_config, "ENABLE_FILE_LOGGING", True),
            patch.object(logging_config, "LOG_FILE_DIR", str(tmp_path / "logs")),
        ):
            setup_logging(enable_file=True)

        file_handlers = [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert (tmp_path / "logs").is_dir()
        file_handlers[0].close()
        logging.getLogger().removeHandler(file_handlers[0])

    def test_file_logging_requires_setting(self):
        with patch.object(logging_config, "ENABLE_FILE_LOGGING", False):
            setup_logging(enable_file=True)
        assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)


def test_get_logger_returns_named_logger():
    logger = get_logger("postboard.test")
    assert logger.name == "postboard.test"
    assert logger is logging.getLogger("postboard.test")
