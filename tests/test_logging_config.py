"""Tests for logging setup."""

import logging
import sys
from pathlib import Path

import pytest

from article_extractor.logging_config import LOGGER_NAME, setup_logging
from article_extractor.models.config import ExtractorConfig


@pytest.fixture(autouse=True)
def reset_logger():
    """Remove handlers added by a test from the package logger."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logging.getLogger("readability").setLevel(logging.NOTSET)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_defaults(self):
        """Test the default configuration."""
        logger = setup_logging(force=True)

        assert logger.name == "article_extractor"
        assert logger.level == logging.INFO
        assert logger.propagate is False
        assert len(logger.handlers) == 1

    def test_console_handler_writes_to_stderr(self):
        """Test that log records stay off stdout."""
        logger = setup_logging(ExtractorConfig(log_level="WARNING"), force=True)
        (handler,) = logger.handlers

        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
        assert handler.level == logging.WARNING

    def test_file_handler_from_config(self, tmp_path: Path):
        """Test that a log file from the config gets its own handler."""
        log_file = tmp_path / "extract.log"
        logger = setup_logging(ExtractorConfig(log_level="DEBUG", log_file=log_file), force=True)

        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == str(log_file)

        logging.getLogger("article_extractor.heuristics.scorer").debug("scored")
        file_handlers[0].flush()
        assert "scored" in log_file.read_text()

    def test_keeps_existing_handlers_without_force(self):
        """Test that a second call does not stack handlers."""
        setup_logging(force=True)
        logger = setup_logging(ExtractorConfig(log_level="ERROR"))

        assert len(logger.handlers) == 1
        assert logger.level == logging.ERROR

    def test_force_replaces_handlers(self, tmp_path: Path):
        """Test reconfiguration with force."""
        setup_logging(ExtractorConfig(log_file=tmp_path / "a.log"), force=True)
        logger = setup_logging(force=True)

        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0], logging.FileHandler)

    def test_third_party_loggers_quieted(self):
        """Test that readability logs only warnings unless debugging."""
        setup_logging(force=True)
        assert logging.getLogger("readability").level == logging.WARNING

        setup_logging(ExtractorConfig(log_level="DEBUG"), force=True)
        assert logging.getLogger("readability").level == logging.DEBUG

    def test_custom_format(self):
        """Test a caller supplied format string."""
        logger = setup_logging(format_string="%(levelname)s %(message)s", force=True)
        assert logger.handlers[0].formatter._fmt == "%(levelname)s %(message)s"
