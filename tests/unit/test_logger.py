"""Unit tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

from showcase.config.schemas import LoggingConfig
from showcase.helpers.logger import get_logger, setup_logging


class TestSetupLogging:
    """Test cases for setup_logging."""

    def test_default_level_is_warning(self):
        setup_logging()

        assert logging.getLogger().level == logging.WARNING

    def test_stderr_destination(self):
        setup_logging(LoggingConfig(level="DEBUG", destination="stderr"))

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert not isinstance(handlers[0], RotatingFileHandler)

    def test_file_destination_writes_records(self, tmp_path):
        # Arrange
        log_file = tmp_path / "logs" / "showcase.log"
        setup_logging(LoggingConfig(level="INFO", destination="file", file_path=str(log_file)))

        # Act
        get_logger("showcase.test").info("vignette finished", pattern="iterator")
        for handler in logging.getLogger().handlers:
            handler.flush()

        # Assert
        content = log_file.read_text()
        assert "event='vignette finished'" in content
        assert "pattern='iterator'" in content

    def test_both_destinations(self, tmp_path):
        setup_logging(
            LoggingConfig(destination="both", file_path=str(tmp_path / "showcase.log"))
        )

        handlers = logging.getLogger().handlers
        assert len(handlers) == 2
        assert any(isinstance(h, RotatingFileHandler) for h in handlers)

    def test_records_below_level_are_dropped(self, tmp_path):
        log_file = tmp_path / "showcase.log"
        setup_logging(LoggingConfig(level="WARNING", destination="file", file_path=str(log_file)))

        get_logger("showcase.test").debug("hidden")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "hidden" not in log_file.read_text()
