from web_invoker.utils.logger import setup_logging
from web_invoker.exceptions import LogDirectoryError
from unittest.mock import MagicMock
from logging.handlers import RotatingFileHandler
import logging
import pytest


@pytest.fixture
def test_logger():
    """A dedicated logger whose handlers are removed after each test."""
    logger = logging.getLogger("web_invoker_test_logger")
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []


def test_logging_setup_with_directory(tmp_path, test_logger, caplog):
    """Tests whether a log file can be successfully set up in a temp directory."""
    log_file = "application.log"

    setup_logging(test_logger, log_file=log_file, log_directory=tmp_path, log_level=logging.INFO)
    assert f"Logging setup complete (folder: {tmp_path / log_file})" in caplog.text
    assert test_logger.level == logging.INFO
    assert any(isinstance(handler, RotatingFileHandler) for handler in test_logger.handlers)

    test_logger.info("written to file")
    for handler in test_logger.handlers:
        handler.flush()
    assert "written to file" in (tmp_path / log_file).read_text()


def test_logging_setup_without_directory(test_logger, caplog):
    """Tests whether a logger can be successfully set up without rotating file logging (console logging only)."""
    setup_logging(test_logger, log_file=None)
    assert "Logging setup complete (console_only)" in caplog.text
    assert len(test_logger.handlers) == 1


def test_logging_filter_is_applied(tmp_path, test_logger):
    class DropSecrets(logging.Filter):
        def filter(self, record):
            return "secret" not in record.getMessage()

    logging_filter = DropSecrets()
    setup_logging(test_logger, log_directory=tmp_path, logging_filter=logging_filter)
    assert all(logging_filter in handler.filters for handler in test_logger.handlers)


def test_logging_directory_setup_failure(monkeypatch, test_logger, caplog):
    """Tests whether unsuccessfully setting up a logger will raise the required exception"""
    monkeypatch.setattr(
        "web_invoker.utils.logger.get_default_writable_directory", MagicMock(side_effect=RuntimeError())
    )

    with pytest.raises(LogDirectoryError) as excinfo:
        setup_logging(test_logger, log_file="app.log", log_directory=None)

    err = "Could not identify or create a log directory due to an error"
    assert err in str(excinfo.value)
    assert "Failed to identify a directory for logging" in caplog.text
