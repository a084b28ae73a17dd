"""Tests for src.logging_config."""

import logging
import logging.handlers

import pytest

from src.logging_config import LOG_FILE_NAME, setup_logging


@pytest.fixture
def bare_root_logger():
    """Detach the root handlers for one test and restore them afterwards."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


class TestSetupLogging:
    def test_file_and_console_handlers(self, bare_root_logger, tmp_path):
        setup_logging("INFO", log_dir=tmp_path)
        handlers = bare_root_logger.handlers
        file_handlers = [
            h for h in handlers if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        console_handlers = [h for h in handlers if h not in file_handlers]
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.DEBUG
        assert len(console_handlers) == 1
        assert console_handlers[0].level == logging.INFO
        assert (tmp_path / LOG_FILE_NAME).exists()

    def test_unknown_level_falls_back_to_warning(self, bare_root_logger, tmp_path):
        setup_logging("chatty", log_dir=tmp_path)
        console = [
            h for h in bare_root_logger.handlers
            if not isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert console[0].level == logging.WARNING

    def test_second_call_is_noop(self, bare_root_logger, tmp_path):
        setup_logging("INFO", log_dir=tmp_path)
        setup_logging("DEBUG", log_dir=tmp_path / "other")
        assert len(bare_root_logger.handlers) == 2
        assert not (tmp_path / "other").exists()
