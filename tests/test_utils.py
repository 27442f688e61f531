"""Unit tests for utils module."""

import logging

import pytest

from harvester.utils import safe_int, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestSafeInt:
    """Tests for safe_int() function."""

    @pytest.mark.parametrize("value,expected", [
        ("12", 12),
        ("007", 7),
        (3, 3),
        ("x", None),
        ("", None),
        (None, None),
        ("9" * 5000, None),
    ])
    def test_safe_int(self, value, expected):
        assert safe_int(value) == expected


class TestSetupLogging:
    """Tests for setup_logging() function."""

    def test_console_format_has_level_and_message(self, restore_root_logger):
        setup_logging("debug")

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        handler = restore_root_logger.handlers[0]
        assert handler.formatter._fmt == "%(levelname)s - %(message)s"

    def test_custom_format(self, restore_root_logger):
        setup_logging(logging.WARNING, format_string="%(message)s")

        assert restore_root_logger.handlers[0].formatter._fmt == "%(message)s"

    def test_log_file_added(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "harvester.log"
        setup_logging("INFO", log_file)

        assert len(restore_root_logger.handlers) == 2
        logging.getLogger("harvester.test").info("hello")
        for handler in restore_root_logger.handlers:
            handler.flush()
        assert "INFO - hello" in log_file.read_text(encoding="utf-8")
