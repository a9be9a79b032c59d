"""Tests for logger functionality."""

import logging

import pytest


def test_logger_set_level():
    """Test setting log level via string."""
    from pulsecode import logger

    logger.set_log_level("DEBUG")
    assert logger.logger.level == logging.DEBUG
    logger.set_log_level(logging.INFO)
    assert logger.logger.level == logging.INFO


def test_unknown_level():
    from pulsecode import logger

    with pytest.raises(ValueError):
        logger.set_log_level("LOUD")


def test_color_formatter():
    from pulsecode.logger import ColorFormatter

    record = logging.LogRecord(
        "pulsecode", logging.WARNING, __file__, 1, "careful", None, None
    )
    text = ColorFormatter().format(record)

    assert text.startswith(ColorFormatter.YELLOW)
    assert "[WARNING]" in text
    assert text.endswith(ColorFormatter.RESET)
