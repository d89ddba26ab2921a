"""Tests for the logging setup."""

import logging
import os
from unittest.mock import patch

import pytest

from winstash.debug import is_debug, set_debug
from winstash.logging_setup import LogObjects, ScreenLogFormatter, get_logger, init_logger


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    init_logger("/dev/null", force_debug=True)


def make_record(level, msg="No window to show"):
    return logging.LogRecord("winstash", level, __file__, 1, msg, None, None)


def test_get_logger_uses_shared_handlers():
    init_logger()
    log = get_logger("test_logger")
    assert log.propagate is False
    assert log.handlers == LogObjects.handlers
    # asking twice doesn't duplicate handlers
    assert get_logger("test_logger").handlers == LogObjects.handlers


def test_init_logger_with_file(tmp_path):
    init_logger(str(tmp_path / "debug.log"))
    assert [type(h) for h in LogObjects.handlers] == [logging.FileHandler, logging.StreamHandler]
    LogObjects.handlers[0].close()


def test_logger_level_follows_debug_state():
    set_debug(False)
    try:
        assert get_logger("test_level").level == logging.WARNING
    finally:
        set_debug(True)
    assert get_logger("test_level").level == logging.DEBUG
    assert get_logger("test_level", logging.ERROR).level == logging.ERROR


def test_force_debug():
    set_debug(False)
    init_logger(force_debug=True)
    assert is_debug()


def test_screen_formatter_plain():
    set_debug(False)
    try:
        with patch.dict(os.environ, {"NO_COLOR": "1"}):
            formatter = ScreenLogFormatter()
    finally:
        set_debug(True)
    assert formatter.format(make_record(logging.ERROR)) == "No window to show"


def test_screen_formatter_colors():
    set_debug(False)
    try:
        with patch.dict(os.environ, {"NO_COLOR": "", "FORCE_COLOR": "1"}):
            formatter = ScreenLogFormatter()
    finally:
        set_debug(True)
    assert formatter.format(make_record(logging.ERROR)) == "\x1b[31;1mNo window to show\x1b[0m"
    assert formatter.format(make_record(logging.INFO)) == "No window to show"


def test_init_logger_closes_previous_handlers(tmp_path):
    init_logger(str(tmp_path / "first.log"))
    file_handler = LogObjects.handlers[0]
    assert file_handler.stream is not None

    init_logger()
    assert file_handler.stream is None
    assert file_handler not in LogObjects.handlers


def test_set_debug_toggles_state():
    set_debug(False)
    try:
        assert is_debug() is False
    finally:
        set_debug(True)
    assert is_debug() is True
