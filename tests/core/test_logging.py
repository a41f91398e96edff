"""
Tests for the logging setup.
"""

import logging

from core.logging import log_debug, setup_logging
from rich.logging import RichHandler


def test_setup_logging_does_not_repeat_the_level(mocker):
    basic_config = mocker.patch("core.logging.logging.basicConfig")

    handler = setup_logging(logging.DEBUG)

    assert isinstance(handler, RichHandler)
    assert "levelname" not in handler.formatter._fmt
    basic_config.assert_called_once_with(level=logging.DEBUG, handlers=[handler])


def test_context_is_appended(caplog):
    with caplog.at_level(logging.DEBUG, logger="roster"):
        log_debug("Opened character list.", {"slot": 2})
    assert "Opened character list. [slot=2]" in caplog.text
