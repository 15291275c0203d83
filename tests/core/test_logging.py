"""
Tests for the logging helpers.
"""

import logging

from rich.logging import RichHandler

from turn_tracker.core.logging import log_debug, log_warning, setup_logging


def test_setup_logging_installs_rich_handler(mocker):
    basic_config = mocker.patch("turn_tracker.core.logging.logging.basicConfig")
    setup_logging(logging.DEBUG)
    kwargs = basic_config.call_args.kwargs
    assert kwargs["level"] == logging.DEBUG
    assert isinstance(kwargs["handlers"][0], RichHandler)


def test_log_helpers_append_context(caplog):
    with caplog.at_level(logging.DEBUG, logger="turn_tracker"):
        log_warning("Could not add effect", {"character": "Jim"})
        log_debug("plain message")
    messages = [record.getMessage() for record in caplog.records]
    assert messages == ["Could not add effect [character=Jim]", "plain message"]
