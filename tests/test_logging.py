"""
Tests for the logging helpers.
"""

import logging

from elo_list.utils.logging import LOG_LEVELS, get_logger, set_log_level


def test_get_logger_namespaces():
    assert get_logger("tools").name == "elo_list.tools"
    assert get_logger("elo_list.core.rating").name == "elo_list.core.rating"
    assert get_logger("elo_list").name == "elo_list"


def test_set_log_level():
    root = logging.getLogger("elo_list")
    previous = root.level
    try:
        set_log_level("debug")
        assert root.level == logging.DEBUG
        set_log_level("silent")
        assert root.level == LOG_LEVELS["silent"]
        set_log_level(logging.INFO)
        assert root.level == logging.INFO
        set_log_level("unknown")
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)


def test_updates_log_at_debug(caplog):
    from elo_list.core.items import parse_list
    from elo_list.core.rating import record_comparison

    with caplog.at_level(logging.DEBUG, logger="elo_list"):
        record_comparison(parse_list("Alice (650)\nBob (600)"), 0, 1)

    assert "'Alice' beat 'Bob'" in caplog.text
