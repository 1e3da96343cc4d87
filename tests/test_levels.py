"""Tests for severity levels."""

import logging

import pytest

from chainlog import TRACE, ConfigurationError, Level


def test_trace_is_registered_with_logging():
    assert logging.getLevelName(TRACE) == "TRACE"
    assert TRACE < logging.DEBUG


def test_levels_map_to_stdlib_numbers():
    assert Level.TRACE.levelno == TRACE
    assert Level.DEBUG.levelno == logging.DEBUG
    assert Level.INFO.levelno == logging.INFO
    assert Level.WARN.levelno == logging.WARNING
    assert Level.ERROR.levelno == logging.ERROR


def test_levels_are_ordered_by_urgency():
    assert Level.TRACE < Level.DEBUG < Level.INFO < Level.WARN < Level.ERROR
    assert sorted(Level, reverse=True)[0] is Level.ERROR


@pytest.mark.parametrize(
    "value, expected",
    [
        ("trace", Level.TRACE),
        ("DEBUG", Level.DEBUG),
        (" Info ", Level.INFO),
        ("warn", Level.WARN),
        ("warning", Level.WARN),
        ("Error", Level.ERROR),
        (logging.WARNING, Level.WARN),
        (5, Level.TRACE),
        (Level.INFO, Level.INFO),
    ],
)
def test_parse_accepts_names_numbers_and_members(value, expected):
    assert Level.parse(value) is expected


@pytest.mark.parametrize("value", ["critical", "", "loud", 15, logging.CRITICAL, True, None, 2.5])
def test_parse_rejects_unknown_values(value):
    with pytest.raises(ConfigurationError) as exc_info:
        Level.parse(value)

    assert exc_info.value.field == "level"
    assert "trace, debug, info, warn, error" in str(exc_info.value)
