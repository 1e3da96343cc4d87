"""Pytest configuration and fixtures."""

import logging
from typing import Callable, Iterator, List

import pytest

from chainlog import DEFAULT_LOGGER_NAME, TRACE


@pytest.fixture
def chain_records(
    caplog: pytest.LogCaptureFixture,
) -> Iterator[Callable[[], List[logging.LogRecord]]]:
    """Capture every record sent to the chainlog logger, TRACE included.

    Yields a function returning the records captured so far.
    """

    def records() -> List[logging.LogRecord]:
        return [r for r in caplog.records if r.name == DEFAULT_LOGGER_NAME]

    with caplog.at_level(TRACE, logger=DEFAULT_LOGGER_NAME):
        yield records


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    """Put the root logger's handlers and level back after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield root
    finally:
        for handler in list(root.handlers):
            if handler not in handlers:
                handler.close()
            root.removeHandler(handler)
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)
