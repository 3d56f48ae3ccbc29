"""Tests for relkit.output.log module."""

from __future__ import annotations

import logging

import pytest

from relkit.output.log import (
    LoggerProtocol,
    MockLogger,
    NullLogger,
    StdLogger,
    configure_logging,
)


def test_implementations_satisfy_protocol() -> None:
    assert isinstance(StdLogger(), LoggerProtocol)
    assert isinstance(NullLogger(), LoggerProtocol)
    assert isinstance(MockLogger(), LoggerProtocol)


def test_mock_logger_captures_fields() -> None:
    logger = MockLogger()
    logger.debug("creating milestone", method="POST", url="https://x")

    assert logger.records[0].message == "creating milestone"
    assert logger.records[0].fields == {"method": "POST", "url": "https://x"}
    assert logger.text == "creating milestone method=POST url=https://x"


def test_std_logger_forwards_to_logging(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="relkit.test"):
        StdLogger("relkit.test").debug("creating milestone", method="POST")

    assert caplog.messages == ["creating milestone method=POST"]


def test_std_logger_respects_level(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="relkit.test"):
        StdLogger("relkit.test").debug("dropped")

    assert caplog.messages == []


def test_configure_logging_sets_level_and_single_handler() -> None:
    from rich.logging import RichHandler

    logger = logging.getLogger("relkit")
    saved = (logger.level, list(logger.handlers))
    try:
        configure_logging(verbose=True)
        configure_logging(verbose=True)
        assert logger.level == logging.DEBUG
        assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1

        configure_logging(verbose=False)
        assert logger.level == logging.WARNING
    finally:
        logger.setLevel(saved[0])
        logger.handlers = saved[1]
