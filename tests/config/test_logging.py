# topmark:header:start
#
#   project      : Bashful
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the diagnostics logging helpers (`bashful.config.logging`)."""

from __future__ import annotations

import logging

import pytest

from bashful.config.logging import (
    LOG_LEVEL_ENV,
    TRACE_LEVEL,
    BashfulLogger,
    ChalkFormatter,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)
from tests.conftest import parametrize


@parametrize(
    ("value", "expected"),
    [
        (None, None),
        ("", None),
        ("trace", TRACE_LEVEL),
        (" Debug ", logging.DEBUG),
        ("warn", logging.WARNING),
        ("15", 15),
        ("loud", None),
    ],
)
def test_resolve_env_log_level(value: str | None, expected: int | None) -> None:
    """Level names (any case) and numbers are accepted; others are ignored."""
    environ = {} if value is None else {LOG_LEVEL_ENV: value}
    assert resolve_env_log_level(environ) == expected


def test_get_logger_has_trace() -> None:
    """Loggers are BashfulLogger instances and emit TRACE records."""
    logger = get_logger("bashful.tests.trace")
    assert isinstance(logger, BashfulLogger)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_trace_records_are_captured(caplog: pytest.LogCaptureFixture) -> None:
    """`trace()` logs at TRACE_LEVEL when enabled."""
    logger = get_logger("bashful.tests.capture")
    with caplog.at_level(TRACE_LEVEL, logger="bashful.tests.capture"):
        logger.trace("scanning %s", "demo.sh")
    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
        (TRACE_LEVEL, "scanning demo.sh")
    ]


def test_setup_logging_installs_single_stderr_handler() -> None:
    """Repeated setup replaces the handler instead of stacking them."""
    setup_logging(level=logging.DEBUG)
    setup_logging(level=logging.INFO)
    root = logging.getLogger()
    try:
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ChalkFormatter)
    finally:
        setup_logging(level=TRACE_LEVEL)


def test_chalk_formatter_keeps_message_text() -> None:
    """The formatted record contains the level name and message."""
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "disk %s", ("full",), None)
    formatted = ChalkFormatter("[%(levelname)s] %(message)s").format(record)
    assert "[WARNING] disk full" in formatted
