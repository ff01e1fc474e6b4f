"""Tests for logging utilities."""

import logging
from collections.abc import Iterator

import pytest

from speech_mastering.logging_utils import PACKAGE_LOGGER, TRACE_LEVEL, get_logger, set_log_level


@pytest.mark.unit
class TestGetLogger:
    """Test cases for get_logger."""

    def test_trace_level_registered(self) -> None:
        """Test the TRACE level name and logger method exist."""
        logger = get_logger("speech_mastering.test")
        assert logging.getLevelName(TRACE_LEVEL) == "TRACE"
        assert callable(getattr(logger, "trace"))

    def test_trace_messages_emitted(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test trace messages reach handlers at the TRACE level."""
        logger = get_logger("speech_mastering.test.trace")
        with caplog.at_level(TRACE_LEVEL, logger="speech_mastering.test.trace"):
            logger.trace("tuned %s", "gate")
        assert caplog.records[0].levelno == TRACE_LEVEL
        assert caplog.records[0].getMessage() == "tuned gate"


@pytest.mark.unit
class TestSetLogLevel:
    """Test cases for set_log_level."""

    @pytest.fixture(autouse=True)
    def restore_level(self) -> Iterator[None]:
        """Restore the package logger level after each test."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        level = package_logger.level
        yield
        package_logger.setLevel(level)

    def test_trace_by_name(self) -> None:
        """Test the trace name enables tuning output for module loggers."""
        set_log_level("trace")
        assert logging.getLogger(PACKAGE_LOGGER).level == TRACE_LEVEL
        assert get_logger("speech_mastering.filter_chain.adaptive").isEnabledFor(TRACE_LEVEL)

    def test_numeric_level(self) -> None:
        """Test numeric levels are applied as given."""
        set_log_level(logging.WARNING)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.WARNING

    def test_unknown_name_rejected(self) -> None:
        """Test a misspelt level name raises ValueError."""
        with pytest.raises(ValueError):
            set_log_level("verbose")

    def test_package_logger_has_null_handler(self) -> None:
        """Test the package stays silent until the application configures logging."""
        get_logger("speech_mastering.test.handlers")
        handlers = logging.getLogger(PACKAGE_LOGGER).handlers
        assert any(isinstance(handler, logging.NullHandler) for handler in handlers)
