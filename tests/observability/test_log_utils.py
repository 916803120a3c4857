"""
Test suite for logging helpers.

System role: Verification of swallowed-error logging
"""

import logging

from portfolio_assistant.observability.log_utils import (
    log_exception_with_context,
    safe_log_value,
)


class TestSafeLogValue:
    """Test suite for safe_log_value."""

    def test_should_summarize_collections(self) -> None:
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"

    def test_should_truncate_long_strings(self) -> None:
        # Act
        rendered = safe_log_value("x" * 50, max_length=10)

        # Assert
        assert rendered == "xxxxxxxxxx... (50 chars)"

    def test_none_should_render_as_text(self) -> None:
        assert safe_log_value(None) == "None"


class TestLogExceptionWithContext:
    """Test suite for log_exception_with_context."""

    def test_should_attach_context_and_error(self, caplog) -> None:
        # Arrange
        logger = logging.getLogger("tests.log_utils")

        # Act
        with caplog.at_level(logging.ERROR, logger="tests.log_utils"):
            log_exception_with_context(
                logger, "Failed to save chat messages", RuntimeError("disk full"), session_id="s-1"
            )

        # Assert
        record = caplog.records[-1]
        assert record.session_id == "s-1"
        assert record.error_type == "RuntimeError"
        assert record.error_msg == "disk full"
        assert record.exc_info is not None
