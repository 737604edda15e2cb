"""Tests for structured logging helpers and correlation IDs."""

import logging

from docqa.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from docqa.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)


class TestSafeLogValue:
    """Tests for safe_log_value conversion."""

    def test_none(self) -> None:
        assert safe_log_value(None) == "None"

    def test_collections_are_summarized(self) -> None:
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"

    def test_long_strings_are_truncated(self) -> None:
        """Truncated output keeps the prefix and reports the total length."""
        result = safe_log_value("x" * 20, max_length=5)
        assert result == "xxxxx... (truncated, 20 total)"


class TestLogWithContext:
    """Tests for structured log records."""

    def test_context_is_attached_to_record(self, caplog) -> None:
        logger = logging.getLogger("docqa.tests.context")

        with caplog.at_level(logging.INFO, logger="docqa.tests.context"):
            log_with_context(logger, logging.INFO, "Answered", doc_id="abc", sources=[1, 2])

        record = caplog.records[-1]
        assert record.doc_id == "abc"
        assert record.sources == "list(2 items)"

    def test_reserved_keys_are_prefixed(self, caplog) -> None:
        """Keys clashing with LogRecord attributes do not raise."""
        logger = logging.getLogger("docqa.tests.reserved")

        with caplog.at_level(logging.INFO, logger="docqa.tests.reserved"):
            log_with_context(logger, logging.INFO, "Stored", name="policy.pdf")

        assert caplog.records[-1].ctx_name == "policy.pdf"

    def test_exception_context(self, caplog) -> None:
        logger = logging.getLogger("docqa.tests.exception")

        with caplog.at_level(logging.ERROR, logger="docqa.tests.exception"):
            log_exception_with_context(logger, "Save failed", OSError("disk full"), operation="save")

        record = caplog.records[-1]
        assert record.error_type == "OSError"
        assert record.error_msg == "disk full"
        assert record.operation == "save"


class TestCorrelationId:
    def test_generates_id_when_missing(self) -> None:
        value = set_correlation_id()
        assert value
        assert get_correlation_id() == value
        clear_correlation_id()
        assert get_correlation_id() == ""

    def test_keeps_supplied_id(self) -> None:
        assert set_correlation_id("req-1") == "req-1"
        clear_correlation_id()
