"""Unit tests for logging and observability helpers."""

import logging
from datetime import datetime
from unittest.mock import MagicMock, patch

import pytest

from src.core.logging import configure_logfire, log_with_context, span
from src.domain.task import Task
from src.services import scheduling_service


@pytest.mark.unit
class TestLogfire:
    """Tests for Logfire configuration and spans."""

    def test_configure_logfire_only_sends_with_token(self):
        with patch("src.core.logging.logfire") as mock_logfire:
            configure_logfire()

        mock_logfire.configure.assert_called_once()
        kwargs = mock_logfire.configure.call_args.kwargs
        assert kwargs["service_name"] == "choreshare"
        assert kwargs["send_to_logfire"] == "if-token-present"

    def test_span_delegates_to_logfire(self):
        with patch("src.core.logging.logfire") as mock_logfire:
            span("scheduling_service.test")

        mock_logfire.span.assert_called_once_with("scheduling_service.test")

    def test_sort_by_urgency_opens_span(self):
        """Batch scheduling runs inside a named span."""
        with patch("src.services.scheduling_service.span", return_value=MagicMock()) as mock_span:
            scheduling_service.sort_by_urgency([Task(recurrence_type="daily")], now=datetime(2024, 3, 13, 9))

        mock_span.assert_called_once_with("scheduling_service.sort_by_urgency")


@pytest.mark.unit
def test_log_with_context_adds_extra_fields(caplog):
    """Context keyword arguments become attributes on the log record."""
    logger = logging.getLogger("tests.logging")

    with caplog.at_level(logging.DEBUG, logger="tests.logging"):
        log_with_context(logger, "debug", "Weekly fallback", task_id="abc")

    assert caplog.records[0].message == "Weekly fallback"
    assert caplog.records[0].task_id == "abc"


@pytest.mark.unit
def test_weekly_fallback_is_logged(caplog):
    """Taking the fallback rule for a weekly task without days is logged at debug level."""
    task = Task(id="t1", recurrence_type="weekly", recurrence_days=[])

    with caplog.at_level(logging.DEBUG, logger="src.services.scheduling_service"):
        scheduling_service.next_due_date(task, now=datetime(2024, 3, 13, 9))

    assert any("t1" in r.getMessage() and "fallback" in r.getMessage() for r in caplog.records)
