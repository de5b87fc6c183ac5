"""Logging and observability configuration using Pydantic Logfire.

All modules should use Python's standard logging library (logging.getLogger(__name__)),
and Logfire will capture and enrich these logs once configured.

Standard usage:
    import logging
    logger = logging.getLogger(__name__)
    logger.debug("Message %s", value)

Structured logging utilities:
    log_with_context(logger, "info", "Message", task_id="123", status="overdue")
"""

import logging

import logfire

from src.core.config import settings


def configure_logfire() -> None:
    """Configure Pydantic Logfire with token from environment.

    This package is a library, so the host application calls this once at
    startup; the scheduling functions never configure Logfire themselves.
    Nothing is sent unless a token is present, so this is safe to call in tests
    and local development.
    """
    logfire.configure(
        token=settings.logfire_token,
        service_name="choreshare",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire="if-token-present",
    )

    logger = logging.getLogger(__name__)
    logger.info("Logfire configured successfully")


def span(name: str) -> logfire.LogfireSpan:
    """Create a custom span for service layer functions.

    Usage:
        with span("scheduling_service.sort_by_urgency"):
            ...
    """
    return logfire.span(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **context: object,
) -> None:
    """Log a message with structured context fields.

    Args:
        logger: Logger instance to use
        level: Log level ("debug", "info", "warning", "error", "critical")
        message: Log message
        **context: Additional context fields (task_id, recurrence_type, etc.)

    Usage:
        log_with_context(logger, "debug", "Weekly fallback", task_id="123")
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=context)
