"""Error classification utilities for recurrence configuration.

The scheduling core never raises on bad recurrence data; it degrades to a
fallback rule instead. These helpers let callers find out which fallback a
task would hit and why, so they can validate input before saving it.
"""

from enum import Enum

from pydantic import BaseModel

from src.core.config import constants
from src.domain.task import RecurrenceType, Task


class ErrorCategory(Enum):
    """Categories of recurrence configuration problems."""

    WEEKLY_WITHOUT_DAYS = "weekly_without_days"
    INVALID_WEEKDAY = "invalid_weekday"
    INVALID_INTERVAL = "invalid_interval"
    MISSING_ANCHOR = "missing_anchor"


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ErrorCode:
    """Error codes for specific error conditions."""

    ERR_WEEKLY_WITHOUT_DAYS = "ERR_WEEKLY_WITHOUT_DAYS"
    ERR_INVALID_WEEKDAY = "ERR_INVALID_WEEKDAY"
    ERR_INVALID_INTERVAL = "ERR_INVALID_INTERVAL"
    ERR_MISSING_ANCHOR = "ERR_MISSING_ANCHOR"


class ErrorResponse(BaseModel):
    """Structured error response with user-friendly messaging."""

    code: str
    category: ErrorCategory
    message: str
    suggestion: str
    severity: ErrorSeverity


def diagnose_recurrence(task: Task) -> list[ErrorResponse]:
    """Report recurrence settings that make the resolver fall back.

    Args:
        task: Task to inspect

    Returns:
        One ErrorResponse per problem found; an empty list when the task is well formed
    """
    issues: list[ErrorResponse] = []

    if task.recurrence_type == RecurrenceType.WEEKLY:
        days = task.recurrence_days or []
        if not days:
            issues.append(
                ErrorResponse(
                    code=ErrorCode.ERR_WEEKLY_WITHOUT_DAYS,
                    category=ErrorCategory.WEEKLY_WITHOUT_DAYS,
                    message="Weekly task has no days selected, so it repeats every day.",
                    suggestion="Pick at least one day of the week.",
                    severity=ErrorSeverity.MEDIUM,
                )
            )
        invalid = sorted(
            {d for d in days if not constants.MIN_WEEKDAY_INDEX <= d <= constants.MAX_WEEKDAY_INDEX}
        )
        if invalid:
            issues.append(
                ErrorResponse(
                    code=ErrorCode.ERR_INVALID_WEEKDAY,
                    category=ErrorCategory.INVALID_WEEKDAY,
                    message=f"Weekday indices {invalid} are outside 0 (Sunday) to 6 (Saturday) and are ignored.",
                    suggestion="Use 0 for Sunday through 6 for Saturday.",
                    severity=ErrorSeverity.MEDIUM if len(invalid) < len(set(days)) else ErrorSeverity.HIGH,
                )
            )

    if task.recurrence_type in (RecurrenceType.DAILY, RecurrenceType.MONTHLY) and (
        task.recurrence_interval is None or task.recurrence_interval < 1
    ):
        issues.append(
            ErrorResponse(
                code=ErrorCode.ERR_INVALID_INTERVAL,
                category=ErrorCategory.INVALID_INTERVAL,
                message=f"Recurrence interval {task.recurrence_interval} is not positive; using 1.",
                suggestion="Use a whole number of 1 or more.",
                severity=ErrorSeverity.LOW,
            )
        )

    if task.last_completed is None and task.created_at is None:
        issues.append(
            ErrorResponse(
                code=ErrorCode.ERR_MISSING_ANCHOR,
                category=ErrorCategory.MISSING_ANCHOR,
                message="Task has no completion or creation time; scheduling from today.",
                suggestion="Store the task's creation time.",
                severity=ErrorSeverity.LOW,
            )
        )

    return issues
