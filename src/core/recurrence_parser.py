"""Recurrence label utilities for chore scheduling."""

from src.core.config import constants
from src.domain.task import RecurrenceType, Task


WEEKDAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]

_FREQUENCY_TO_RECURRENCE: dict[str, RecurrenceType] = {
    "daily": RecurrenceType.DAILY,
    "weekly": RecurrenceType.WEEKLY,
    "twice weekly": RecurrenceType.WEEKLY,
    "monthly": RecurrenceType.MONTHLY,
    "fortnightly": RecurrenceType.MONTHLY,
}


def frequency_to_recurrence_type(frequency: str | None) -> RecurrenceType | None:
    """Map a chore library frequency label to a recurrence type.

    Args:
        frequency: Suggested frequency label (e.g., "Weekly", "Twice weekly")

    Returns:
        Matching RecurrenceType, or None for labels with no direct mapping
        (e.g., "Quarterly", "As needed"), in which case callers keep their current choice
    """
    if not frequency:
        return None
    return _FREQUENCY_TO_RECURRENCE.get(frequency.strip().lower())


def _ordinal(n: int) -> str:
    suffix = "th"
    if n % 100 not in (11, 12, 13):
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def describe_recurrence(task: Task) -> str:
    """Convert a task's recurrence rule to human-readable text.

    Args:
        task: Task whose recurrence fields are described

    Returns:
        Human-readable description (e.g., "every Monday, Thursday")
    """
    interval = task.interval

    match task.recurrence_type:
        case RecurrenceType.DAILY:
            if interval == 1:
                return "daily"
            return f"every {interval} days"
        case RecurrenceType.WEEKLY if task.recurrence_days:
            days = sorted(
                {d for d in task.recurrence_days if constants.MIN_WEEKDAY_INDEX <= d <= constants.MAX_WEEKDAY_INDEX}
            )
            if not days:
                return "weekly"
            if len(days) == len(WEEKDAY_NAMES):
                return "every day"
            return f"every {', '.join(WEEKDAY_NAMES[d] for d in days)}"
        case RecurrenceType.MONTHLY:
            due_day = _ordinal(constants.MONTHLY_DUE_DAY)
            if interval == 1:
                return f"monthly on the {due_day}"
            return f"every {interval} months on the {due_day}"
        case None:
            return "one-off"
        case _:
            # Custom, or weekly without days
            return "custom"
