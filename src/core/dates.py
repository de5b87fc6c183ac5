"""Calendar-date helpers shared by the scheduling services.

Every timestamp is reduced to a local calendar date before any arithmetic:
aware datetimes are converted into the configured local timezone, naive
datetimes are taken as already local.
"""

from datetime import date, datetime

from dateutil import parser as dateutil_parser

from src.core.config import settings


_MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def current_time() -> datetime:
    """Return the current time in the local timezone."""
    return datetime.now(settings.local_timezone())


def to_local_date(value: datetime | date) -> date:
    """Return the local calendar date of a timestamp."""
    if not isinstance(value, datetime):
        return value
    if value.tzinfo is None:
        return value.date()
    return value.astimezone(settings.local_timezone()).date()


def local_today(now: datetime | None = None) -> date:
    """Return today's local date, snapshotting the clock when `now` is not given."""
    return to_local_date(now if now is not None else current_time())


def weekday_index(day: date) -> int:
    """Weekday index with 0=Sunday through 6=Saturday."""
    return day.isoweekday() % 7


def format_date(value: str | date | datetime) -> str:
    """Format a date as a short en-GB label (e.g., "5 Jan").

    Args:
        value: ISO date or datetime string, date, or datetime

    Returns:
        Day of month followed by the abbreviated month name

    Raises:
        ValueError: If a string value is not a valid ISO date
    """
    if isinstance(value, str):
        value = dateutil_parser.isoparse(value.strip())
    day = to_local_date(value)
    return f"{day.day} {_MONTH_ABBREVIATIONS[day.month - 1]}"
