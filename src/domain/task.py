"""Task domain models and enums."""

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.core.config import constants


class RecurrenceType(StrEnum):
    """How a task repeats."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    CUSTOM = "custom"  # Anything else; resolved with the fallback rule


class CleaningLevel(StrEnum):
    """Depth of cleaning a task involves."""

    SURFACE = "surface"
    DEEP = "deep"


class DueStatus(StrEnum):
    """Where a task's due date falls relative to today."""

    OVERDUE = "overdue"
    DUE_TODAY = "due_today"
    UPCOMING = "upcoming"


class Task(BaseModel):
    """Task record as supplied by the storage layer.

    The scheduling core only reads tasks; it never mutates them.
    """

    id: str | None = Field(default=None, description="Unique task ID from database")
    name: str = Field(default="", description="Task name (e.g., 'Mop floor')")
    room_id: str | None = Field(default=None, description="Room the task belongs to")
    effort_points: int = Field(default=1, description="Points awarded on completion")
    suggested_frequency: str | None = Field(default=None, description="Frequency label from the chore library")
    recurrence_type: RecurrenceType | None = Field(default=None, description="Recurrence kind, None for one-off")
    recurrence_days: list[int] | None = Field(
        default=None,
        description="Weekday indices for weekly tasks (0=Sunday, 6=Saturday)",
    )
    recurrence_interval: int | None = Field(
        default=constants.DEFAULT_RECURRENCE_INTERVAL,
        description="Multiplier for daily and monthly cadence",
    )
    last_completed: datetime | None = Field(default=None, description="Most recent completion timestamp")
    created_at: datetime | None = Field(default=None, description="Creation timestamp")

    @field_validator("recurrence_type", mode="before")
    @classmethod
    def normalize_recurrence_type(cls, v: Any) -> Any:
        """Map unrecognised recurrence strings to CUSTOM so they take the fallback rule."""
        if v is None or isinstance(v, RecurrenceType):
            return v
        if isinstance(v, str):
            v = v.strip().lower()
            if not v:
                return None
            try:
                return RecurrenceType(v)
            except ValueError:
                return RecurrenceType.CUSTOM
        return v

    @property
    def interval(self) -> int:
        """Effective recurrence interval; anything below 1 counts as the default."""
        if self.recurrence_interval is None or self.recurrence_interval < 1:
            return constants.DEFAULT_RECURRENCE_INTERVAL
        return self.recurrence_interval
