"""Pydantic models for service layer return types.

These models provide type safety at service boundaries for values the
scheduling core derives on every call; none of them are persisted.
"""

from datetime import date

from pydantic import BaseModel

from src.domain.library import ChoreLibraryItem
from src.domain.task import DueStatus, RecurrenceType, Task


class TaskStatus(BaseModel):
    """Status of a task relative to today, with the signed day offset."""

    status: DueStatus
    days_diff: int


class TaskSchedule(BaseModel):
    """A task paired with its resolved due date and status."""

    task: Task
    due_date: date
    status: DueStatus
    days_diff: int


class PetSummary(BaseModel):
    """Flags derived from a household pet roster."""

    has_dogs: bool
    has_large_dogs: bool
    has_cats: bool
    total_pets: int


class SuggestedChore(BaseModel):
    """Library chore with its frequency adjusted for a household."""

    item: ChoreLibraryItem
    adjusted_frequency: str
    recurrence_type: RecurrenceType | None = None
