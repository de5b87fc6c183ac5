"""Chore library domain models."""

from pydantic import BaseModel, Field

from src.domain.task import CleaningLevel


class ChoreLibraryItem(BaseModel):
    """A suggested chore from the built-in library."""

    name: str = Field(..., description="Chore name (e.g., 'Wipe worktops')")
    suggested_level: CleaningLevel = Field(..., description="surface or deep")
    suggested_frequency: str = Field(..., description="Frequency label (e.g., 'Weekly')")
    room_category: str = Field(..., description="Room category (e.g., 'Kitchen')")
