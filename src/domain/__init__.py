"""Domain models and DTOs."""

from src.domain.household import HouseholdProfile, Pet, PetSize, PetType
from src.domain.library import ChoreLibraryItem
from src.domain.task import CleaningLevel, DueStatus, RecurrenceType, Task


__all__ = [
    "ChoreLibraryItem",
    "CleaningLevel",
    "DueStatus",
    "HouseholdProfile",
    "Pet",
    "PetSize",
    "PetType",
    "RecurrenceType",
    "Task",
]
