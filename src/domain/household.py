"""Household profile domain models and enums."""

from enum import StrEnum

from pydantic import BaseModel, Field


class PetType(StrEnum):
    """Kind of pet living in the household."""

    DOG = "dog"
    CAT = "cat"
    OTHER = "other"


class PetSize(StrEnum):
    """Rough pet size."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class Pet(BaseModel):
    """One entry in the household pet roster."""

    type: PetType = Field(..., description="dog, cat or other")
    size: PetSize = Field(default=PetSize.MEDIUM, description="small, medium or large")
    count: int = Field(default=1, ge=1, description="How many pets of this kind")


class HouseholdProfile(BaseModel):
    """Occupants and pets, used to densify suggested chore frequencies."""

    member_count: int = Field(default=1, ge=1, description="Number of people living in the household")
    pets: list[Pet] = Field(default_factory=list, description="Pet roster in entry order")
