"""Frequency advisor: densify suggested chore frequencies for busier households.

The advisor rewrites a human-readable frequency label; it never changes a
task's recurrence fields.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from src.core.config import constants
from src.domain.household import HouseholdProfile, Pet, PetSize, PetType
from src.models.service_models import PetSummary


logger = logging.getLogger(__name__)


def _pet_fields(pet: Pet | Mapping[str, Any]) -> tuple[str, str, int]:
    """Read (type, size, count) from a pet without validating it.

    Unknown types and sizes match no rule; a count that is not a positive
    integer adds nothing to the total.
    """
    if isinstance(pet, Pet):
        return pet.type, pet.size, pet.count
    count = pet.get("count")
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        count = 0
    return str(pet.get("type", "")), str(pet.get("size", "")), count


def summarize_pets(pets: Iterable[Pet | Mapping[str, Any]]) -> PetSummary:
    """Derive the advisor's flags from a pet roster."""
    roster = [_pet_fields(p) for p in pets]
    return PetSummary(
        has_dogs=any(pet_type == PetType.DOG for pet_type, _, _ in roster),
        has_large_dogs=any(pet_type == PetType.DOG and size == PetSize.LARGE for pet_type, size, _ in roster),
        has_cats=any(pet_type == PetType.CAT for pet_type, _, _ in roster),
        total_pets=sum(count for _, _, count in roster),
    )


def adjust_frequency(
    base_frequency: str,
    member_count: int,
    pets: Iterable[Pet | Mapping[str, Any]],
) -> str:
    """Adjust a suggested frequency label for the household's load.

    Rules are checked in order and the first match wins:
    - "Weekly" with any dog or cat, or 4+ members: "Twice weekly"
    - "Weekly" with a large dog: "Every 2-3 days"
    - "Monthly" with 3+ pets in total: "Fortnightly"

    Note that the large-dog rule can never fire, since any dog already matches
    the first rule.

    Args:
        base_frequency: Frequency label from the chore library (e.g., "Weekly")
        member_count: Number of people in the household
        pets: Pet roster as Pet models or mappings with type, size and count

    Returns:
        Adjusted frequency label, or base_frequency unchanged
    """
    summary = summarize_pets(pets)

    if base_frequency == "Weekly" and (
        summary.has_dogs or summary.has_cats or member_count >= constants.LARGE_HOUSEHOLD_MEMBER_COUNT
    ):
        return "Twice weekly"
    if base_frequency == "Weekly" and summary.has_large_dogs:
        return "Every 2-3 days"
    if base_frequency == "Monthly" and summary.total_pets >= constants.MANY_PETS_THRESHOLD:
        return "Fortnightly"

    return base_frequency


def adjust_frequency_for_household(base_frequency: str, household: HouseholdProfile) -> str:
    """Adjust a suggested frequency label for a household profile."""
    adjusted = adjust_frequency(base_frequency, household.member_count, household.pets)
    if adjusted != base_frequency:
        logger.debug("Adjusted frequency %r to %r for household", base_frequency, adjusted)
    return adjusted
