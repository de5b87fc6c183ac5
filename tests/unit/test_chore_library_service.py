"""Unit tests for chore_library_service module."""

import pytest

from src.domain.household import HouseholdProfile, Pet, PetType
from src.domain.task import CleaningLevel, RecurrenceType
from src.services import chore_library_service


@pytest.mark.unit
class TestLibraryLookups:
    """Tests for category and name lookups."""

    def test_categories_in_library_order(self):
        assert chore_library_service.get_all_categories() == [
            "Kitchen",
            "Bathroom",
            "Living Room",
            "Bedroom",
            "Laundry",
            "Whole House",
        ]

    def test_chores_by_category(self):
        laundry = chore_library_service.get_chores_by_category("Laundry")

        assert [c.name for c in laundry] == [
            "Do laundry",
            "Fold & put away",
            "Clean lint trap",
            "Wipe washer door seal",
            "Clean washer drum",
            "Clean dryer vent",
        ]
        assert all(c.room_category == "Laundry" for c in laundry)

    def test_unknown_category_is_empty(self):
        assert chore_library_service.get_chores_by_category("Garage") == []

    def test_find_chore_first_match(self):
        item = chore_library_service.find_chore("Mop floor")

        assert item is not None
        assert item.room_category == "Kitchen"

    def test_find_chore_in_category(self):
        item = chore_library_service.find_chore("Mop floor", category="Bathroom")

        assert item is not None
        assert item.room_category == "Bathroom"
        assert item.suggested_level == CleaningLevel.SURFACE
        assert item.suggested_frequency == "Weekly"

    def test_find_chore_missing(self):
        assert chore_library_service.find_chore("Mow lawn") is None


@pytest.mark.unit
class TestSuggestChores:
    """Tests for suggest_chores function."""

    def test_household_with_cat(self):
        """Weekly chores are densified and mapped to a weekly recurrence."""
        household = HouseholdProfile(member_count=2, pets=[Pet(type=PetType.CAT)])

        suggestions = {s.item.name: s for s in chore_library_service.suggest_chores("Kitchen", household)}

        assert suggestions["Mop floor"].adjusted_frequency == "Twice weekly"
        assert suggestions["Mop floor"].recurrence_type == RecurrenceType.WEEKLY
        assert suggestions["Wipe worktops"].adjusted_frequency == "Daily"
        assert suggestions["Wipe worktops"].recurrence_type == RecurrenceType.DAILY
        assert suggestions["Degrease extractor hood"].recurrence_type is None

    def test_many_pets_make_monthly_fortnightly(self):
        household = HouseholdProfile(member_count=1, pets=[Pet(type=PetType.OTHER, count=3)])

        suggestions = {s.item.name: s for s in chore_library_service.suggest_chores("Bedroom", household)}

        assert suggestions["Vacuum mattress"].adjusted_frequency == "Fortnightly"
        assert suggestions["Vacuum mattress"].recurrence_type == RecurrenceType.MONTHLY
        assert suggestions["Change sheets"].adjusted_frequency == "Weekly"

    def test_unknown_category(self):
        assert chore_library_service.suggest_chores("Garage", HouseholdProfile()) == []
