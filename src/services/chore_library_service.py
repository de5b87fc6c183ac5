"""Built-in chore library and household-aware suggestions."""

import logging

from src.core.recurrence_parser import frequency_to_recurrence_type
from src.domain.household import HouseholdProfile
from src.domain.library import ChoreLibraryItem
from src.domain.task import CleaningLevel
from src.models.service_models import SuggestedChore
from src.services.frequency_service import adjust_frequency_for_household


logger = logging.getLogger(__name__)

_SURFACE = CleaningLevel.SURFACE
_DEEP = CleaningLevel.DEEP

# (room_category, name, suggested_level, suggested_frequency)
_CATALOG: tuple[tuple[str, str, CleaningLevel, str], ...] = (
    ("Kitchen", "Wipe worktops", _SURFACE, "Daily"),
    ("Kitchen", "Clean hob", _SURFACE, "Daily"),
    ("Kitchen", "Load/unload dishwasher", _SURFACE, "Daily"),
    ("Kitchen", "Wipe cabinet fronts", _SURFACE, "Weekly"),
    ("Kitchen", "Clean microwave", _SURFACE, "Weekly"),
    ("Kitchen", "Mop floor", _SURFACE, "Weekly"),
    ("Kitchen", "Clean fridge exterior", _SURFACE, "Weekly"),
    ("Kitchen", "Empty/clean bin", _SURFACE, "Weekly"),
    ("Kitchen", "Clean toaster", _SURFACE, "Weekly"),
    ("Kitchen", "Clean air fryer", _SURFACE, "Weekly"),
    ("Kitchen", "Descale kettle", _DEEP, "Monthly"),
    ("Kitchen", "Clean coffee maker", _DEEP, "Monthly"),
    ("Kitchen", "Deep clean oven", _DEEP, "Monthly"),
    ("Kitchen", "Clean fridge interior", _DEEP, "Monthly"),
    ("Kitchen", "Degrease extractor hood", _DEEP, "Quarterly"),
    ("Kitchen", "Clean behind appliances", _DEEP, "Quarterly"),
    ("Kitchen", "Clean dishwasher filter", _DEEP, "Monthly"),
    ("Bathroom", "Wipe sink/worktop", _SURFACE, "Daily"),
    ("Bathroom", "Wipe toilet seat", _SURFACE, "Daily"),
    ("Bathroom", "Hang/fold towels", _SURFACE, "Daily"),
    ("Bathroom", "Clean mirror", _SURFACE, "Weekly"),
    ("Bathroom", "Scrub toilet bowl", _SURFACE, "Weekly"),
    ("Bathroom", "Clean shower/bath", _SURFACE, "Weekly"),
    ("Bathroom", "Mop floor", _SURFACE, "Weekly"),
    ("Bathroom", "Wash bath mats", _SURFACE, "Weekly"),
    ("Bathroom", "Scrub grout", _DEEP, "Monthly"),
    ("Bathroom", "Descale showerhead", _DEEP, "Quarterly"),
    ("Bathroom", "Clean extractor fan", _DEEP, "Quarterly"),
    ("Bathroom", "Wash shower curtain", _DEEP, "Monthly"),
    ("Living Room", "Plump cushions", _SURFACE, "Daily"),
    ("Living Room", "Vacuum/sweep floor", _SURFACE, "Weekly"),
    ("Living Room", "Dust surfaces", _SURFACE, "Weekly"),
    ("Living Room", "Dust electronics", _SURFACE, "Weekly"),
    ("Living Room", "Wipe light switches", _SURFACE, "Weekly"),
    ("Living Room", "Vacuum under cushions", _DEEP, "Monthly"),
    ("Living Room", "Dust ceiling fan", _DEEP, "Monthly"),
    ("Living Room", "Shampoo carpet/rugs", _DEEP, "Quarterly"),
    ("Bedroom", "Make bed", _SURFACE, "Daily"),
    ("Bedroom", "Put away clothes", _SURFACE, "Daily"),
    ("Bedroom", "Change pillowcases", _SURFACE, "Weekly"),
    ("Bedroom", "Change sheets", _SURFACE, "Weekly"),
    ("Bedroom", "Dust bedside tables", _SURFACE, "Weekly"),
    ("Bedroom", "Vacuum/sweep floor", _SURFACE, "Weekly"),
    ("Bedroom", "Wash bedding/duvet cover", _DEEP, "Monthly"),
    ("Bedroom", "Vacuum mattress", _DEEP, "Monthly"),
    ("Bedroom", "Flip/rotate mattress", _DEEP, "Quarterly"),
    ("Bedroom", "Clean under bed", _DEEP, "Monthly"),
    ("Bedroom", "Organise wardrobe", _DEEP, "Quarterly"),
    ("Laundry", "Do laundry", _SURFACE, "As needed"),
    ("Laundry", "Fold & put away", _SURFACE, "As needed"),
    ("Laundry", "Clean lint trap", _SURFACE, "Every load"),
    ("Laundry", "Wipe washer door seal", _SURFACE, "Weekly"),
    ("Laundry", "Clean washer drum", _DEEP, "Monthly"),
    ("Laundry", "Clean dryer vent", _DEEP, "Quarterly"),
    ("Whole House", "Tidy up", _SURFACE, "Daily"),
    ("Whole House", "Take out rubbish", _SURFACE, "Daily"),
    ("Whole House", "Take out recycling", _SURFACE, "Weekly"),
    ("Whole House", "Vacuum stairs", _SURFACE, "Weekly"),
    ("Whole House", "Wipe door handles", _SURFACE, "Weekly"),
    ("Whole House", "Water plants", _SURFACE, "Weekly"),
    ("Whole House", "Clean windows (interior)", _DEEP, "Monthly"),
    ("Whole House", "Clean windows (exterior)", _DEEP, "Quarterly"),
    ("Whole House", "Wipe down interior walls", _DEEP, "Quarterly"),
    ("Whole House", "Dust skirting boards", _DEEP, "Monthly"),
    ("Whole House", "Clean light fixtures", _DEEP, "Quarterly"),
)

CHORE_LIBRARY: tuple[ChoreLibraryItem, ...] = tuple(
    ChoreLibraryItem(name=name, suggested_level=level, suggested_frequency=frequency, room_category=category)
    for category, name, level, frequency in _CATALOG
)


def get_all_categories() -> list[str]:
    """Return room categories in library order, without duplicates."""
    return list(dict.fromkeys(item.room_category for item in CHORE_LIBRARY))


def get_chores_by_category(category: str) -> list[ChoreLibraryItem]:
    """Return the library chores for a room category (empty for unknown categories)."""
    return [item for item in CHORE_LIBRARY if item.room_category == category]


def find_chore(name: str, *, category: str | None = None) -> ChoreLibraryItem | None:
    """Find a library chore by name.

    Several rooms share chore names (e.g., "Mop floor"), so pass a category to
    pick a specific one; otherwise the first match in library order is returned.
    """
    for item in CHORE_LIBRARY:
        if item.name == name and (category is None or item.room_category == category):
            return item
    return None


def suggest_chores(category: str, household: HouseholdProfile) -> list[SuggestedChore]:
    """List a category's chores with frequencies adjusted for the household.

    Args:
        category: Room category (e.g., "Kitchen")
        household: Household profile used to densify frequencies

    Returns:
        SuggestedChore per library item, with the recurrence type the adjusted label maps to
    """
    suggestions = []
    for item in get_chores_by_category(category):
        adjusted = adjust_frequency_for_household(item.suggested_frequency, household)
        suggestions.append(
            SuggestedChore(
                item=item,
                adjusted_frequency=adjusted,
                recurrence_type=frequency_to_recurrence_type(adjusted),
            )
        )
    if not suggestions:
        logger.warning("No library chores for category %r", category)
    return suggestions
