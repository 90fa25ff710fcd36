"""Checklist domain models."""

from dataclasses import dataclass, field
from enum import StrEnum


class ChecklistGroup(StrEnum):
    """Groups of daily checklist items."""

    MEALS = "meals"
    WORKOUT = "workout"
    STUDY = "study"

    @property
    def heading(self) -> str:
        """Return the section title shown for the group."""
        return _GROUP_TITLES[self]

    @property
    def items(self) -> tuple["ChecklistItem", ...]:
        """Return the items that belong to the group, in display order."""
        return tuple(item for item in ChecklistItem if item.group is self)


class ChecklistItem(StrEnum):
    """Closed set of checklist leaves, keyed by their dotted path."""

    BREAKFAST = "meals.breakfast"
    LUNCH = "meals.lunch"
    DINNER = "meals.dinner"
    SNACKS = "meals.snacks"
    WARMUP = "workout.warmup"
    MAIN_WORKOUT = "workout.main"
    COOLDOWN = "workout.cooldown"
    AI_SESSION_1 = "study.ai1"
    AI_SESSION_2 = "study.ai2"
    AWS_SESSION_1 = "study.aws1"
    AWS_SESSION_2 = "study.aws2"

    @property
    def group(self) -> ChecklistGroup:
        """Return the group this item belongs to."""
        return ChecklistGroup(self.value.split(".", 1)[0])

    @property
    def leaf(self) -> str:
        """Return the item name within its group."""
        return self.value.split(".", 1)[1]

    @property
    def label(self) -> str:
        """Return the human-readable label."""
        return _ITEM_LABELS[self]


_GROUP_TITLES = {
    ChecklistGroup.MEALS: "Meals",
    ChecklistGroup.WORKOUT: "Workout (Evening)",
    ChecklistGroup.STUDY: "Study (AI & AWS)",
}

_ITEM_LABELS = {
    ChecklistItem.BREAKFAST: "Breakfast",
    ChecklistItem.LUNCH: "Lunch",
    ChecklistItem.DINNER: "Dinner",
    ChecklistItem.SNACKS: "Snacks",
    ChecklistItem.WARMUP: "Warm-up",
    ChecklistItem.MAIN_WORKOUT: "Main workout",
    ChecklistItem.COOLDOWN: "Cool down / stretch",
    ChecklistItem.AI_SESSION_1: "AI Session 1",
    ChecklistItem.AI_SESSION_2: "AI Session 2",
    ChecklistItem.AWS_SESSION_1: "AWS Session 1",
    ChecklistItem.AWS_SESSION_2: "AWS Session 2",
}


@dataclass(frozen=True)
class Checklist:
    """Checklist flags and counters for the current day."""

    checked: frozenset[ChecklistItem] = field(default_factory=frozenset)
    water_ml: float = 0
    steps: int = 0

    def is_checked(self, item: ChecklistItem) -> bool:
        """Return True when the item is ticked."""
        return item in self.checked

    def group_complete(self, group: ChecklistGroup) -> bool:
        """Return True when every item of the group is ticked."""
        return all(item in self.checked for item in group.items)
