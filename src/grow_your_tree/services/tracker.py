"""Daily state store and day-transition rules."""

import logging
import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from uuid import UUID, uuid4

from grow_your_tree.domain.checklist import Checklist, ChecklistGroup, ChecklistItem
from grow_your_tree.domain.daily import (
    LOCAL_USER_ID,
    DailyState,
    FoodEntry,
    Journal,
    Targets,
    User,
)
from grow_your_tree.domain.errors import InvalidQuantityError, UnknownFoodError
from grow_your_tree.domain.nutrition import (
    NUTRITION_TABLE,
    FoodInfo,
    MacroProfile,
    portion_macros,
)
from grow_your_tree.domain.plant import MAX_STAGE, PlantState

_logger = logging.getLogger(__name__)

ChangeListener = Callable[[DailyState], None]


@dataclass(frozen=True)
class GoalStatus:
    """Completion of each daily goal."""

    meals: bool
    water: bool
    steps: bool
    workout: bool
    study: bool

    @property
    def all_done(self) -> bool:
        """Return True when every goal is met."""
        return all(
            (self.meals, self.water, self.steps, self.workout, self.study)
        )


@dataclass(frozen=True)
class DayTransition:
    """Outcome of advancing to the next day."""

    goals: GoalStatus
    previous: PlantState
    plant: PlantState

    @property
    def grew(self) -> bool:
        """Return True when the day counted towards the streak."""
        return self.goals.all_done


@dataclass
class TrackerService:
    """Holds the current day's state and applies user actions to it."""

    state: DailyState = field(default_factory=DailyState)
    nutrition_table: Mapping[str, FoodInfo] = field(
        default_factory=lambda: NUTRITION_TABLE
    )
    listeners: list[ChangeListener] = field(default_factory=list)

    def subscribe(self, listener: ChangeListener) -> None:
        """Register a callable invoked with every new state."""
        self.listeners.append(listener)

    def login(self, name: str) -> DailyState:
        """Mark a local session for the given display name."""
        return self._commit(
            replace(self.state, user=User(id=LOCAL_USER_ID, display_name=name))
        )

    def logout(self) -> DailyState:
        """Clear the session marker; daily data is kept."""
        return self._commit(replace(self.state, user=None))

    def add_water(self, delta_ml: float) -> DailyState:
        """Add (or subtract) water, never dropping below zero."""
        _require_finite(delta_ml, "water")
        checklist = self.state.checklist
        water_ml = max(0, checklist.water_ml + delta_ml)
        _require_finite(water_ml, "water")
        return self._commit_checklist(replace(checklist, water_ml=water_ml))

    def set_steps(self, value: float) -> DailyState:
        """Set the step count, truncated and floored at zero."""
        _require_finite(value, "steps")
        steps = max(0, int(value))
        return self._commit_checklist(replace(self.state.checklist, steps=steps))

    def toggle_check(self, item: ChecklistItem) -> DailyState:
        """Flip a single checklist item."""
        checklist = self.state.checklist
        checked = checklist.checked ^ {ChecklistItem(item)}
        return self._commit_checklist(replace(checklist, checked=checked))

    def add_food(self, food_key: str, grams: float) -> FoodEntry:
        """Log a portion of a known food and return the new entry."""
        if food_key not in self.nutrition_table:
            raise UnknownFoodError(food_key)
        _require_finite(grams, "grams")
        if grams < 0:
            raise InvalidQuantityError(f"grams must not be negative, got {grams}")
        entry = FoodEntry(id=uuid4(), food_key=food_key, grams=float(grams))
        self._commit(replace(self.state, foods=(*self.state.foods, entry)))
        return entry

    def remove_food(self, entry_id: UUID) -> DailyState:
        """Remove a logged food; unknown ids are ignored."""
        foods = tuple(entry for entry in self.state.foods if entry.id != entry_id)
        if len(foods) == len(self.state.foods):
            return self.state
        return self._commit(replace(self.state, foods=foods))

    def set_journal(self, text: str) -> DailyState:
        """Replace the journal text."""
        return self._commit(
            replace(self.state, journal=replace(self.state.journal, text=text))
        )

    def set_photo(self, photo: str | None) -> DailyState:
        """Replace (or clear) the photo of the day."""
        return self._commit(
            replace(self.state, journal=replace(self.state.journal, photo=photo))
        )

    def compute_totals(self) -> MacroProfile:
        """Return macro totals for today's logged foods."""
        return compute_totals(self.state.foods, self.nutrition_table)

    def goal_status(self) -> GoalStatus:
        """Return completion of each daily goal."""
        return evaluate_goals(self.state.checklist, self.state.targets)

    def reset_daily(self) -> DailyState:
        """Clear today's checklist, journal and foods."""
        return self._commit(_cleared(self.state))

    def next_day(self) -> DayTransition:
        """Grow or wither the plant, then start a fresh day."""
        goals = self.goal_status()
        previous = self.state.plant
        if goals.all_done:
            plant = PlantState(
                stage=min(MAX_STAGE, previous.stage + 1),
                streak=previous.streak + 1,
                day_index=previous.day_index + 1,
            )
        else:
            plant = PlantState(stage=0, streak=0, day_index=previous.day_index + 1)
        self._commit(replace(_cleared(self.state), plant=plant))
        _logger.info(
            "Advanced to day %s: goals_met=%s stage=%s streak=%s",
            plant.day_index,
            goals.all_done,
            plant.stage,
            plant.streak,
        )
        return DayTransition(goals=goals, previous=previous, plant=plant)

    def _commit_checklist(self, checklist: Checklist) -> DailyState:
        return self._commit(replace(self.state, checklist=checklist))

    def _commit(self, state: DailyState) -> DailyState:
        self.state = state
        for listener in self.listeners:
            listener(state)
        return state


def evaluate_goals(checklist: Checklist, targets: Targets) -> GoalStatus:
    """Evaluate the five daily goals against the targets."""
    return GoalStatus(
        meals=checklist.group_complete(ChecklistGroup.MEALS),
        water=checklist.water_ml >= targets.water_ml,
        steps=checklist.steps >= targets.steps,
        workout=checklist.group_complete(ChecklistGroup.WORKOUT),
        study=checklist.group_complete(ChecklistGroup.STUDY),
    )


def compute_totals(
    foods: tuple[FoodEntry, ...] | list[FoodEntry],
    table: Mapping[str, FoodInfo] = NUTRITION_TABLE,
) -> MacroProfile:
    """Sum macros over entries whose food is in the table."""
    total = MacroProfile(0.0, 0.0, 0.0, 0.0)
    for entry in foods:
        info = table.get(entry.food_key)
        if info is None:
            continue
        portion = portion_macros(info, entry.grams)
        total = MacroProfile(
            calories=total.calories + portion.calories,
            protein_g=total.protein_g + portion.protein_g,
            fat_g=total.fat_g + portion.fat_g,
            carbs_g=total.carbs_g + portion.carbs_g,
        )
    return total


def _cleared(state: DailyState) -> DailyState:
    return replace(state, checklist=Checklist(), journal=Journal(), foods=())


def _require_finite(value: float, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidQuantityError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidQuantityError(f"{name} must be finite, got {value}")
