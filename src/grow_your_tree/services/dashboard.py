"""Read-only dashboard built from the tracker state."""

from collections.abc import Mapping
from dataclasses import dataclass
from uuid import UUID

from grow_your_tree.domain.checklist import ChecklistGroup
from grow_your_tree.domain.daily import DailyState, FoodEntry, Targets
from grow_your_tree.domain.nutrition import (
    FoodInfo,
    MacroProfile,
    food_options,
    portion_macros,
)
from grow_your_tree.services.snapshots import SnapshotService
from grow_your_tree.services.tracker import (
    GoalStatus,
    TrackerService,
    compute_totals,
    evaluate_goals,
)

WATER_PRESETS_ML = (250, 500, 1000, -250)

ALL_DONE_BANNER = "All goals completed! Your plant will grow 🌿"
PENDING_BANNER = "Complete all goals to grow your plant today 🌱"


@dataclass(frozen=True)
class MetricProgress:
    """Progress of one metric towards its target."""

    key: str
    label: str
    value: float
    target: float
    unit: str
    percent: int
    met: bool


@dataclass(frozen=True)
class ChecklistRow:
    """Single checklist toggle."""

    item: str
    label: str
    checked: bool


@dataclass(frozen=True)
class ChecklistSection:
    """Checklist group with its toggles."""

    group: str
    title: str
    items: list[ChecklistRow]
    complete: bool


@dataclass(frozen=True)
class FoodRow:
    """Logged food with its portion macros."""

    id: UUID
    food_key: str
    label: str
    grams: float
    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float


@dataclass(frozen=True)
class PlantView:
    """Plant stage, streak and day counter."""

    stage: int
    name: str
    emoji: str
    streak: int
    day_index: int


@dataclass(frozen=True)
class Dashboard:
    """Everything the page renders."""

    user: str | None
    plant: PlantView
    metrics: list[MetricProgress]
    checklist: list[ChecklistSection]
    foods: list[FoodRow]
    totals: MacroProfile
    journal: str
    photo: str | None
    goals: GoalStatus
    all_done: bool
    banner: str
    targets: Targets
    water_presets_ml: list[int]
    food_options: list[dict[str, str]]
    persistence_warning: str | None


@dataclass
class DashboardService:
    """Builds dashboards for the current tracker state."""

    tracker: TrackerService
    snapshot_service: SnapshotService

    def current(self) -> Dashboard:
        """Return the dashboard for the tracker's current state."""
        return build_dashboard(
            self.tracker.state,
            self.tracker.nutrition_table,
            persistence_warning=self.snapshot_service.last_error,
        )


def build_dashboard(
    state: DailyState,
    table: Mapping[str, FoodInfo],
    persistence_warning: str | None = None,
) -> Dashboard:
    """Derive the dashboard from a state snapshot."""
    totals = compute_totals(state.foods, table)
    goals = evaluate_goals(state.checklist, state.targets)
    targets = state.targets
    stage = state.plant.current
    return Dashboard(
        user=state.user.display_name if state.user else None,
        plant=PlantView(
            stage=stage.index,
            name=stage.name,
            emoji=stage.emoji,
            streak=state.plant.streak,
            day_index=state.plant.day_index,
        ),
        metrics=[
            _metric("protein", "Protein", totals.protein_g, targets.protein_g, "g"),
            _metric("carbs", "Carbs", totals.carbs_g, targets.carbs_g, "g"),
            _metric("fat", "Fat", totals.fat_g, targets.fat_g, "g"),
            _metric("calories", "Calories", totals.calories, targets.calories, "kcal"),
            _metric(
                "water", "Water", state.checklist.water_ml, targets.water_ml, "ml"
            ),
            _metric("steps", "Steps", state.checklist.steps, targets.steps, ""),
        ],
        checklist=[_section(state, group) for group in ChecklistGroup],
        foods=[_food_row(entry, table) for entry in state.foods],
        totals=totals,
        journal=state.journal.text,
        photo=state.journal.photo,
        goals=goals,
        all_done=goals.all_done,
        banner=ALL_DONE_BANNER if goals.all_done else PENDING_BANNER,
        targets=targets,
        water_presets_ml=list(WATER_PRESETS_ML),
        food_options=food_options(table),
        persistence_warning=persistence_warning,
    )


def progress_percent(value: float, target: float) -> int:
    """Return progress towards a target as a percentage capped at 100."""
    return min(100, round(value / (target or 1) * 100))


def _metric(
    key: str, label: str, value: float, target: float, unit: str
) -> MetricProgress:
    return MetricProgress(
        key=key,
        label=label,
        value=value,
        target=target,
        unit=unit,
        percent=progress_percent(value, target),
        met=value >= target,
    )


def _section(state: DailyState, group: ChecklistGroup) -> ChecklistSection:
    return ChecklistSection(
        group=group.value,
        title=group.heading,
        items=[
            ChecklistRow(
                item=item.value,
                label=item.label,
                checked=state.checklist.is_checked(item),
            )
            for item in group.items
        ],
        complete=state.checklist.group_complete(group),
    )


def _food_row(entry: FoodEntry, table: Mapping[str, FoodInfo]) -> FoodRow:
    info = table.get(entry.food_key)
    if info is None:
        macros = MacroProfile(0.0, 0.0, 0.0, 0.0)
    else:
        macros = portion_macros(info, entry.grams)
    return FoodRow(
        id=entry.id,
        food_key=entry.food_key,
        label=info.label if info else entry.food_key,
        grams=entry.grams,
        calories=macros.calories,
        protein_g=macros.protein_g,
        fat_g=macros.fat_g,
        carbs_g=macros.carbs_g,
    )
