"""Tests for the dashboard view."""

from uuid import uuid4

from grow_your_tree.domain.checklist import ChecklistItem
from grow_your_tree.domain.daily import DailyState, FoodEntry
from grow_your_tree.domain.nutrition import NUTRITION_TABLE
from grow_your_tree.services.dashboard import (
    ALL_DONE_BANNER,
    PENDING_BANNER,
    DashboardService,
    build_dashboard,
    progress_percent,
)
from grow_your_tree.services.snapshots import SnapshotService
from grow_your_tree.services.tracker import TrackerService
from tests.conftest import complete_day


def test_progress_percent_is_capped() -> None:
    assert progress_percent(0, 3500) == 0
    assert progress_percent(1750, 3500) == 50
    assert progress_percent(20000, 10000) == 100
    assert progress_percent(5, 0) == 100


def test_dashboard_for_new_day() -> None:
    dashboard = build_dashboard(DailyState(), NUTRITION_TABLE)

    assert dashboard.user is None
    assert dashboard.plant.name == "Seed"
    assert dashboard.plant.day_index == 1
    assert dashboard.banner == PENDING_BANNER
    assert not dashboard.all_done
    assert [metric.key for metric in dashboard.metrics] == [
        "protein",
        "carbs",
        "fat",
        "calories",
        "water",
        "steps",
    ]
    assert [section.group for section in dashboard.checklist] == [
        "meals",
        "workout",
        "study",
    ]
    assert len(dashboard.food_options) == len(NUTRITION_TABLE)
    assert dashboard.water_presets_ml == [250, 500, 1000, -250]


def test_dashboard_reflects_progress(tracker: TrackerService) -> None:
    tracker.login("Kishore")
    complete_day(tracker)
    tracker.add_food("chicken_breast_cooked", 100)

    dashboard = build_dashboard(tracker.state, NUTRITION_TABLE)
    metrics = {metric.key: metric for metric in dashboard.metrics}

    assert dashboard.user == "Kishore"
    assert dashboard.all_done
    assert dashboard.banner == ALL_DONE_BANNER
    assert metrics["water"].met
    assert metrics["water"].percent == 100
    assert metrics["protein"].value == 31
    assert metrics["protein"].percent == 21
    assert not metrics["protein"].met
    assert all(section.complete for section in dashboard.checklist)
    assert dashboard.foods[0].label == "Chicken (cooked)"
    assert dashboard.foods[0].calories == 165


def test_unknown_food_row_falls_back_to_key() -> None:
    state = DailyState(
        foods=(FoodEntry(id=uuid4(), food_key="retired_food", grams=80),)
    )

    dashboard = build_dashboard(state, NUTRITION_TABLE)

    assert dashboard.foods[0].label == "retired_food"
    assert dashboard.foods[0].calories == 0
    assert dashboard.totals.calories == 0


def test_checklist_rows_use_labels(tracker: TrackerService) -> None:
    tracker.toggle_check(ChecklistItem.COOLDOWN)

    dashboard = build_dashboard(tracker.state, NUTRITION_TABLE)
    workout = dashboard.checklist[1]

    assert workout.title == "Workout (Evening)"
    assert [row.label for row in workout.items] == [
        "Warm-up",
        "Main workout",
        "Cool down / stretch",
    ]
    assert [row.checked for row in workout.items] == [False, False, True]
    assert not workout.complete


def test_dashboard_service_surfaces_persistence_warning(
    tracker: TrackerService, snapshot_service: SnapshotService
) -> None:
    snapshot_service.last_error = "Changes are not being saved: quota exceeded"
    service = DashboardService(tracker, snapshot_service)

    assert service.current().persistence_warning == snapshot_service.last_error
