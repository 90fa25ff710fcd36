"""Snapshot persistence for the tracker state."""

import logging
from dataclasses import asdict, dataclass
from typing import Protocol
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from grow_your_tree.domain.checklist import Checklist, ChecklistGroup, ChecklistItem
from grow_your_tree.domain.daily import DailyState, FoodEntry, Journal, Targets, User
from grow_your_tree.domain.errors import (
    SnapshotError,
    UnsupportedSnapshotVersionError,
)
from grow_your_tree.domain.plant import MAX_STAGE, PlantState

SCHEMA_VERSION = 1

_logger = logging.getLogger(__name__)


class SnapshotRepository(Protocol):
    """Key-value slot holding the serialized state."""

    def read(self) -> str | None:
        """Return the stored payload, if any."""

    def write(self, payload: str) -> None:
        """Overwrite the stored payload."""


class _VersionProbe(BaseModel):
    schema_version: int | None = None


class UserModel(BaseModel):
    """Persisted session marker."""

    id: str
    display_name: str


class MealsModel(BaseModel):
    """Persisted meal flags."""

    breakfast: bool = False
    lunch: bool = False
    dinner: bool = False
    snacks: bool = False


class WorkoutModel(BaseModel):
    """Persisted workout flags."""

    warmup: bool = False
    main: bool = False
    cooldown: bool = False


class StudyModel(BaseModel):
    """Persisted study flags."""

    ai1: bool = False
    ai2: bool = False
    aws1: bool = False
    aws2: bool = False


class ChecklistModel(BaseModel):
    """Persisted checklist."""

    meals: MealsModel = Field(default_factory=MealsModel)
    workout: WorkoutModel = Field(default_factory=WorkoutModel)
    study: StudyModel = Field(default_factory=StudyModel)
    water_ml: float = Field(default=0, ge=0)
    steps: int = Field(default=0, ge=0)


class FoodEntryModel(BaseModel):
    """Persisted food log row."""

    id: UUID
    food_key: str
    grams: float = Field(ge=0)


class TargetsModel(BaseModel):
    """Persisted daily targets."""

    protein_g: float
    carbs_g: float
    fat_g: float
    calories: float
    water_ml: float
    steps: int


class SnapshotModel(BaseModel):
    """Full persisted record of the tracker state."""

    model_config = ConfigDict(extra="ignore")

    schema_version: int = SCHEMA_VERSION
    user: UserModel | None = None
    day_index: int = Field(default=1, ge=1)
    plant_stage: int = Field(default=0, ge=0, le=MAX_STAGE)
    streak: int = Field(default=0, ge=0)
    checklist: ChecklistModel = Field(default_factory=ChecklistModel)
    journal: str = ""
    photo: str | None = None
    foods: list[FoodEntryModel] = Field(default_factory=list)
    targets: TargetsModel = Field(
        default_factory=lambda: TargetsModel(**asdict(Targets()))
    )


@dataclass
class SnapshotService:
    """Loads and saves the tracker state through a repository."""

    repository: SnapshotRepository
    last_error: str | None = None

    def load(self) -> DailyState:
        """Return the stored state, or defaults when it is absent or unusable."""
        try:
            raw = self.repository.read()
        except Exception as exc:
            _logger.warning("Failed to read snapshot, using defaults: %s", exc)
            return DailyState()
        if raw is None:
            return DailyState()
        try:
            state = decode_snapshot(raw)
        except (ValueError, SnapshotError) as exc:
            _logger.warning("Ignoring unusable snapshot: %s", exc)
            return DailyState()
        _logger.info("Restored snapshot for day %s", state.plant.day_index)
        return state

    def save(self, state: DailyState) -> None:
        """Persist the state; failures are logged and kept as a warning."""
        try:
            self.repository.write(encode_snapshot(state))
        except Exception as exc:
            _logger.warning("Failed to save snapshot: %s", exc)
            self.last_error = f"Changes are not being saved: {exc}"
            return
        self.last_error = None


def encode_snapshot(state: DailyState) -> str:
    """Serialize the state to JSON."""
    return to_model(state).model_dump_json()


def decode_snapshot(raw: str) -> DailyState:
    """Deserialize JSON produced by encode_snapshot."""
    probe = _VersionProbe.model_validate_json(raw)
    if probe.schema_version != SCHEMA_VERSION:
        raise UnsupportedSnapshotVersionError(probe.schema_version)
    return from_model(SnapshotModel.model_validate_json(raw))


def to_model(state: DailyState) -> SnapshotModel:
    """Convert domain state to its persisted model."""
    checklist = state.checklist
    groups: dict[str, dict[str, bool]] = {group.value: {} for group in ChecklistGroup}
    for item in ChecklistItem:
        groups[item.group.value][item.leaf] = checklist.is_checked(item)
    user = state.user
    return SnapshotModel(
        user=(
            UserModel(id=user.id, display_name=user.display_name) if user else None
        ),
        day_index=state.plant.day_index,
        plant_stage=state.plant.stage,
        streak=state.plant.streak,
        checklist=ChecklistModel(
            meals=MealsModel(**groups["meals"]),
            workout=WorkoutModel(**groups["workout"]),
            study=StudyModel(**groups["study"]),
            water_ml=checklist.water_ml,
            steps=checklist.steps,
        ),
        journal=state.journal.text,
        photo=state.journal.photo,
        foods=[
            FoodEntryModel(id=entry.id, food_key=entry.food_key, grams=entry.grams)
            for entry in state.foods
        ],
        targets=TargetsModel(**asdict(state.targets)),
    )


def from_model(model: SnapshotModel) -> DailyState:
    """Convert a persisted model back to domain state."""
    checked = frozenset(
        item
        for item in ChecklistItem
        if getattr(getattr(model.checklist, item.group.value), item.leaf)
    )
    return DailyState(
        user=(
            User(id=model.user.id, display_name=model.user.display_name)
            if model.user
            else None
        ),
        checklist=Checklist(
            checked=checked,
            water_ml=model.checklist.water_ml,
            steps=model.checklist.steps,
        ),
        foods=tuple(
            FoodEntry(id=entry.id, food_key=entry.food_key, grams=entry.grams)
            for entry in model.foods
        ),
        journal=Journal(text=model.journal, photo=model.photo),
        plant=PlantState(
            stage=model.plant_stage, streak=model.streak, day_index=model.day_index
        ),
        targets=Targets(**model.targets.model_dump()),
    )
