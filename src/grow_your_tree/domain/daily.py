"""Domain models for the daily state aggregate."""

from dataclasses import dataclass, field
from uuid import UUID

from grow_your_tree.domain.checklist import Checklist
from grow_your_tree.domain.plant import PlantState

LOCAL_USER_ID = "local"


@dataclass(frozen=True)
class User:
    """Session marker for whoever is using the tracker."""

    id: str
    display_name: str


@dataclass(frozen=True)
class FoodEntry:
    """Logged portion of a food from the nutrition table."""

    id: UUID
    food_key: str
    grams: float


@dataclass(frozen=True)
class Journal:
    """Free-text note and optional photo for the day."""

    text: str = ""
    photo: str | None = None


@dataclass(frozen=True)
class Targets:
    """Per-metric daily goals."""

    protein_g: float = 150
    carbs_g: float = 190
    fat_g: float = 58
    calories: float = 1850
    water_ml: float = 3500
    steps: int = 10000


@dataclass(frozen=True)
class DailyState:
    """Complete tracker state; replaced as a whole on every change."""

    user: User | None = None
    checklist: Checklist = field(default_factory=Checklist)
    foods: tuple[FoodEntry, ...] = ()
    journal: Journal = field(default_factory=Journal)
    plant: PlantState = field(default_factory=PlantState)
    targets: Targets = field(default_factory=Targets)
