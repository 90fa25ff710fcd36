"""Plant growth domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlantStage:
    """Named growth stage of the plant."""

    index: int
    name: str
    emoji: str


PLANT_STAGES: tuple[PlantStage, ...] = (
    PlantStage(0, "Seed", "🌱"),
    PlantStage(1, "Sprout", "🌿"),
    PlantStage(2, "Small Plant", "🪴"),
    PlantStage(3, "Bush", "☘️"),
    PlantStage(4, "Young Tree", "🌳"),
    PlantStage(5, "Blooming Tree", "🌸🌳"),
)

MAX_STAGE = len(PLANT_STAGES) - 1


@dataclass(frozen=True)
class PlantState:
    """Growth stage, success streak and day counter."""

    stage: int = 0
    streak: int = 0
    day_index: int = 1

    @property
    def current(self) -> PlantStage:
        """Return the stage descriptor, falling back to the seed."""
        if 0 <= self.stage <= MAX_STAGE:
            return PLANT_STAGES[self.stage]
        return PLANT_STAGES[0]
