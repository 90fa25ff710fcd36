"""Nutrition domain models and the static food table."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class MacroProfile:
    """Macronutrient profile for a food item or a day."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float


@dataclass(frozen=True)
class FoodInfo:
    """Reference food with macros per 100 units."""

    key: str
    label: str
    per_100: MacroProfile
    unit: str = "g"


# Approximate values per 100 g, enough for offline calculation.
_FOODS = (
    FoodInfo(
        "chicken_breast_cooked", "Chicken (cooked)", MacroProfile(165, 31, 3.6, 0)
    ),
    FoodInfo("egg_boiled", "Egg (boiled)", MacroProfile(155, 13, 11, 1)),
    FoodInfo("walnuts", "Walnuts", MacroProfile(654, 15, 65, 14)),
    FoodInfo("cashews", "Cashews", MacroProfile(553, 18, 44, 30)),
    FoodInfo("almonds", "Almonds", MacroProfile(579, 21, 50, 22)),
    FoodInfo("dates", "Dates", MacroProfile(282, 2, 0.5, 75)),
    FoodInfo("raisins", "Raisins", MacroProfile(299, 3, 0.5, 79)),
    FoodInfo("chana_boiled", "Chana (boiled)", MacroProfile(164, 9, 3, 27)),
    FoodInfo("peanuts_roasted", "Peanuts (roasted)", MacroProfile(585, 25, 49, 16)),
)

NUTRITION_TABLE: Mapping[str, FoodInfo] = MappingProxyType(
    {food.key: food for food in _FOODS}
)


def food_options(
    table: Mapping[str, FoodInfo] = NUTRITION_TABLE,
) -> list[dict[str, str]]:
    """Return foods formatted for a selection input."""
    return [{"key": info.key, "label": info.label} for info in table.values()]


def portion_macros(info: FoodInfo, grams: float) -> MacroProfile:
    """Scale per-100 macros to a portion."""
    factor = grams / 100
    return MacroProfile(
        calories=info.per_100.calories * factor,
        protein_g=info.per_100.protein_g * factor,
        fat_g=info.per_100.fat_g * factor,
        carbs_g=info.per_100.carbs_g * factor,
    )
