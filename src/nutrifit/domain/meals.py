"""Domain models for the food and activity diary."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from uuid import UUID

from nutrifit.domain.nutrition import EMPTY_MACROS, MacroProfile, round_half_up
from nutrifit.domain.profile import BmiCategory


class MealType(str, Enum):
    """Meal slots of a diary day."""

    BREAKFAST = "breakfast"
    MORNING_SNACK = "morning_snack"
    LUNCH = "lunch"
    AFTERNOON_SNACK = "afternoon_snack"
    DINNER = "dinner"
    EXTRA = "extra"


@dataclass(frozen=True)
class MealTypeInfo:
    """Display data for a meal slot."""

    label: str
    order: int


MEAL_TYPE_INFO: dict[MealType, MealTypeInfo] = {
    MealType.BREAKFAST: MealTypeInfo("Colazione", 0),
    MealType.MORNING_SNACK: MealTypeInfo("Spuntino Mattina", 1),
    MealType.LUNCH: MealTypeInfo("Pranzo", 2),
    MealType.AFTERNOON_SNACK: MealTypeInfo("Spuntino Pomeriggio", 3),
    MealType.DINNER: MealTypeInfo("Cena", 4),
    MealType.EXTRA: MealTypeInfo("Extra", 5),
}


@dataclass(frozen=True)
class FoodItem:
    """A logged food line with macros computed for its quantity."""

    id: UUID
    day: date
    meal_type: MealType
    name: str
    grams: float
    macros: MacroProfile
    per_100g: MacroProfile
    source: str
    created_at: datetime


@dataclass(frozen=True)
class Meal:
    """Food items logged in one (day, meal type) slot."""

    meal_type: MealType
    day: date
    items: list[FoodItem]

    @property
    def totals(self) -> MacroProfile:
        total = EMPTY_MACROS
        for item in self.items:
            total = total + item.macros
        return total.rounded()

    @property
    def label(self) -> str:
        return MEAL_TYPE_INFO[self.meal_type].label


@dataclass(frozen=True)
class PhysicalActivity:
    """A logged activity with its burned calories."""

    id: UUID
    day: date
    name: str
    met: float
    duration_minutes: float
    calories_burned: int
    created_at: datetime


@dataclass(frozen=True)
class StepsRecord:
    """Step count for one day."""

    day: date
    steps: int


@dataclass(frozen=True)
class DailyDiary:
    """Projection of one day's meals and activities against the goal."""

    day: date
    meals: list[Meal]
    activities: list[PhysicalActivity]
    steps: int
    consumed: MacroProfile
    activity_calories: int
    steps_calories: int
    calorie_goal: int
    bmi: float | None = None
    bmi_category: BmiCategory | None = None

    @property
    def burned_calories(self) -> int:
        return self.activity_calories + self.steps_calories

    @property
    def remaining_calories(self) -> int:
        return int(
            round_half_up(
                self.calorie_goal - self.consumed.calories + self.burned_calories
            )
        )

    @property
    def net_calories(self) -> int:
        return int(round_half_up(self.consumed.calories - self.burned_calories))
