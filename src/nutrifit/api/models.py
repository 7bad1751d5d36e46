"""Request models validated at the HTTP boundary."""

from datetime import date

from pydantic import BaseModel, Field

from nutrifit.domain.meals import MealType
from nutrifit.domain.profile import (
    ActivityLevel,
    DietStyle,
    Gender,
    Goal,
    WeightChangeRate,
)


class ProfileInput(BaseModel):
    """Completed onboarding profile."""

    name: str = Field(min_length=1, max_length=100)
    age: int = Field(ge=10, le=120)
    gender: Gender
    height_cm: float = Field(ge=100, le=250)
    weight_kg: float = Field(ge=30, le=300)
    goal: Goal
    activity_level: ActivityLevel
    diet_style: DietStyle
    weight_change_rate: WeightChangeRate


class CustomNutrients(BaseModel):
    """Nutrients per 100g for a food not in the catalog."""

    calories: float = Field(ge=0)
    protein_g: float = Field(ge=0)
    carbs_g: float = Field(ge=0)
    fat_g: float = Field(ge=0)
    fiber_g: float = Field(default=0.0, ge=0)
    sugar_g: float = Field(default=0.0, ge=0)


class FoodEntryInput(BaseModel):
    """Food to log in a meal slot."""

    food_name: str = Field(min_length=1)
    grams: float = Field(gt=0)
    custom: CustomNutrients | None = None


class QuantityInput(BaseModel):
    """New quantity for a logged food."""

    grams: float = Field(gt=0)


class ActivityInput(BaseModel):
    """Activity to log on a day."""

    activity_name: str = Field(min_length=1)
    minutes: float = Field(ge=0)


class StepsInput(BaseModel):
    """Step count for a day."""

    steps: int = Field(ge=0)
    increment: bool = False


class CopyMealsInput(BaseModel):
    """Copy the meals of a day onto another day."""

    target_day: date
    meal_types: list[MealType] | None = None


class WeightInput(BaseModel):
    """Weight recorded on a day."""

    day: date
    weight_kg: float = Field(ge=30, le=300)
    note: str | None = None
    photo_ref: str | None = None
