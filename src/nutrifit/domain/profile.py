"""Domain models for user profiles."""

from dataclasses import dataclass, replace
from datetime import UTC, datetime
from enum import Enum


class Gender(str, Enum):
    """Gender used by the calorie factor table."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class Goal(str, Enum):
    """Nutritional goal."""

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


class ActivityLevel(str, Enum):
    """Everyday activity level."""

    SEDENTARY = "sedentary"
    ACTIVE = "active"


class DietStyle(str, Enum):
    """Dietary style."""

    OMNIVORE = "omnivore"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"


class WeightChangeRate(str, Enum):
    """Weekly weight change target."""

    RATE_025 = "0.25"
    RATE_05 = "0.5"
    RATE_075 = "0.75"
    RATE_1 = "1"


class SafetyTier(str, Enum):
    """How sustainable a weight change rate is."""

    SUSTAINABLE = "sustainable"
    RECOMMENDED = "recommended"
    DEMANDING = "demanding"
    SHORT_TERM_ONLY = "short_term_only"


@dataclass(frozen=True)
class WeightChangePlan:
    """Weekly target and implied daily calorie delta for a rate."""

    rate: WeightChangeRate
    kg_per_week: float
    daily_calorie_delta: int
    safety: SafetyTier


@dataclass(frozen=True)
class UserProfile:
    """Identity, physiology and intent of a user."""

    name: str
    age: int
    gender: Gender
    height_cm: float
    weight_kg: float
    goal: Goal
    activity_level: ActivityLevel
    diet_style: DietStyle
    weight_change_rate: WeightChangeRate
    created_at: datetime
    updated_at: datetime

    @property
    def height_m(self) -> float:
        """Return the height in meters."""
        return self.height_cm / 100

    def with_updates(self, **changes: object) -> "UserProfile":
        """Return a copy with the given fields changed and a fresh updated_at."""
        return replace(self, **changes, updated_at=datetime.now(tz=UTC))


@dataclass(frozen=True)
class BmiCategory:
    """BMI band with bilingual labels."""

    category: str
    label: str
    description: str


@dataclass(frozen=True)
class ProfileSummary:
    """Derived figures shown next to a profile."""

    bmi: float
    bmi_category: BmiCategory
    daily_calorie_goal: int
    weight_plan: WeightChangePlan
