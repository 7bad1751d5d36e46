"""Profile management."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from nutrifit.domain.errors import InvalidInputError
from nutrifit.domain.profile import (
    ActivityLevel,
    DietStyle,
    Gender,
    Goal,
    ProfileSummary,
    UserProfile,
    WeightChangeRate,
)
from nutrifit.services.calculator import compute_daily_calorie_goal, summarize_profile

AGE_RANGE = (10, 120)
HEIGHT_CM_RANGE = (100.0, 250.0)
WEIGHT_KG_RANGE = (30.0, 300.0)

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile, if any."""

    def save_profile(self, user_id: UUID, profile: UserProfile) -> None:
        """Insert or replace the profile."""


@dataclass(frozen=True)
class ProfileData:
    """Profile fields as completed by onboarding."""

    name: str
    age: int
    gender: Gender
    height_cm: float
    weight_kg: float
    goal: Goal
    activity_level: ActivityLevel
    diet_style: DietStyle
    weight_change_rate: WeightChangeRate


@dataclass
class ProfileService:
    """Application service for profiles and their derived goals."""

    repository: ProfileRepository
    default_calorie_goal: int = 2000
    min_daily_calories: int | None = None

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's profile, if stored."""
        return self.repository.get_profile(user_id)

    def save_profile(self, user_id: UUID, data: ProfileData) -> UserProfile:
        """Create or fully replace a profile, keeping the original created_at."""
        validate_profile_bounds(data.age, data.height_cm, data.weight_kg)
        now = datetime.now(tz=UTC)
        existing = self.repository.get_profile(user_id)
        profile = UserProfile(
            name=data.name.strip(),
            age=data.age,
            gender=data.gender,
            height_cm=data.height_cm,
            weight_kg=data.weight_kg,
            goal=data.goal,
            activity_level=data.activity_level,
            diet_style=data.diet_style,
            weight_change_rate=data.weight_change_rate,
            created_at=existing.created_at if existing else now,
            updated_at=now,
        )
        self.repository.save_profile(user_id, profile)
        _logger.info("Profile saved: user_id=%s", user_id)
        return profile

    def update_weight(self, user_id: UUID, weight_kg: float) -> UserProfile | None:
        """Set the current weight on an existing profile."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            return None
        validate_profile_bounds(profile.age, profile.height_cm, weight_kg)
        updated = profile.with_updates(weight_kg=weight_kg)
        self.repository.save_profile(user_id, updated)
        return updated

    def get_summary(self, user_id: UUID) -> ProfileSummary | None:
        """Return BMI, calorie goal and weight plan for the user."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            return None
        return summarize_profile(profile, self.min_daily_calories)

    def calorie_goal(self, profile: UserProfile | None) -> int:
        """Return the daily goal for a profile, or the default without one."""
        if profile is None:
            return self.default_calorie_goal
        return compute_daily_calorie_goal(profile, self.min_daily_calories)


def validate_profile_bounds(age: int, height_cm: float, weight_kg: float) -> None:
    """Raise InvalidInputError when a numeric profile field is out of range."""
    _check_range("age", age, AGE_RANGE)
    _check_range("height_cm", height_cm, HEIGHT_CM_RANGE)
    _check_range("weight_kg", weight_kg, WEIGHT_KG_RANGE)


def _check_range(field: str, value: float, bounds: tuple[float, float]) -> None:
    low, high = bounds
    if not low <= value <= high:
        raise InvalidInputError(field, f"must be between {low:g} and {high:g}")
