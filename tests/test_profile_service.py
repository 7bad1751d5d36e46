"""Tests for the profile service."""

from uuid import UUID

import pytest

from nutrifit.domain.errors import InvalidInputError
from nutrifit.domain.profile import (
    ActivityLevel,
    DietStyle,
    Gender,
    Goal,
    WeightChangeRate,
)
from nutrifit.services.profiles import ProfileData, ProfileService
from tests.conftest import InMemoryProfileRepository


def _data(**overrides: object) -> ProfileData:
    values: dict[str, object] = {
        "name": " Marco ",
        "age": 40,
        "gender": Gender.MALE,
        "height_cm": 175.0,
        "weight_kg": 100.0,
        "goal": Goal.GAIN,
        "activity_level": ActivityLevel.ACTIVE,
        "diet_style": DietStyle.VEGETARIAN,
        "weight_change_rate": WeightChangeRate.RATE_025,
    }
    values.update(overrides)
    return ProfileData(**values)  # type: ignore[arg-type]


def test_save_profile_persists_and_keeps_created_at(
    profile_service: ProfileService,
    profile_repository: InMemoryProfileRepository,
    user_id: UUID,
) -> None:
    first = profile_service.save_profile(user_id, _data())
    second = profile_service.save_profile(user_id, _data(age=41))

    assert first.name == "Marco"
    assert second.created_at == first.created_at
    assert profile_repository.profiles[user_id].age == 41


def test_save_profile_rejects_out_of_range_height(
    profile_service: ProfileService, user_id: UUID
) -> None:
    with pytest.raises(InvalidInputError) as exc_info:
        profile_service.save_profile(user_id, _data(height_cm=90.0))

    assert exc_info.value.field == "height_cm"


def test_summary_uses_stored_profile(
    profile_service: ProfileService, user_id: UUID
) -> None:
    profile_service.save_profile(user_id, _data())

    summary = profile_service.get_summary(user_id)

    assert summary is not None
    assert summary.daily_calorie_goal == 3295
    assert summary.bmi == 32.7
    assert summary.bmi_category.category == "Obesità"
    assert summary.weight_plan.daily_calorie_delta == 275


def test_summary_missing_profile(
    profile_service: ProfileService, user_id: UUID
) -> None:
    assert profile_service.get_summary(user_id) is None


def test_calorie_goal_defaults_without_profile(
    profile_repository: InMemoryProfileRepository,
) -> None:
    service = ProfileService(repository=profile_repository, default_calorie_goal=1800)

    assert service.calorie_goal(None) == 1800


def test_update_weight_requires_profile(
    profile_service: ProfileService, user_id: UUID
) -> None:
    assert profile_service.update_weight(user_id, 80.0) is None

    profile_service.save_profile(user_id, _data())
    updated = profile_service.update_weight(user_id, 80.0)

    assert updated is not None
    assert updated.weight_kg == 80.0
