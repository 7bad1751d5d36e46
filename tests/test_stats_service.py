"""Tests for stats service."""

from datetime import date, timedelta
from uuid import UUID

from nutrifit.domain.meals import MealType
from nutrifit.domain.nutrition import MacroProfile
from nutrifit.domain.reference import FoodReference
from nutrifit.domain.stats import ZERO_SUMMARY
from nutrifit.services.diary import DiaryService
from nutrifit.services.stats import StatsService
from nutrifit.services.weight import WeightService

START = date(2024, 5, 1)

_FOOD = FoodReference(
    name="Bowl",
    per_100g=MacroProfile(calories=200, protein_g=10, carbs_g=20, fat_g=5),
    category="",
    source="custom",
)


def _stats(diary_service: DiaryService, weight_service: WeightService) -> StatsService:
    return StatsService(diary_service=diary_service, weight_service=weight_service)


def test_period_stats_zeroed_when_end_precedes_start(
    diary_service: DiaryService, weight_service: WeightService, user_id: UUID
) -> None:
    stats = _stats(diary_service, weight_service).get_period_stats(
        user_id, START, START - timedelta(days=1)
    )

    assert stats.daily == []
    assert stats.calories == ZERO_SUMMARY
    assert stats.weight_kg is None
    assert stats.days_logged == 0
    assert stats.macro_split.carbs_percent == 34


def test_period_stats_summarize_each_metric(
    diary_service: DiaryService, weight_service: WeightService, user_id: UUID
) -> None:
    diary_service.add_food_to_meal(user_id, START, MealType.LUNCH, _FOOD, 500)
    diary_service.add_food_to_meal(
        user_id, START + timedelta(days=1), MealType.DINNER, _FOOD, 1000
    )
    diary_service.set_steps(user_id, START + timedelta(days=2), 5000)
    weight_service.add_weight(user_id, START, 70.0)
    weight_service.add_weight(user_id, START + timedelta(days=2), 69.0)

    stats = _stats(diary_service, weight_service).get_period_stats(
        user_id, START, START + timedelta(days=2)
    )

    assert len(stats.daily) == 3
    assert stats.calories.minimum == 0
    assert stats.calories.maximum == 2000
    assert stats.calories.average == 1000
    assert stats.steps.maximum == 5000
    assert stats.burned_calories.maximum == 200
    assert stats.total_calories == 3000
    assert stats.days_logged == 2
    assert stats.entries_count == 2
    assert stats.days_on_target == 2
    assert stats.weight_kg is not None
    assert stats.weight_kg.average == 69.5
    assert stats.daily[1].weight_kg is None


def test_days_on_target_tolerates_ten_percent(
    diary_service: DiaryService, weight_service: WeightService, user_id: UUID
) -> None:
    diary_service.add_food_to_meal(user_id, START, MealType.LUNCH, _FOOD, 1100)
    diary_service.add_food_to_meal(
        user_id, START + timedelta(days=1), MealType.LUNCH, _FOOD, 1101
    )

    stats = _stats(diary_service, weight_service).get_period_stats(
        user_id, START, START + timedelta(days=1)
    )

    assert stats.days_on_target == 1


def test_macro_split_percentages(
    diary_service: DiaryService, weight_service: WeightService, user_id: UUID
) -> None:
    diary_service.add_food_to_meal(user_id, START, MealType.LUNCH, _FOOD, 100)

    split = (
        _stats(diary_service, weight_service)
        .get_period_stats(user_id, START, START)
        .macro_split
    )

    assert (split.protein_percent, split.carbs_percent, split.fat_percent) == (
        29,
        57,
        14,
    )
