"""Tests for goal and metric calculations."""

import pytest

from nutrifit.domain.nutrition import MacroProfile, round_half_up
from nutrifit.domain.profile import (
    ActivityLevel,
    Gender,
    Goal,
    SafetyTier,
    WeightChangeRate,
)
from nutrifit.services.calculator import (
    CALORIE_FACTORS,
    bmi_category,
    compute_activity_calories_burned,
    compute_bmi,
    compute_daily_calorie_goal,
    compute_steps_calories_burned,
    effective_weight,
    scale_macros,
    summarize_profile,
    weight_change_plan,
)
from tests.conftest import make_profile


def test_calorie_goal_below_bmi_threshold_uses_actual_weight() -> None:
    profile = make_profile()

    assert compute_daily_calorie_goal(profile) == 1710


def test_calorie_goal_above_bmi_threshold_uses_clamped_weight() -> None:
    profile = make_profile(
        gender=Gender.MALE,
        height_cm=175.0,
        weight_kg=100.0,
        activity_level=ActivityLevel.ACTIVE,
        goal=Goal.GAIN,
    )

    assert effective_weight(profile) == pytest.approx(76.5625)
    assert compute_daily_calorie_goal(profile) == 3295


def test_calorie_goal_for_other_gender_uses_blended_factor() -> None:
    profile = make_profile(gender=Gender.OTHER)

    assert compute_daily_calorie_goal(profile) == 1680


def test_calorie_goal_minimum_is_opt_in() -> None:
    profile = make_profile(weight_kg=45.0, goal=Goal.LOSE)

    assert compute_daily_calorie_goal(profile) == 1020
    assert compute_daily_calorie_goal(profile, minimum=1200) == 1200


def test_factor_table_covers_every_combination() -> None:
    assert len(CALORIE_FACTORS) == len(Gender) * len(ActivityLevel) * len(Goal)


def test_compute_bmi_guards_invalid_input() -> None:
    assert compute_bmi(60.0, 0.0) == 0.0
    assert compute_bmi(0.0, 1.7) == 0.0
    assert round_half_up(compute_bmi(60.0, 1.65), 1) == 22.0


@pytest.mark.parametrize(
    ("bmi", "category", "label"),
    [
        (18.4, "Sottopeso", "Underweight"),
        (18.5, "Normopeso", "Normal"),
        (24.9, "Normopeso", "Normal"),
        (25.0, "Sovrappeso", "Overweight"),
        (29.9, "Sovrappeso", "Overweight"),
        (30.0, "Obesità", "Obesity"),
    ],
)
def test_bmi_category_lower_bounds_are_inclusive(
    bmi: float, category: str, label: str
) -> None:
    result = bmi_category(bmi)

    assert result.category == category
    assert result.label == label
    assert result.description


def test_activity_calories_round_half_up() -> None:
    assert compute_activity_calories_burned(8.3, 70.0, 30) == 291


def test_activity_calories_zero_for_invalid_input() -> None:
    assert compute_activity_calories_burned(0, 70.0, 30) == 0
    assert compute_activity_calories_burned(8.3, 0, 30) == 0
    assert compute_activity_calories_burned(8.3, 70.0, -5) == 0
    assert compute_activity_calories_burned(8.3, 70.0, 0) == 0


def test_steps_calories_scale_with_weight() -> None:
    assert compute_steps_calories_burned(10000, 70.0) == 400
    assert compute_steps_calories_burned(10000, 84.0) == 480
    assert compute_steps_calories_burned(0, 70.0) == 0


@pytest.mark.parametrize(
    ("rate", "delta", "safety"),
    [
        (WeightChangeRate.RATE_025, 275, SafetyTier.SUSTAINABLE),
        (WeightChangeRate.RATE_05, 550, SafetyTier.RECOMMENDED),
        (WeightChangeRate.RATE_075, 825, SafetyTier.DEMANDING),
        (WeightChangeRate.RATE_1, 1100, SafetyTier.SHORT_TERM_ONLY),
    ],
)
def test_weight_change_plan(
    rate: WeightChangeRate, delta: int, safety: SafetyTier
) -> None:
    plan = weight_change_plan(rate)

    assert plan.daily_calorie_delta == delta
    assert plan.safety == safety


def test_scale_macros_rounds_each_field() -> None:
    per_100g = MacroProfile(
        calories=353, protein_g=10.8, carbs_g=79.1, fat_g=0.3, fiber_g=2.7
    )

    portion = scale_macros(per_100g, 80)

    assert portion.calories == 282
    assert portion.protein_g == 8.6
    assert portion.carbs_g == 63.3
    assert portion.fat_g == 0.2
    assert portion.fiber_g == 2.2


def test_round_half_up_ties_away_from_zero() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -3
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(290.49999999999994) == 291


def test_summarize_profile() -> None:
    summary = summarize_profile(make_profile())

    assert summary.bmi == 22.0
    assert summary.bmi_category.category == "Normopeso"
    assert summary.daily_calorie_goal == 1710
    assert summary.weight_plan.kg_per_week == 0.5
