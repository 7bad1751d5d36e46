"""Goal and metric calculations.

Pure functions deriving BMI, calorie targets and burned calories from a
profile and raw inputs. Invalid numeric input degrades to a zero result
instead of raising, so callers only ever see placeholder values.
All rounding goes through ``round_half_up``.
"""

from nutrifit.domain.nutrition import MacroProfile, round_half_up
from nutrifit.domain.profile import (
    ActivityLevel,
    BmiCategory,
    Gender,
    Goal,
    ProfileSummary,
    SafetyTier,
    UserProfile,
    WeightChangePlan,
    WeightChangeRate,
)

UNDERWEIGHT_MAX_BMI = 18.5
NORMAL_MAX_BMI = 25.0
OVERWEIGHT_MAX_BMI = 30.0

# Weekly free meal, amortized per day.
FREE_MEAL_ALLOWANCE_KCAL = 150

KCAL_PER_KG_FAT = 7700
STEP_KCAL_AT_REFERENCE_WEIGHT = 0.04
STEP_REFERENCE_WEIGHT_KG = 70.0

# Above this BMI the calorie goal is computed on the weight at the threshold.
# OTHER sits halfway between the two published thresholds.
BMI_THRESHOLDS: dict[Gender, float] = {
    Gender.FEMALE: 23.0,
    Gender.MALE: 25.0,
    Gender.OTHER: 24.0,
}

# kcal per kg of effective weight. OTHER is the mean of the FEMALE and MALE rows.
CALORIE_FACTORS: dict[tuple[Gender, ActivityLevel, Goal], float] = {
    (Gender.FEMALE, ActivityLevel.SEDENTARY, Goal.LOSE): 26,
    (Gender.FEMALE, ActivityLevel.SEDENTARY, Goal.MAINTAIN): 31,
    (Gender.FEMALE, ActivityLevel.SEDENTARY, Goal.GAIN): 36,
    (Gender.FEMALE, ActivityLevel.ACTIVE, Goal.LOSE): 30,
    (Gender.FEMALE, ActivityLevel.ACTIVE, Goal.MAINTAIN): 35,
    (Gender.FEMALE, ActivityLevel.ACTIVE, Goal.GAIN): 40,
    (Gender.MALE, ActivityLevel.SEDENTARY, Goal.LOSE): 25,
    (Gender.MALE, ActivityLevel.SEDENTARY, Goal.MAINTAIN): 30,
    (Gender.MALE, ActivityLevel.SEDENTARY, Goal.GAIN): 35,
    (Gender.MALE, ActivityLevel.ACTIVE, Goal.LOSE): 35,
    (Gender.MALE, ActivityLevel.ACTIVE, Goal.MAINTAIN): 40,
    (Gender.MALE, ActivityLevel.ACTIVE, Goal.GAIN): 45,
    (Gender.OTHER, ActivityLevel.SEDENTARY, Goal.LOSE): 25.5,
    (Gender.OTHER, ActivityLevel.SEDENTARY, Goal.MAINTAIN): 30.5,
    (Gender.OTHER, ActivityLevel.SEDENTARY, Goal.GAIN): 35.5,
    (Gender.OTHER, ActivityLevel.ACTIVE, Goal.LOSE): 32.5,
    (Gender.OTHER, ActivityLevel.ACTIVE, Goal.MAINTAIN): 37.5,
    (Gender.OTHER, ActivityLevel.ACTIVE, Goal.GAIN): 42.5,
}

_BMI_CATEGORIES = (
    BmiCategory(
        category="Sottopeso",
        label="Underweight",
        description="Il tuo peso è inferiore al range considerato salutare.",
    ),
    BmiCategory(
        category="Normopeso",
        label="Normal",
        description="Il tuo peso rientra nel range considerato salutare.",
    ),
    BmiCategory(
        category="Sovrappeso",
        label="Overweight",
        description="Il tuo peso è superiore al range considerato salutare.",
    ),
    BmiCategory(
        category="Obesità",
        label="Obesity",
        description="Il tuo peso richiede attenzione medica.",
    ),
)

_SAFETY_TIERS: dict[WeightChangeRate, SafetyTier] = {
    WeightChangeRate.RATE_025: SafetyTier.SUSTAINABLE,
    WeightChangeRate.RATE_05: SafetyTier.RECOMMENDED,
    WeightChangeRate.RATE_075: SafetyTier.DEMANDING,
    WeightChangeRate.RATE_1: SafetyTier.SHORT_TERM_ONLY,
}


def _check_factor_table() -> None:
    missing = [
        (gender, level, goal)
        for gender in Gender
        for level in ActivityLevel
        for goal in Goal
        if (gender, level, goal) not in CALORIE_FACTORS
    ]
    if missing or set(BMI_THRESHOLDS) != set(Gender):
        raise RuntimeError(f"Calorie factor table is incomplete: {missing}")


_check_factor_table()


def compute_bmi(weight_kg: float, height_m: float) -> float:
    """Return weight / height², or 0 when either input is not positive."""
    if height_m <= 0 or weight_kg <= 0:
        return 0.0
    return weight_kg / (height_m * height_m)


def bmi_category(bmi: float) -> BmiCategory:
    """Return the BMI band; lower bounds inclusive."""
    if bmi < UNDERWEIGHT_MAX_BMI:
        return _BMI_CATEGORIES[0]
    if bmi < NORMAL_MAX_BMI:
        return _BMI_CATEGORIES[1]
    if bmi < OVERWEIGHT_MAX_BMI:
        return _BMI_CATEGORIES[2]
    return _BMI_CATEGORIES[3]


def effective_weight(profile: UserProfile) -> float:
    """Return the weight used for the calorie goal, clamped at the BMI threshold."""
    height_m = profile.height_m
    bmi = compute_bmi(profile.weight_kg, height_m)
    threshold = BMI_THRESHOLDS[profile.gender]
    if bmi > threshold:
        return threshold * height_m * height_m
    return profile.weight_kg


def compute_daily_calorie_goal(
    profile: UserProfile, minimum: int | None = None
) -> int:
    """Return round(effective weight × factor − free meal allowance) in kcal.

    No floor is applied unless ``minimum`` is given.
    """
    factor = CALORIE_FACTORS[
        (profile.gender, profile.activity_level, profile.goal)
    ]
    goal = int(
        round_half_up(effective_weight(profile) * factor - FREE_MEAL_ALLOWANCE_KCAL)
    )
    if minimum is not None:
        return max(goal, minimum)
    return goal


def compute_activity_calories_burned(
    met: float, weight_kg: float, duration_minutes: float
) -> int:
    """Return round(MET × weight × hours), or 0 for invalid input."""
    if met <= 0 or weight_kg <= 0 or duration_minutes < 0:
        return 0
    return int(round_half_up(met * weight_kg * (duration_minutes / 60)))


def compute_steps_calories_burned(steps: int, weight_kg: float) -> int:
    """Return the walking estimate: 0.04 kcal per step at 70 kg, scaled by weight."""
    if steps <= 0 or weight_kg <= 0:
        return 0
    return int(
        round_half_up(
            steps
            * STEP_KCAL_AT_REFERENCE_WEIGHT
            * (weight_kg / STEP_REFERENCE_WEIGHT_KG)
        )
    )


def weight_change_plan(rate: WeightChangeRate) -> WeightChangePlan:
    """Return kg/week, daily calorie delta and safety tier for a rate."""
    kg_per_week = float(rate.value)
    return WeightChangePlan(
        rate=rate,
        kg_per_week=kg_per_week,
        daily_calorie_delta=int(round_half_up(kg_per_week * KCAL_PER_KG_FAT / 7)),
        safety=_SAFETY_TIERS[rate],
    )


def scale_macros(per_100g: MacroProfile, grams: float) -> MacroProfile:
    """Scale per-100g nutrients to a portion, rounding each field on its own."""
    factor = grams / 100
    return MacroProfile(
        calories=per_100g.calories * factor,
        protein_g=per_100g.protein_g * factor,
        carbs_g=per_100g.carbs_g * factor,
        fat_g=per_100g.fat_g * factor,
        fiber_g=per_100g.fiber_g * factor,
        sugar_g=per_100g.sugar_g * factor,
    ).rounded()


def summarize_profile(
    profile: UserProfile, minimum_calories: int | None = None
) -> ProfileSummary:
    """Return BMI, BMI band, calorie goal and weight plan for a profile."""
    bmi = compute_bmi(profile.weight_kg, profile.height_m)
    return ProfileSummary(
        bmi=round_half_up(bmi, 1),
        bmi_category=bmi_category(bmi),
        daily_calorie_goal=compute_daily_calorie_goal(profile, minimum_calories),
        weight_plan=weight_change_plan(profile.weight_change_rate),
    )
