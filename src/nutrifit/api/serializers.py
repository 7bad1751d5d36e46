"""JSON serialization of domain objects for API responses."""

from nutrifit.domain.meals import DailyDiary, FoodItem, Meal, PhysicalActivity
from nutrifit.domain.nutrition import MacroProfile
from nutrifit.domain.profile import BmiCategory, ProfileSummary, UserProfile
from nutrifit.domain.reference import ActivityReference, FoodReference
from nutrifit.domain.stats import DailyTotals, MetricSummary, PeriodStats
from nutrifit.domain.weight import WeightEntry, WeightStats


def serialize_macros(macros: MacroProfile) -> dict[str, object]:
    return {
        "calories": macros.calories,
        "protein_g": macros.protein_g,
        "carbs_g": macros.carbs_g,
        "fat_g": macros.fat_g,
        "fiber_g": macros.fiber_g,
        "sugar_g": macros.sugar_g,
    }


def serialize_food_reference(food: FoodReference) -> dict[str, object]:
    return {
        "name": food.name,
        "category": food.category,
        "source": food.source,
        "per_100g": serialize_macros(food.per_100g),
    }


def serialize_activity_reference(activity: ActivityReference) -> dict[str, object]:
    return {"name": activity.name, "met": activity.met, "category": activity.category}


def serialize_profile(profile: UserProfile) -> dict[str, object]:
    return {
        "name": profile.name,
        "age": profile.age,
        "gender": profile.gender.value,
        "height_cm": profile.height_cm,
        "weight_kg": profile.weight_kg,
        "goal": profile.goal.value,
        "activity_level": profile.activity_level.value,
        "diet_style": profile.diet_style.value,
        "weight_change_rate": profile.weight_change_rate.value,
        "created_at": profile.created_at.isoformat(),
        "updated_at": profile.updated_at.isoformat(),
    }


def serialize_bmi_category(category: BmiCategory | None) -> dict[str, object] | None:
    if category is None:
        return None
    return {
        "category": category.category,
        "label": category.label,
        "description": category.description,
    }


def serialize_summary(summary: ProfileSummary) -> dict[str, object]:
    plan = summary.weight_plan
    return {
        "bmi": summary.bmi,
        "bmi_category": serialize_bmi_category(summary.bmi_category),
        "daily_calorie_goal": summary.daily_calorie_goal,
        "weight_plan": {
            "rate": plan.rate.value,
            "kg_per_week": plan.kg_per_week,
            "daily_calorie_delta": plan.daily_calorie_delta,
            "safety": plan.safety.value,
        },
    }


def serialize_food_item(item: FoodItem) -> dict[str, object]:
    return {
        "id": str(item.id),
        "day": item.day.isoformat(),
        "meal_type": item.meal_type.value,
        "name": item.name,
        "grams": item.grams,
        "source": item.source,
        "created_at": item.created_at.isoformat(),
        **serialize_macros(item.macros),
    }


def serialize_meal(meal: Meal) -> dict[str, object]:
    return {
        "meal_type": meal.meal_type.value,
        "label": meal.label,
        "items": [serialize_food_item(item) for item in meal.items],
        "totals": serialize_macros(meal.totals),
    }


def serialize_activity(activity: PhysicalActivity) -> dict[str, object]:
    return {
        "id": str(activity.id),
        "day": activity.day.isoformat(),
        "name": activity.name,
        "met": activity.met,
        "duration_minutes": activity.duration_minutes,
        "calories_burned": activity.calories_burned,
        "created_at": activity.created_at.isoformat(),
    }


def serialize_diary(diary: DailyDiary) -> dict[str, object]:
    return {
        "day": diary.day.isoformat(),
        "meals": [serialize_meal(meal) for meal in diary.meals],
        "activities": [serialize_activity(entry) for entry in diary.activities],
        "steps": diary.steps,
        "consumed": serialize_macros(diary.consumed),
        "activity_calories": diary.activity_calories,
        "steps_calories": diary.steps_calories,
        "burned_calories": diary.burned_calories,
        "calorie_goal": diary.calorie_goal,
        "remaining_calories": diary.remaining_calories,
        "net_calories": diary.net_calories,
        "bmi": diary.bmi,
        "bmi_category": serialize_bmi_category(diary.bmi_category),
    }


def serialize_weight(entry: WeightEntry) -> dict[str, object]:
    return {
        "day": entry.day.isoformat(),
        "weight_kg": entry.weight_kg,
        "note": entry.note,
        "photo_ref": entry.photo_ref,
        "created_at": entry.created_at.isoformat(),
    }


def serialize_weight_stats(stats: WeightStats) -> dict[str, object]:
    return {
        "current": stats.current,
        "min": stats.minimum,
        "max": stats.maximum,
        "average": stats.average,
        "change_7d": stats.change_7d,
        "change_30d": stats.change_30d,
        "entries": stats.entries,
    }


def _serialize_metric(summary: MetricSummary | None) -> dict[str, float] | None:
    if summary is None:
        return None
    return {"min": summary.minimum, "max": summary.maximum, "avg": summary.average}


def _serialize_totals(totals: DailyTotals) -> dict[str, object]:
    return {
        "day": totals.day.isoformat(),
        "calories": totals.calories,
        "protein_g": totals.protein_g,
        "carbs_g": totals.carbs_g,
        "fat_g": totals.fat_g,
        "fiber_g": totals.fiber_g,
        "burned_calories": totals.burned_calories,
        "steps": totals.steps,
        "entries": totals.entries,
        "weight_kg": totals.weight_kg,
    }


def serialize_period_stats(stats: PeriodStats) -> dict[str, object]:
    return {
        "start": stats.start.isoformat(),
        "end": stats.end.isoformat(),
        "daily": [_serialize_totals(entry) for entry in stats.daily],
        "calories": _serialize_metric(stats.calories),
        "protein_g": _serialize_metric(stats.protein_g),
        "carbs_g": _serialize_metric(stats.carbs_g),
        "fat_g": _serialize_metric(stats.fat_g),
        "burned_calories": _serialize_metric(stats.burned_calories),
        "steps": _serialize_metric(stats.steps),
        "weight_kg": _serialize_metric(stats.weight_kg),
        "total_calories": stats.total_calories,
        "total_steps": stats.total_steps,
        "days_logged": stats.days_logged,
        "entries_count": stats.entries_count,
        "days_on_target": stats.days_on_target,
        "macro_split": {
            "protein_percent": stats.macro_split.protein_percent,
            "carbs_percent": stats.macro_split.carbs_percent,
            "fat_percent": stats.macro_split.fat_percent,
        },
    }
