"""Period statistics over the diary and weight history."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from nutrifit.domain.meals import DailyDiary
from nutrifit.domain.nutrition import round_half_up
from nutrifit.domain.stats import (
    ZERO_SUMMARY,
    DailyTotals,
    MacroSplit,
    MetricSummary,
    PeriodStats,
)
from nutrifit.services.diary import DiaryService
from nutrifit.services.weight import WeightService

# A logged day counts as on target up to 10% above the goal.
ON_TARGET_TOLERANCE = 1.1


@dataclass
class StatsService:
    """Service folding per-day diaries into period statistics."""

    diary_service: DiaryService
    weight_service: WeightService

    def get_period_stats(self, user_id: UUID, start: date, end: date) -> PeriodStats:
        """Return min/max/avg per metric for the inclusive range.

        A range with end < start yields zeroed statistics.
        """
        diaries = self.diary_service.get_range_diary(user_id, start, end)
        weights = (
            self.weight_service.weights_between(user_id, start, end) if diaries else {}
        )
        daily = [_daily_totals(diary, weights.get(diary.day)) for diary in diaries]
        weight_values = [
            entry.weight_kg for entry in daily if entry.weight_kg is not None
        ]
        return PeriodStats(
            start=start,
            end=end,
            daily=daily,
            calories=_summarize([entry.calories for entry in daily], digits=0),
            protein_g=_summarize([entry.protein_g for entry in daily]),
            carbs_g=_summarize([entry.carbs_g for entry in daily]),
            fat_g=_summarize([entry.fat_g for entry in daily]),
            burned_calories=_summarize(
                [entry.burned_calories for entry in daily], digits=0
            ),
            steps=_summarize([entry.steps for entry in daily], digits=0),
            weight_kg=_summarize(weight_values) if weight_values else None,
            total_calories=round_half_up(sum(entry.calories for entry in daily)),
            total_steps=sum(entry.steps for entry in daily),
            days_logged=sum(1 for entry in daily if entry.entries > 0),
            entries_count=sum(entry.entries for entry in daily),
            days_on_target=sum(
                1
                for diary in diaries
                if 0 < diary.consumed.calories
                <= diary.calorie_goal * ON_TARGET_TOLERANCE
            ),
            macro_split=_macro_split(daily),
        )


def _daily_totals(diary: DailyDiary, weight_kg: float | None) -> DailyTotals:
    return DailyTotals(
        day=diary.day,
        calories=diary.consumed.calories,
        protein_g=diary.consumed.protein_g,
        carbs_g=diary.consumed.carbs_g,
        fat_g=diary.consumed.fat_g,
        fiber_g=diary.consumed.fiber_g,
        burned_calories=diary.burned_calories,
        steps=diary.steps,
        entries=sum(len(meal.items) for meal in diary.meals),
        weight_kg=weight_kg,
    )


def _summarize(values: list[float], digits: int = 1) -> MetricSummary:
    if not values:
        return ZERO_SUMMARY
    return MetricSummary(
        minimum=min(values),
        maximum=max(values),
        average=round_half_up(sum(values) / len(values), digits),
    )


def _macro_split(daily: list[DailyTotals]) -> MacroSplit:
    protein = sum(entry.protein_g for entry in daily)
    carbs = sum(entry.carbs_g for entry in daily)
    fat = sum(entry.fat_g for entry in daily)
    total = protein + carbs + fat
    if total <= 0:
        return MacroSplit(protein_percent=33, carbs_percent=34, fat_percent=33)
    return MacroSplit(
        protein_percent=int(round_half_up(protein / total * 100)),
        carbs_percent=int(round_half_up(carbs / total * 100)),
        fat_percent=int(round_half_up(fat / total * 100)),
    )
