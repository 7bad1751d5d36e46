"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DailyTotals:
    """Totals for one diary day."""

    day: date
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float
    burned_calories: int
    steps: int
    entries: int
    weight_kg: float | None = None


@dataclass(frozen=True)
class MetricSummary:
    """Minimum, maximum and average of a series."""

    minimum: float
    maximum: float
    average: float


ZERO_SUMMARY = MetricSummary(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class MacroSplit:
    """Share of protein, carbs and fat in grams, as percentages."""

    protein_percent: int
    carbs_percent: int
    fat_percent: int


@dataclass(frozen=True)
class PeriodStats:
    """Aggregated statistics for an inclusive date range."""

    start: date
    end: date
    daily: list[DailyTotals]
    calories: MetricSummary
    protein_g: MetricSummary
    carbs_g: MetricSummary
    fat_g: MetricSummary
    burned_calories: MetricSummary
    steps: MetricSummary
    weight_kg: MetricSummary | None
    total_calories: float
    total_steps: int
    days_logged: int
    entries_count: int
    days_on_target: int
    macro_split: MacroSplit
