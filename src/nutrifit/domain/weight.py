"""Domain models for weight history."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class WeightEntry:
    """Weight recorded on a given day."""

    day: date
    weight_kg: float
    created_at: datetime
    note: str | None = None
    photo_ref: str | None = None


@dataclass(frozen=True)
class WeightStats:
    """Summary of a weight history."""

    current: float | None
    minimum: float | None
    maximum: float | None
    average: float | None
    change_7d: float | None
    change_30d: float | None
    entries: int
