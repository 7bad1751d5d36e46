"""Weight history service."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import UUID

from nutrifit.domain.errors import InvalidInputError
from nutrifit.domain.nutrition import round_half_up
from nutrifit.domain.weight import WeightEntry, WeightStats
from nutrifit.services.profiles import WEIGHT_KG_RANGE, ProfileService

STATS_WINDOW = 365

_logger = logging.getLogger(__name__)


class WeightRepository(Protocol):
    """Persistence interface for weight entries."""

    def save_weight(self, user_id: UUID, entry: WeightEntry) -> None:
        """Insert or replace the entry for its day."""

    def list_weights(self, user_id: UUID) -> list[WeightEntry]:
        """Return all weight entries for a user."""

    def delete_weight(self, user_id: UUID, day: date) -> bool:
        """Delete the entry for a day; return False when none existed."""


@dataclass
class WeightService:
    """Service for the per-user weight time series."""

    repository: WeightRepository
    profile_service: ProfileService
    history_limit: int = 90

    def add_weight(
        self,
        user_id: UUID,
        day: date,
        weight_kg: float,
        note: str | None = None,
        photo_ref: str | None = None,
    ) -> WeightEntry:
        """Record the weight for a day, replacing any entry on the same day.

        The profile weight follows the entry when it is the most recent one.
        """
        low, high = WEIGHT_KG_RANGE
        if not low <= weight_kg <= high:
            raise InvalidInputError(
                "weight_kg", f"must be between {low:g} and {high:g}"
            )
        entry = WeightEntry(
            day=day,
            weight_kg=round_half_up(weight_kg, 1),
            created_at=datetime.now(tz=UTC),
            note=note,
            photo_ref=photo_ref,
        )
        history = self.repository.list_weights(user_id)
        self.repository.save_weight(user_id, entry)
        if all(existing.day <= day for existing in history):
            self.profile_service.update_weight(user_id, entry.weight_kg)
        _logger.info(
            "Weight recorded: user_id=%s day=%s kg=%s", user_id, day, entry.weight_kg
        )
        return entry

    def get_history(self, user_id: UUID, limit: int | None = None) -> list[WeightEntry]:
        """Return entries newest first."""
        entries = sorted(
            self.repository.list_weights(user_id),
            key=lambda entry: entry.day,
            reverse=True,
        )
        resolved = limit if limit is not None else self.history_limit
        return entries[: max(resolved, 0)]

    def delete_weight(self, user_id: UUID, day: date) -> bool:
        """Delete the entry recorded on a day."""
        return self.repository.delete_weight(user_id, day)

    def weights_between(
        self, user_id: UUID, start: date, end: date
    ) -> dict[date, float]:
        """Return weight by day for the inclusive range."""
        return {
            entry.day: entry.weight_kg
            for entry in self.repository.list_weights(user_id)
            if start <= entry.day <= end
        }

    def get_stats(self, user_id: UUID, today: date | None = None) -> WeightStats:
        """Return current, min, max, average and 7/30-day change."""
        history = self.get_history(user_id, limit=STATS_WINDOW)
        if not history:
            return WeightStats(
                current=None,
                minimum=None,
                maximum=None,
                average=None,
                change_7d=None,
                change_30d=None,
                entries=0,
            )
        reference_day = today or datetime.now(tz=UTC).date()
        weights = [entry.weight_kg for entry in history]
        current = weights[0]
        return WeightStats(
            current=current,
            minimum=min(weights),
            maximum=max(weights),
            average=round_half_up(sum(weights) / len(weights), 1),
            change_7d=_change_since(
                history, current, reference_day - timedelta(days=7)
            ),
            change_30d=_change_since(
                history, current, reference_day - timedelta(days=30)
            ),
            entries=len(history),
        )


def _change_since(
    history: list[WeightEntry], current: float, cutoff: date
) -> float | None:
    for entry in history:
        if entry.day <= cutoff:
            return round_half_up(current - entry.weight_kg, 1)
    return None
