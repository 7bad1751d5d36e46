"""Supabase repository for weight history."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from nutrifit.domain.weight import WeightEntry
from nutrifit.services.weight import WeightRepository


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for weight entries."""

    client: Client

    def save_weight(self, user_id: UUID, entry: WeightEntry) -> None:
        """Upsert the entry for its day."""
        self.client.table("weight_entries").upsert(
            {
                "user_id": str(user_id),
                "day": entry.day.isoformat(),
                "weight_kg": entry.weight_kg,
                "note": entry.note,
                "photo_ref": entry.photo_ref,
                "created_at": entry.created_at.isoformat(),
            },
            on_conflict="user_id,day",
        ).execute()

    def list_weights(self, user_id: UUID) -> list[WeightEntry]:
        """Return weight entries, newest first."""
        response = (
            self.client.table("weight_entries")
            .select("day, weight_kg, note, photo_ref, created_at")
            .eq("user_id", str(user_id))
            .order("day", desc=True)
            .execute()
        )
        return [
            WeightEntry(
                day=date.fromisoformat(str(row["day"])),
                weight_kg=float(row["weight_kg"]),
                created_at=datetime.fromisoformat(str(row["created_at"])),
                note=row.get("note"),
                photo_ref=row.get("photo_ref"),
            )
            for row in response.data or []
        ]

    def delete_weight(self, user_id: UUID, day: date) -> bool:
        """Delete the entry for a day."""
        response = (
            self.client.table("weight_entries")
            .delete()
            .eq("user_id", str(user_id))
            .eq("day", day.isoformat())
            .execute()
        )
        return bool(response.data)
