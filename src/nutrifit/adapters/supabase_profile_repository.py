"""Supabase repository for user profiles."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from nutrifit.domain.profile import (
    ActivityLevel,
    DietStyle,
    Gender,
    Goal,
    UserProfile,
    WeightChangeRate,
)
from nutrifit.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profiles."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the profile row for a user."""
        response = (
            self.client.table("profiles")
            .select(
                "name, age, gender, height_cm, weight_kg, goal, activity_level, "
                "diet_style, weight_change_rate, created_at, updated_at"
            )
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def save_profile(self, user_id: UUID, profile: UserProfile) -> None:
        """Upsert the profile row."""
        self.client.table("profiles").upsert(
            {
                "user_id": str(user_id),
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
            },
            on_conflict="user_id",
        ).execute()


def _parse_profile(row: dict[str, object]) -> UserProfile:
    return UserProfile(
        name=str(row.get("name", "")),
        age=int(row["age"]),
        gender=Gender(row["gender"]),
        height_cm=float(row["height_cm"]),
        weight_kg=float(row["weight_kg"]),
        goal=Goal(row["goal"]),
        activity_level=ActivityLevel(row["activity_level"]),
        diet_style=DietStyle(row["diet_style"]),
        weight_change_rate=WeightChangeRate(str(row["weight_change_rate"])),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        updated_at=datetime.fromisoformat(str(row["updated_at"])),
    )
