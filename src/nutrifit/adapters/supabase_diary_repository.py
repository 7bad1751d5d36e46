"""Supabase repository for diary records."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client, PostgrestAPIError

from nutrifit.domain.errors import DiaryConflictError
from nutrifit.domain.meals import FoodItem, MealType, PhysicalActivity, StepsRecord
from nutrifit.domain.nutrition import MacroProfile
from nutrifit.services.diary import DiaryRepository

_UNIQUE_VIOLATION = "23505"
_FOOD_ITEM_COLUMNS = (
    "id, day, meal_type, name, grams, calories, protein_g, carbs_g, fat_g, "
    "fiber_g, sugar_g, nutrition_snapshot, source, created_at"
)
_ACTIVITY_COLUMNS = (
    "id, day, name, met, duration_minutes, calories_burned, created_at"
)


@dataclass
class SupabaseDiaryRepository(DiaryRepository):
    """Supabase implementation for meal items, activities and steps."""

    client: Client

    def add_food_item(self, user_id: UUID, item: FoodItem) -> None:
        """Insert a meal item row."""
        try:
            self.client.table("meal_items").insert(
                _serialize_item(user_id, item)
            ).execute()
        except PostgrestAPIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise DiaryConflictError(f"Meal item {item.id} already exists") from exc
            raise

    def get_food_item(self, user_id: UUID, item_id: UUID) -> FoodItem | None:
        """Return a meal item by id."""
        response = (
            self.client.table("meal_items")
            .select(_FOOD_ITEM_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("id", str(item_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def update_food_item(self, user_id: UUID, item: FoodItem) -> None:
        """Replace a meal item row; a vanished row is a conflict."""
        payload = _serialize_item(user_id, item)
        payload.pop("id")
        response = (
            self.client.table("meal_items")
            .update(payload)
            .eq("user_id", str(user_id))
            .eq("id", str(item.id))
            .execute()
        )
        if not response.data:
            raise DiaryConflictError(f"Meal item {item.id} was removed concurrently")

    def delete_food_item(self, user_id: UUID, item_id: UUID) -> None:
        """Delete a meal item row."""
        self.client.table("meal_items").delete().eq("user_id", str(user_id)).eq(
            "id", str(item_id)
        ).execute()

    def list_food_items(self, user_id: UUID, start: date, end: date) -> list[FoodItem]:
        """Return meal items in the inclusive day range."""
        response = (
            self.client.table("meal_items")
            .select(_FOOD_ITEM_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("day", start.isoformat())
            .lte("day", end.isoformat())
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_item(row) for row in response.data or []]

    def add_activity(self, user_id: UUID, activity: PhysicalActivity) -> None:
        """Insert an activity row."""
        self.client.table("activities").insert(
            {
                "id": str(activity.id),
                "user_id": str(user_id),
                "day": activity.day.isoformat(),
                "name": activity.name,
                "met": activity.met,
                "duration_minutes": activity.duration_minutes,
                "calories_burned": activity.calories_burned,
                "created_at": activity.created_at.isoformat(),
            }
        ).execute()

    def get_activity(self, user_id: UUID, activity_id: UUID) -> PhysicalActivity | None:
        """Return an activity by id."""
        response = (
            self.client.table("activities")
            .select(_ACTIVITY_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("id", str(activity_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_activity(response.data[0])

    def delete_activity(self, user_id: UUID, activity_id: UUID) -> None:
        """Delete an activity row."""
        self.client.table("activities").delete().eq("user_id", str(user_id)).eq(
            "id", str(activity_id)
        ).execute()

    def list_activities(
        self, user_id: UUID, start: date, end: date
    ) -> list[PhysicalActivity]:
        """Return activities in the inclusive day range."""
        response = (
            self.client.table("activities")
            .select(_ACTIVITY_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("day", start.isoformat())
            .lte("day", end.isoformat())
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_activity(row) for row in response.data or []]

    def list_steps(self, user_id: UUID, start: date, end: date) -> list[StepsRecord]:
        """Return step counts in the inclusive day range."""
        response = (
            self.client.table("daily_steps")
            .select("day, steps")
            .eq("user_id", str(user_id))
            .gte("day", start.isoformat())
            .lte("day", end.isoformat())
            .execute()
        )
        return [
            StepsRecord(
                day=date.fromisoformat(str(row["day"])), steps=int(row["steps"])
            )
            for row in response.data or []
        ]

    def save_steps(self, user_id: UUID, record: StepsRecord) -> None:
        """Upsert the step count for a day."""
        self.client.table("daily_steps").upsert(
            {
                "user_id": str(user_id),
                "day": record.day.isoformat(),
                "steps": record.steps,
            },
            on_conflict="user_id,day",
        ).execute()


def _serialize_item(user_id: UUID, item: FoodItem) -> dict[str, object]:
    return {
        "id": str(item.id),
        "user_id": str(user_id),
        "day": item.day.isoformat(),
        "meal_type": item.meal_type.value,
        "name": item.name,
        "grams": item.grams,
        "calories": item.macros.calories,
        "protein_g": item.macros.protein_g,
        "carbs_g": item.macros.carbs_g,
        "fat_g": item.macros.fat_g,
        "fiber_g": item.macros.fiber_g,
        "sugar_g": item.macros.sugar_g,
        "nutrition_snapshot": {
            "calories": item.per_100g.calories,
            "protein_g": item.per_100g.protein_g,
            "carbs_g": item.per_100g.carbs_g,
            "fat_g": item.per_100g.fat_g,
            "fiber_g": item.per_100g.fiber_g,
            "sugar_g": item.per_100g.sugar_g,
        },
        "source": item.source,
        "created_at": item.created_at.isoformat(),
    }


def _parse_item(row: dict[str, object]) -> FoodItem:
    snapshot = row.get("nutrition_snapshot") or {}
    return FoodItem(
        id=UUID(str(row["id"])),
        day=date.fromisoformat(str(row["day"])),
        meal_type=MealType(row["meal_type"]),
        name=str(row.get("name", "")),
        grams=float(row.get("grams", 0.0)),
        macros=MacroProfile(
            calories=float(row.get("calories", 0.0)),
            protein_g=float(row.get("protein_g", 0.0)),
            carbs_g=float(row.get("carbs_g", 0.0)),
            fat_g=float(row.get("fat_g", 0.0)),
            fiber_g=float(row.get("fiber_g") or 0.0),
            sugar_g=float(row.get("sugar_g") or 0.0),
        ),
        per_100g=MacroProfile(
            calories=float(snapshot.get("calories", 0.0)),
            protein_g=float(snapshot.get("protein_g", 0.0)),
            carbs_g=float(snapshot.get("carbs_g", 0.0)),
            fat_g=float(snapshot.get("fat_g", 0.0)),
            fiber_g=float(snapshot.get("fiber_g", 0.0)),
            sugar_g=float(snapshot.get("sugar_g", 0.0)),
        ),
        source=str(row.get("source") or "CREA"),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )


def _parse_activity(row: dict[str, object]) -> PhysicalActivity:
    return PhysicalActivity(
        id=UUID(str(row["id"])),
        day=date.fromisoformat(str(row["day"])),
        name=str(row.get("name", "")),
        met=float(row.get("met", 0.0)),
        duration_minutes=float(row.get("duration_minutes", 0.0)),
        calories_burned=int(row.get("calories_burned", 0)),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
