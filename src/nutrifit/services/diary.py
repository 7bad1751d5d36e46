"""Food and activity diary.

Every logged food is stored as its own row keyed by a fresh id, so concurrent
appends to the same (user, day, meal type) slot never overwrite each other.
Meals exist only as long as they hold at least one item.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import UUID, uuid4

from nutrifit.domain.errors import InvalidInputError
from nutrifit.domain.meals import (
    MEAL_TYPE_INFO,
    DailyDiary,
    FoodItem,
    Meal,
    MealType,
    PhysicalActivity,
    StepsRecord,
)
from nutrifit.domain.nutrition import EMPTY_MACROS, round_half_up
from nutrifit.domain.profile import UserProfile
from nutrifit.domain.reference import ActivityReference, FoodReference
from nutrifit.services.calculator import (
    bmi_category,
    compute_activity_calories_burned,
    compute_bmi,
    compute_steps_calories_burned,
    scale_macros,
)
from nutrifit.services.profiles import ProfileService
from nutrifit.services.reference import ActivityCatalog, FoodCatalog

_logger = logging.getLogger(__name__)


class DiaryRepository(Protocol):
    """Persistence interface for diary records of one user."""

    def add_food_item(self, user_id: UUID, item: FoodItem) -> None:
        """Insert a food item row."""

    def get_food_item(self, user_id: UUID, item_id: UUID) -> FoodItem | None:
        """Return a food item by id."""

    def update_food_item(self, user_id: UUID, item: FoodItem) -> None:
        """Replace a food item row."""

    def delete_food_item(self, user_id: UUID, item_id: UUID) -> None:
        """Delete a food item row."""

    def list_food_items(self, user_id: UUID, start: date, end: date) -> list[FoodItem]:
        """Return food items with start <= day <= end, oldest first."""

    def add_activity(self, user_id: UUID, activity: PhysicalActivity) -> None:
        """Insert an activity row."""

    def get_activity(self, user_id: UUID, activity_id: UUID) -> PhysicalActivity | None:
        """Return an activity by id."""

    def delete_activity(self, user_id: UUID, activity_id: UUID) -> None:
        """Delete an activity row."""

    def list_activities(
        self, user_id: UUID, start: date, end: date
    ) -> list[PhysicalActivity]:
        """Return activities with start <= day <= end, oldest first."""

    def list_steps(self, user_id: UUID, start: date, end: date) -> list[StepsRecord]:
        """Return step records with start <= day <= end."""

    def save_steps(self, user_id: UUID, record: StepsRecord) -> None:
        """Insert or replace the step count for a day."""


@dataclass
class DiaryService:
    """Service that logs diary entries and projects them into daily views."""

    repository: DiaryRepository
    profile_service: ProfileService
    food_catalog: FoodCatalog
    activity_catalog: ActivityCatalog
    default_weight_kg: float = 70.0
    max_range_days: int = 366

    def add_food(
        self,
        user_id: UUID,
        day: date,
        meal_type: MealType,
        food_name: str,
        grams: float,
    ) -> FoodItem | None:
        """Resolve a catalog food by name and log it; None when unknown."""
        food = self.food_catalog.get_by_name(food_name)
        if food is None:
            _logger.warning("Food not found in catalog: %s", food_name)
            return None
        return self.add_food_to_meal(user_id, day, meal_type, food, grams)

    def add_food_to_meal(
        self,
        user_id: UUID,
        day: date,
        meal_type: MealType,
        food: FoodReference,
        grams: float,
    ) -> FoodItem:
        """Append a new food item to the meal slot, creating the meal if needed."""
        _require_positive_grams(grams)
        item = FoodItem(
            id=uuid4(),
            day=day,
            meal_type=meal_type,
            name=food.name,
            grams=grams,
            macros=scale_macros(food.per_100g, grams),
            per_100g=food.per_100g,
            source=food.source,
            created_at=datetime.now(tz=UTC),
        )
        self.repository.add_food_item(user_id, item)
        _logger.info(
            "Food logged: user_id=%s day=%s meal=%s food=%s grams=%s",
            user_id,
            day,
            meal_type.value,
            food.name,
            grams,
        )
        return item

    def update_food_quantity(
        self,
        user_id: UUID,
        day: date,
        meal_type: MealType,
        item_id: UUID,
        grams: float,
    ) -> FoodItem | None:
        """Rescale an existing item from its per-100g snapshot."""
        _require_positive_grams(grams)
        item = self._find_item(user_id, day, meal_type, item_id)
        if item is None:
            return None
        updated = FoodItem(
            id=item.id,
            day=item.day,
            meal_type=item.meal_type,
            name=item.name,
            grams=grams,
            macros=scale_macros(item.per_100g, grams),
            per_100g=item.per_100g,
            source=item.source,
            created_at=item.created_at,
        )
        self.repository.update_food_item(user_id, updated)
        return updated

    def remove_food_from_meal(
        self, user_id: UUID, day: date, meal_type: MealType, item_id: UUID
    ) -> bool:
        """Delete one item; the meal disappears with its last item."""
        item = self._find_item(user_id, day, meal_type, item_id)
        if item is None:
            return False
        self.repository.delete_food_item(user_id, item_id)
        _logger.info("Food removed: user_id=%s item_id=%s", user_id, item_id)
        return True

    def get_meal(self, user_id: UUID, day: date, meal_type: MealType) -> Meal | None:
        """Return the meal in a slot, or None when the slot is empty."""
        items = [
            item
            for item in self.repository.list_food_items(user_id, day, day)
            if item.meal_type == meal_type
        ]
        if not items:
            return None
        return Meal(meal_type=meal_type, day=day, items=items)

    def add_activity(
        self, user_id: UUID, day: date, activity_name: str, minutes: float
    ) -> PhysicalActivity | None:
        """Resolve a catalog activity by name and log it; None when unknown."""
        activity = self.activity_catalog.get_by_name(activity_name)
        if activity is None:
            _logger.warning("Activity not found in catalog: %s", activity_name)
            return None
        return self.add_activity_entry(user_id, day, activity, minutes)

    def add_activity_entry(
        self,
        user_id: UUID,
        day: date,
        activity: ActivityReference,
        minutes: float,
    ) -> PhysicalActivity:
        """Log an activity with calories burned at the user's current weight."""
        if minutes < 0:
            raise InvalidInputError("minutes", "must not be negative")
        weight_kg = self._weight_for(self.profile_service.get_profile(user_id))
        record = PhysicalActivity(
            id=uuid4(),
            day=day,
            name=activity.name,
            met=activity.met,
            duration_minutes=minutes,
            calories_burned=compute_activity_calories_burned(
                activity.met, weight_kg, minutes
            ),
            created_at=datetime.now(tz=UTC),
        )
        self.repository.add_activity(user_id, record)
        _logger.info(
            "Activity logged: user_id=%s day=%s activity=%s minutes=%s kcal=%s",
            user_id,
            day,
            activity.name,
            minutes,
            record.calories_burned,
        )
        return record

    def remove_activity(self, user_id: UUID, day: date, activity_id: UUID) -> bool:
        """Delete an activity logged on the given day."""
        activity = self.repository.get_activity(user_id, activity_id)
        if activity is None or activity.day != day:
            return False
        self.repository.delete_activity(user_id, activity_id)
        return True

    def set_steps(self, user_id: UUID, day: date, steps: int) -> StepsRecord:
        """Replace the step count for a day."""
        if steps < 0:
            raise InvalidInputError("steps", "must not be negative")
        record = StepsRecord(day=day, steps=steps)
        self.repository.save_steps(user_id, record)
        return record

    def add_steps(self, user_id: UUID, day: date, steps: int) -> StepsRecord:
        """Add steps to the count already stored for a day."""
        if steps < 0:
            raise InvalidInputError("steps", "must not be negative")
        current = sum(
            record.steps for record in self.repository.list_steps(user_id, day, day)
        )
        return self.set_steps(user_id, day, current + steps)

    def get_daily_diary(self, user_id: UUID, day: date) -> DailyDiary:
        """Return the diary projection for one day."""
        diaries = self.get_range_diary(user_id, day, day)
        return diaries[0]

    def get_range_diary(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailyDiary]:
        """Return one diary per day in the inclusive range; empty when end < start.

        Ranges longer than ``max_range_days`` are rejected.
        """
        if end < start:
            return []
        if (end - start).days + 1 > self.max_range_days:
            raise InvalidInputError(
                "end", f"range must not exceed {self.max_range_days} days"
            )
        profile = self.profile_service.get_profile(user_id)
        goal = self.profile_service.calorie_goal(profile)
        items_by_day: defaultdict[date, list[FoodItem]] = defaultdict(list)
        for item in self.repository.list_food_items(user_id, start, end):
            items_by_day[item.day].append(item)
        activities_by_day: defaultdict[date, list[PhysicalActivity]] = defaultdict(list)
        for activity in self.repository.list_activities(user_id, start, end):
            activities_by_day[activity.day].append(activity)
        steps_by_day: defaultdict[date, int] = defaultdict(int)
        for record in self.repository.list_steps(user_id, start, end):
            steps_by_day[record.day] += record.steps
        diaries = []
        for offset in range((end - start).days + 1):
            day = start + timedelta(days=offset)
            diaries.append(
                _build_diary(
                    day,
                    items_by_day[day],
                    activities_by_day[day],
                    steps_by_day[day],
                    profile,
                    goal,
                    self._weight_for(profile),
                )
            )
        return diaries

    def copy_meals(
        self,
        user_id: UUID,
        source_day: date,
        target_day: date,
        meal_types: list[MealType] | None = None,
    ) -> list[FoodItem]:
        """Duplicate the source day's food items onto the target day.

        Copies are appended to any meals already on the target day; activities
        are not copied.
        """
        copied = []
        for item in self.repository.list_food_items(user_id, source_day, source_day):
            if meal_types and item.meal_type not in meal_types:
                continue
            duplicate = FoodItem(
                id=uuid4(),
                day=target_day,
                meal_type=item.meal_type,
                name=item.name,
                grams=item.grams,
                macros=item.macros,
                per_100g=item.per_100g,
                source=item.source,
                created_at=datetime.now(tz=UTC),
            )
            self.repository.add_food_item(user_id, duplicate)
            copied.append(duplicate)
        _logger.info(
            "Meals copied: user_id=%s from=%s to=%s items=%s",
            user_id,
            source_day,
            target_day,
            len(copied),
        )
        return copied

    def _find_item(
        self, user_id: UUID, day: date, meal_type: MealType, item_id: UUID
    ) -> FoodItem | None:
        item = self.repository.get_food_item(user_id, item_id)
        if item is None or item.day != day or item.meal_type != meal_type:
            return None
        return item

    def _weight_for(self, profile: UserProfile | None) -> float:
        return profile.weight_kg if profile else self.default_weight_kg


def _build_diary(  # noqa: PLR0913
    day: date,
    items: list[FoodItem],
    activities: list[PhysicalActivity],
    steps: int,
    profile: UserProfile | None,
    goal: int,
    weight_kg: float,
) -> DailyDiary:
    meals = []
    for meal_type in sorted(MealType, key=lambda value: MEAL_TYPE_INFO[value].order):
        slot = [item for item in items if item.meal_type == meal_type]
        if slot:
            meals.append(Meal(meal_type=meal_type, day=day, items=slot))
    consumed = EMPTY_MACROS
    for meal in meals:
        consumed = consumed + meal.totals
    bmi = None
    category = None
    if profile is not None:
        raw_bmi = compute_bmi(profile.weight_kg, profile.height_m)
        bmi = round_half_up(raw_bmi, 1)
        category = bmi_category(raw_bmi)
    return DailyDiary(
        day=day,
        meals=meals,
        activities=activities,
        steps=steps,
        consumed=consumed.rounded(),
        activity_calories=sum(entry.calories_burned for entry in activities),
        steps_calories=compute_steps_calories_burned(steps, weight_kg),
        calorie_goal=goal,
        bmi=bmi,
        bmi_category=category,
    )


def _require_positive_grams(grams: float) -> None:
    if grams <= 0:
        raise InvalidInputError("grams", "must be greater than 0")
