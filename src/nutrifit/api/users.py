"""Per-user profile, diary, statistics and weight endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Query, Request, status

from nutrifit.api.models import (
    ActivityInput,
    CopyMealsInput,
    FoodEntryInput,
    ProfileInput,
    QuantityInput,
    StepsInput,
    WeightInput,
)
from nutrifit.api.serializers import (
    serialize_activity,
    serialize_diary,
    serialize_food_item,
    serialize_period_stats,
    serialize_profile,
    serialize_summary,
    serialize_weight,
    serialize_weight_stats,
)
from nutrifit.domain.meals import MealType
from nutrifit.domain.nutrition import MacroProfile
from nutrifit.domain.reference import FoodReference
from nutrifit.services.profiles import ProfileData

if TYPE_CHECKING:
    from nutrifit.containers import AppContainer

router = APIRouter(prefix="/users/{user_id}", tags=["users"])


def _not_found(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


@router.get("/profile")
async def get_profile(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the stored profile."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.get_profile(user_id)
    if profile is None:
        raise _not_found("Profile not found")
    return serialize_profile(profile)


@router.put("/profile")
async def put_profile(
    user_id: UUID, payload: ProfileInput, request: Request
) -> dict[str, object]:
    """Create or replace the profile."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.save_profile(
        user_id, ProfileData(**payload.model_dump())
    )
    return serialize_profile(profile)


@router.get("/profile/summary")
async def profile_summary(user_id: UUID, request: Request) -> dict[str, object]:
    """Return BMI, calorie goal and weight plan."""
    container: AppContainer = request.app.state.container
    summary = container.profile_service.get_summary(user_id)
    if summary is None:
        raise _not_found("Profile not found")
    return serialize_summary(summary)


@router.get("/diary")
async def range_diary(
    user_id: UUID, start: date, end: date, request: Request
) -> dict[str, object]:
    """Return one diary per day in the inclusive range."""
    container: AppContainer = request.app.state.container
    diaries = container.diary_service.get_range_diary(user_id, start, end)
    return {"days": [serialize_diary(diary) for diary in diaries]}


@router.get("/diary/{day}")
async def daily_diary(user_id: UUID, day: date, request: Request) -> dict[str, object]:
    """Return the diary for one day."""
    container: AppContainer = request.app.state.container
    return serialize_diary(container.diary_service.get_daily_diary(user_id, day))


@router.post("/diary/{day}/meals/{meal_type}/items", status_code=201)
async def add_food(
    user_id: UUID,
    day: date,
    meal_type: MealType,
    payload: FoodEntryInput,
    request: Request,
) -> dict[str, object]:
    """Log a catalog or custom food in a meal slot."""
    container: AppContainer = request.app.state.container
    service = container.diary_service
    if payload.custom is not None:
        food = FoodReference(
            name=payload.food_name,
            per_100g=MacroProfile(**payload.custom.model_dump()),
            category="",
            source="custom",
        )
        item = service.add_food_to_meal(user_id, day, meal_type, food, payload.grams)
    else:
        item = service.add_food(
            user_id, day, meal_type, payload.food_name, payload.grams
        )
    if item is None:
        raise _not_found("Food not found")
    return serialize_food_item(item)


@router.patch("/diary/{day}/meals/{meal_type}/items/{item_id}")
async def update_food(  # noqa: PLR0913
    user_id: UUID,
    day: date,
    meal_type: MealType,
    item_id: UUID,
    payload: QuantityInput,
    request: Request,
) -> dict[str, object]:
    """Change the quantity of a logged food."""
    container: AppContainer = request.app.state.container
    item = container.diary_service.update_food_quantity(
        user_id, day, meal_type, item_id, payload.grams
    )
    if item is None:
        raise _not_found("Food item not found")
    return serialize_food_item(item)


@router.delete("/diary/{day}/meals/{meal_type}/items/{item_id}", status_code=204)
async def remove_food(
    user_id: UUID, day: date, meal_type: MealType, item_id: UUID, request: Request
) -> None:
    """Remove a logged food."""
    container: AppContainer = request.app.state.container
    if not container.diary_service.remove_food_from_meal(
        user_id, day, meal_type, item_id
    ):
        raise _not_found("Food item not found")


@router.post("/diary/{day}/activities", status_code=201)
async def add_activity(
    user_id: UUID, day: date, payload: ActivityInput, request: Request
) -> dict[str, object]:
    """Log a catalog activity."""
    container: AppContainer = request.app.state.container
    activity = container.diary_service.add_activity(
        user_id, day, payload.activity_name, payload.minutes
    )
    if activity is None:
        raise _not_found("Activity not found")
    return serialize_activity(activity)


@router.delete("/diary/{day}/activities/{activity_id}", status_code=204)
async def remove_activity(
    user_id: UUID, day: date, activity_id: UUID, request: Request
) -> None:
    """Remove a logged activity."""
    container: AppContainer = request.app.state.container
    if not container.diary_service.remove_activity(user_id, day, activity_id):
        raise _not_found("Activity not found")


@router.put("/diary/{day}/steps")
async def put_steps(
    user_id: UUID, day: date, payload: StepsInput, request: Request
) -> dict[str, object]:
    """Set or increment the step count for a day."""
    container: AppContainer = request.app.state.container
    service = container.diary_service
    if payload.increment:
        record = service.add_steps(user_id, day, payload.steps)
    else:
        record = service.set_steps(user_id, day, payload.steps)
    return {
        "day": record.day.isoformat(),
        "steps": record.steps,
        "goal": container.settings.step_goal,
    }


@router.post("/diary/{day}/copy")
async def copy_meals(
    user_id: UUID, day: date, payload: CopyMealsInput, request: Request
) -> dict[str, object]:
    """Copy the meals of a day onto the target day."""
    container: AppContainer = request.app.state.container
    copied = container.diary_service.copy_meals(
        user_id, day, payload.target_day, payload.meal_types
    )
    return {"copied": len(copied), "items": [serialize_food_item(i) for i in copied]}


@router.get("/stats")
async def period_stats(
    user_id: UUID, start: date, end: date, request: Request
) -> dict[str, object]:
    """Return statistics for the inclusive range."""
    container: AppContainer = request.app.state.container
    stats = container.stats_service.get_period_stats(user_id, start, end)
    return serialize_period_stats(stats)


@router.post("/weight", status_code=201)
async def add_weight(
    user_id: UUID, payload: WeightInput, request: Request
) -> dict[str, object]:
    """Record a weight entry."""
    container: AppContainer = request.app.state.container
    entry = container.weight_service.add_weight(
        user_id, payload.day, payload.weight_kg, payload.note, payload.photo_ref
    )
    return serialize_weight(entry)


@router.get("/weight")
async def weight_history(
    user_id: UUID,
    request: Request,
    limit: int | None = Query(default=None, ge=1, le=100),
) -> dict[str, object]:
    """Return weight entries, newest first."""
    container: AppContainer = request.app.state.container
    entries = container.weight_service.get_history(user_id, limit)
    return {"entries": [serialize_weight(entry) for entry in entries]}


@router.get("/weight/stats")
async def weight_stats(user_id: UUID, request: Request) -> dict[str, object]:
    """Return weight statistics."""
    container: AppContainer = request.app.state.container
    return serialize_weight_stats(container.weight_service.get_stats(user_id))


@router.delete("/weight/{day}", status_code=204)
async def delete_weight(user_id: UUID, day: date, request: Request) -> None:
    """Delete the weight entry of a day."""
    container: AppContainer = request.app.state.container
    if not container.weight_service.delete_weight(user_id, day):
        raise _not_found("Weight entry not found")
