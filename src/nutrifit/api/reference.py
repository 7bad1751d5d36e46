"""Read-only catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request

from nutrifit.api.serializers import (
    serialize_activity_reference,
    serialize_food_reference,
)

if TYPE_CHECKING:
    from nutrifit.containers import AppContainer

router = APIRouter(tags=["reference"])


@router.get("/foods")
async def search_foods(
    request: Request,
    q: str = "",
    limit: int | None = Query(default=None, ge=1, le=100),
) -> dict[str, object]:
    """Search the food catalog by name."""
    container: AppContainer = request.app.state.container
    foods = container.food_catalog.search(
        q, limit=limit or container.settings.search_limit
    )
    return {"items": [serialize_food_reference(food) for food in foods]}


@router.get("/foods/categories")
async def food_categories(request: Request) -> dict[str, object]:
    """Return food categories in catalog order."""
    container: AppContainer = request.app.state.container
    return {"categories": container.food_catalog.categories}


@router.get("/activities")
async def search_activities(
    request: Request,
    q: str = "",
    category: str | None = None,
    limit: int | None = Query(default=None, ge=1, le=100),
) -> dict[str, object]:
    """Search the activity catalog, optionally within a category."""
    container: AppContainer = request.app.state.container
    activities = container.activity_catalog.search(
        q, category=category, limit=limit or container.settings.search_limit
    )
    return {"items": [serialize_activity_reference(entry) for entry in activities]}


@router.get("/activities/categories")
async def activity_categories(request: Request) -> dict[str, object]:
    """Return activity categories in catalog order."""
    container: AppContainer = request.app.state.container
    return {"categories": container.activity_catalog.categories}


@router.get("/activities/popular")
async def popular_activities(request: Request) -> dict[str, object]:
    """Return the quick-access activity list."""
    container: AppContainer = request.app.state.container
    return {
        "items": [
            serialize_activity_reference(entry)
            for entry in container.activity_catalog.popular()
        ]
    }
