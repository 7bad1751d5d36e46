"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutrifit.adapters.supabase_diary_repository import SupabaseDiaryRepository
from nutrifit.adapters.supabase_profile_repository import SupabaseProfileRepository
from nutrifit.adapters.supabase_weight_repository import SupabaseWeightRepository
from nutrifit.config import Settings
from nutrifit.services.diary import DiaryRepository, DiaryService
from nutrifit.services.profiles import ProfileRepository, ProfileService
from nutrifit.services.reference import (
    ActivityCatalog,
    FoodCatalog,
    load_activity_catalog,
    load_food_catalog,
)
from nutrifit.services.stats import StatsService
from nutrifit.services.weight import WeightRepository, WeightService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_catalog: FoodCatalog
    activity_catalog: ActivityCatalog
    profile_service: ProfileService
    diary_service: DiaryService
    weight_service: WeightService
    stats_service: StatsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    return assemble_container(
        resolved_settings,
        profile_repository=SupabaseProfileRepository(supabase_client),
        diary_repository=SupabaseDiaryRepository(supabase_client),
        weight_repository=SupabaseWeightRepository(supabase_client),
    )


def assemble_container(
    settings: Settings,
    *,
    profile_repository: ProfileRepository,
    diary_repository: DiaryRepository,
    weight_repository: WeightRepository,
) -> AppContainer:
    """Wire services on top of the given repositories."""
    food_catalog = load_food_catalog()
    activity_catalog = load_activity_catalog()
    profile_service = ProfileService(
        repository=profile_repository,
        default_calorie_goal=settings.default_calorie_goal,
        min_daily_calories=settings.min_daily_calories,
    )
    diary_service = DiaryService(
        repository=diary_repository,
        profile_service=profile_service,
        food_catalog=food_catalog,
        activity_catalog=activity_catalog,
        default_weight_kg=settings.default_weight_kg,
        max_range_days=settings.max_range_days,
    )
    weight_service = WeightService(
        repository=weight_repository,
        profile_service=profile_service,
        history_limit=settings.weight_history_limit,
    )
    return AppContainer(
        settings=settings,
        food_catalog=food_catalog,
        activity_catalog=activity_catalog,
        profile_service=profile_service,
        diary_service=diary_service,
        weight_service=weight_service,
        stats_service=StatsService(
            diary_service=diary_service, weight_service=weight_service
        ),
    )
