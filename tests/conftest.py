"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

from nutrifit.config import Settings
from nutrifit.containers import AppContainer, assemble_container
from nutrifit.domain.errors import DiaryConflictError
from nutrifit.domain.meals import FoodItem, PhysicalActivity, StepsRecord
from nutrifit.domain.profile import (
    ActivityLevel,
    DietStyle,
    Gender,
    Goal,
    UserProfile,
    WeightChangeRate,
)
from nutrifit.domain.weight import WeightEntry
from nutrifit.services.diary import DiaryRepository, DiaryService
from nutrifit.services.profiles import ProfileRepository, ProfileService
from nutrifit.services.reference import load_activity_catalog, load_food_catalog
from nutrifit.services.weight import WeightRepository, WeightService


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, UserProfile] = field(default_factory=dict)

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        return self.profiles.get(user_id)

    def save_profile(self, user_id: UUID, profile: UserProfile) -> None:
        self.profiles[user_id] = profile


@dataclass
class InMemoryDiaryRepository(DiaryRepository):
    """In-memory diary repository for tests."""

    items: dict[UUID, tuple[UUID, FoodItem]] = field(default_factory=dict)
    activities: dict[UUID, tuple[UUID, PhysicalActivity]] = field(
        default_factory=dict
    )
    steps: dict[tuple[UUID, date], int] = field(default_factory=dict)

    def add_food_item(self, user_id: UUID, item: FoodItem) -> None:
        if item.id in self.items:
            raise DiaryConflictError(f"Meal item {item.id} already exists")
        self.items[item.id] = (user_id, item)

    def get_food_item(self, user_id: UUID, item_id: UUID) -> FoodItem | None:
        owner, item = self.items.get(item_id, (None, None))
        return item if owner == user_id else None

    def update_food_item(self, user_id: UUID, item: FoodItem) -> None:
        if self.get_food_item(user_id, item.id) is None:
            raise DiaryConflictError(f"Meal item {item.id} was removed concurrently")
        self.items[item.id] = (user_id, item)

    def delete_food_item(self, user_id: UUID, item_id: UUID) -> None:
        if self.get_food_item(user_id, item_id) is not None:
            del self.items[item_id]

    def list_food_items(self, user_id: UUID, start: date, end: date) -> list[FoodItem]:
        return sorted(
            (
                item
                for owner, item in self.items.values()
                if owner == user_id and start <= item.day <= end
            ),
            key=lambda item: item.created_at,
        )

    def add_activity(self, user_id: UUID, activity: PhysicalActivity) -> None:
        self.activities[activity.id] = (user_id, activity)

    def get_activity(self, user_id: UUID, activity_id: UUID) -> PhysicalActivity | None:
        owner, activity = self.activities.get(activity_id, (None, None))
        return activity if owner == user_id else None

    def delete_activity(self, user_id: UUID, activity_id: UUID) -> None:
        if self.get_activity(user_id, activity_id) is not None:
            del self.activities[activity_id]

    def list_activities(
        self, user_id: UUID, start: date, end: date
    ) -> list[PhysicalActivity]:
        return sorted(
            (
                activity
                for owner, activity in self.activities.values()
                if owner == user_id and start <= activity.day <= end
            ),
            key=lambda activity: activity.created_at,
        )

    def list_steps(self, user_id: UUID, start: date, end: date) -> list[StepsRecord]:
        return [
            StepsRecord(day=day, steps=steps)
            for (owner, day), steps in self.steps.items()
            if owner == user_id and start <= day <= end
        ]

    def save_steps(self, user_id: UUID, record: StepsRecord) -> None:
        self.steps[(user_id, record.day)] = record.steps


@dataclass
class InMemoryWeightRepository(WeightRepository):
    """In-memory weight repository for tests."""

    entries: dict[tuple[UUID, date], WeightEntry] = field(default_factory=dict)

    def save_weight(self, user_id: UUID, entry: WeightEntry) -> None:
        self.entries[(user_id, entry.day)] = entry

    def list_weights(self, user_id: UUID) -> list[WeightEntry]:
        return [
            entry for (owner, _day), entry in self.entries.items() if owner == user_id
        ]

    def delete_weight(self, user_id: UUID, day: date) -> bool:
        return self.entries.pop((user_id, day), None) is not None


def make_profile(**overrides: object) -> UserProfile:
    """Return a valid profile with the given fields replaced."""
    now = datetime(2024, 1, 1, tzinfo=UTC)
    values: dict[str, object] = {
        "name": "Giulia",
        "age": 30,
        "gender": Gender.FEMALE,
        "height_cm": 165.0,
        "weight_kg": 60.0,
        "goal": Goal.MAINTAIN,
        "activity_level": ActivityLevel.SEDENTARY,
        "diet_style": DietStyle.OMNIVORE,
        "weight_change_rate": WeightChangeRate.RATE_05,
        "created_at": now,
        "updated_at": now,
    }
    values.update(overrides)
    return UserProfile(**values)  # type: ignore[arg-type]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
    )


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def diary_repository() -> InMemoryDiaryRepository:
    return InMemoryDiaryRepository()


@pytest.fixture
def weight_repository() -> InMemoryWeightRepository:
    return InMemoryWeightRepository()


@pytest.fixture
def profile_service(profile_repository: InMemoryProfileRepository) -> ProfileService:
    return ProfileService(repository=profile_repository)


@pytest.fixture
def diary_service(
    diary_repository: InMemoryDiaryRepository, profile_service: ProfileService
) -> DiaryService:
    return DiaryService(
        repository=diary_repository,
        profile_service=profile_service,
        food_catalog=load_food_catalog(),
        activity_catalog=load_activity_catalog(),
    )


@pytest.fixture
def weight_service(
    weight_repository: InMemoryWeightRepository, profile_service: ProfileService
) -> WeightService:
    return WeightService(repository=weight_repository, profile_service=profile_service)


@pytest.fixture
def container(
    settings: Settings,
    profile_repository: InMemoryProfileRepository,
    diary_repository: InMemoryDiaryRepository,
    weight_repository: InMemoryWeightRepository,
) -> AppContainer:
    return assemble_container(
        settings,
        profile_repository=profile_repository,
        diary_repository=diary_repository,
        weight_repository=weight_repository,
    )
