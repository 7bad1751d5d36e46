"""Tests for container wiring."""

import pytest

from nutrifit import containers
from nutrifit.adapters.supabase_diary_repository import SupabaseDiaryRepository
from nutrifit.config import Settings
from nutrifit.containers import build_container


def test_build_container_creates_services(
    settings: Settings, monkeypatch: pytest.MonkeyPatch
) -> None:
    created: list[tuple[str, str]] = []

    def fake_create_client(url: str, key: str) -> object:
        created.append((url, key))
        return object()

    monkeypatch.setattr(containers, "create_client", fake_create_client)

    container = build_container(settings)

    assert created == [("https://example.supabase.co", "service-key")]
    assert isinstance(container.diary_service.repository, SupabaseDiaryRepository)
    assert container.profile_service.default_calorie_goal == 2000
    assert container.weight_service.history_limit == 90
    assert container.diary_service.max_range_days == 366
    assert container.stats_service.diary_service is container.diary_service


def test_settings_feed_service_defaults(container) -> None:
    assert container.diary_service.default_weight_kg == 70.0
    assert container.food_catalog.entries
    assert container.activity_catalog.entries
