"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    environment: str = _ENVIRONMENT
    default_calorie_goal: int = 2000
    default_weight_kg: float = 70.0
    min_daily_calories: int | None = None
    step_goal: int = 10000
    weight_history_limit: int = 90
    search_limit: int = 20
    max_range_days: int = 366

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
