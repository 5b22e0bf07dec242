"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - trial_tier must name a catalog tier (validated on load)
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from llm_boost.core.domain_types import PlanTier


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Crawl workflow
    crawl_timeout_minutes: int = Field(60, gt=0)

    # Billing
    trial_tier: PlanTier = PlanTier.PRO

    @field_validator("trial_tier", mode="before")
    @classmethod
    def normalize_trial_tier(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
