from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Search defaults
    SEARCH_RESULT_LIMIT: int = Field(default=10, ge=0)
    SEARCH_MIN_RELEVANCE: float = Field(default=0.3, ge=0.0, le=1.0)
    SEARCH_INCLUDE_PULL_REQUESTS: bool = False
    SEARCH_INCLUDE_DISCUSSIONS: bool = False

    # Graph layout
    LAYOUT_WIDTH: float = 800
    LAYOUT_HEIGHT: float = 600
    LAYOUT_SEED: int | None = Field(default=None, description="Seed for layout jitter; unset means nondeterministic")

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = Field(default="json", description="'json' for production, 'console' for dev")


def get_settings() -> Settings:
    return Settings()
