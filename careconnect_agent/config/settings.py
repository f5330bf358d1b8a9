"""
Application settings and configuration.
"""

from functools import lru_cache
from typing import Literal, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .database import DatabaseConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "CareConnect Agent"
    app_version: str = "1.0.0"
    debug: bool = False

    # Document store
    store_backend: Literal["firestore", "memory"] = "firestore"
    firestore_project: Optional[str] = None
    firestore_database: Optional[str] = None
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)

    # Conversation context
    context_backend: Literal["memory", "redis"] = "memory"
    redis_url: str = "redis://localhost:6379/0"
    context_ttl_seconds: float = 300.0

    # Result caps
    professional_search_limit: int = 50
    category_search_limit: int = 200
    job_search_limit: int = 10
    chat_job_limit: int = 5
    booking_candidate_limit: int = 10
    search_all_limit: int = 5

    # Presentation
    timezone: str = "Asia/Kolkata"
    currency_symbol: str = "₹"

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
