"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from studybites.configs.base import BaseSettings
from studybites.configs.llm import LLMSettings
from studybites.configs.storage import StorageSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    llm: LLMSettings = Field(default_factory=LLMSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are loaded once, on first call.

    Returns:
        Settings: Application settings instance

    Usage:
        from studybites.configs import get_settings
        settings = get_settings()
    """
    return Settings()
