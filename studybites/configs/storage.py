"""
Result storage settings.

Dependencies: pydantic_settings
System role: Configuration for persisted chunk summaries
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Local JSON storage for summarization results."""

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    output_directory: str = Field(
        default="./data/llm-responses",
        description="Root directory; one subdirectory per material",
    )
