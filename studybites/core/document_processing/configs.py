"""
Configuration settings for document processing pipeline.

Provides environment-based configuration for chunking and batch dispatch.

Dependencies: pydantic, pydantic_settings
System role: Centralized pipeline configuration
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocumentPipelineSettings(BaseSettings):
    """Settings for the material processing pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="DOC_PIPELINE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Chunking settings
    chunk_size: int = Field(
        default=4000,
        ge=1,
        description="Maximum chunk size in characters",
    )

    # Summarization dispatch settings
    batch_size: int = Field(
        default=3,
        ge=1,
        description="Chunks dispatched concurrently per batch",
    )
    batch_delay_ms: int = Field(
        default=1000,
        ge=0,
        description="Pause between consecutive batches (rate limiting)",
    )


@lru_cache
def get_pipeline_settings() -> DocumentPipelineSettings:
    """
    Get cached pipeline settings instance.

    Returns:
        DocumentPipelineSettings: Singleton settings loaded from environment
    """
    return DocumentPipelineSettings()
