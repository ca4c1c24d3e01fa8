"""
Summarization model settings.

Environment variables keep the names used by the upload tooling:
LLM_MODEL, LLM_TEMPERATURE, LLM_MAX_TOKENS, LLM_API_KEY.

Dependencies: pydantic_settings
System role: Configuration for the chunk summarization service
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Chat model configuration for chunk summaries."""

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    model: str = Field(
        default="gemini-2.5-flash",
        description="Google Gemini chat model ID",
    )
    temperature: float = Field(
        default=0.3,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for summaries",
    )
    max_tokens: int = Field(
        default=1024,
        gt=0,
        description="Maximum output tokens per summary",
    )
    api_key: str | None = Field(
        default=None,
        description="Google API key (falls back to GOOGLE_API_KEY when unset)",
    )
