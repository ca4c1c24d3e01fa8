"""
Shared settings base.

Every settings class reads the same `.env` file. The base also carries the
logging switches used by the command-line entrypoint.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """`.env`-backed settings with logging switches."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Log at DEBUG regardless of log_level",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    @property
    def effective_log_level(self) -> str:
        """Level passed to configure_logging(); debug wins over log_level."""
        return "DEBUG" if self.debug else self.log_level.upper()
