"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from studybites.configs.llm import LLMSettings
from studybites.configs.settings import Settings, get_settings
from studybites.configs.storage import StorageSettings

__all__ = ["LLMSettings", "Settings", "StorageSettings", "get_settings"]
