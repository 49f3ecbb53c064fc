"""
Configuration module for the softphone client.
Centralizes all environment variables and configuration settings.
"""

from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Section(str, Enum):
    """Top-level application sections."""
    CHATS = "chats"
    DIALER = "dialer"
    CONTACTS = "contacts"
    SETTINGS = "settings"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # General
    log_level: str = Field(default="INFO")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Call session
    call_tick_interval_seconds: float = Field(default=1.0)
    default_caller_name: str = Field(default="Unknown")

    # Navigation
    default_section: Section = Field(default=Section.CHATS)

    # Privacy
    log_call_identifiers: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SOFTPHONE_",
        case_sensitive=False,
    )

    @field_validator("call_tick_interval_seconds")
    @classmethod
    def validate_tick_interval(cls, v):
        if v <= 0:
            raise ValueError("Call tick interval must be positive")
        return v


# Global settings instance
settings = Settings()
