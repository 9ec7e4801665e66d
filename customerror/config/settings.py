"""
Centralized configuration for customerror

Type-safe settings loaded with Pydantic Settings. Every variable is read with
the ``CUSTOMERROR_`` prefix, e.g. ``CUSTOMERROR_ENVIRONMENT=testing``.
"""

import os
from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from customerror.utils.language_tag import is_valid_language_tag


class Environment(str, Enum):
    """Known environment names"""
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class CustomErrorSettings(BaseSettings):
    """Library configuration settings"""

    model_config = SettingsConfigDict(
        env_prefix="CUSTOMERROR_",
        env_file=".env" if not os.getenv("DOCKER_CONTAINER") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    environment: str = Field(
        default=Environment.PRODUCTION.value,
        description="Only 'testing' turns construction faults into catchable exceptions"
    )
    default_language: str = Field(
        default="en",
        description="Language used for shape templates when none is selected"
    )
    log_level: str = Field(
        default="INFO",
        description="Level for loggers in the customerror namespace"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v):
        # Surrounding whitespace only; "TESTING" is not "testing".
        return (v or "").strip()

    @field_validator("default_language")
    @classmethod
    def validate_default_language(cls, v):
        if not is_valid_language_tag(v):
            raise ValueError(f"invalid language tag: {v!r}")
        return v

    @property
    def is_testing(self) -> bool:
        """Check if construction faults must be recoverable"""
        return self.environment == Environment.TESTING.value

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION.value


settings = CustomErrorSettings()


def get_settings() -> CustomErrorSettings:
    """
    Get the global settings instance

    Returns:
        CustomErrorSettings: The global settings instance
    """
    return settings


def reload_settings() -> CustomErrorSettings:
    """
    Reload settings from environment (useful for testing)

    Returns:
        CustomErrorSettings: New settings instance with reloaded values
    """
    global settings
    settings = CustomErrorSettings()
    return settings
