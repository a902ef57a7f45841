# article_analyzer/config.py
"""
Centralized configuration with validation.

Uses pydantic-settings to load and validate all environment variables at startup.
Fail fast with clear error messages if a value is malformed.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    ENVIRONMENT: str = Field(
        default="development",
        description="Environment: development, staging, production",
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level: DEBUG, INFO, WARNING, ERROR",
    )
    LOG_JSON: bool = Field(
        default=True,
        description="Emit single-line JSON logs. Disable for human-readable local output.",
    )

    # CORS
    CORS_ORIGINS: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins",
    )

    # Bias analysis
    MAX_TEXT_CHARS: int = Field(
        default=100_000,
        gt=0,
        description="Largest text accepted by the analyze endpoint, in characters",
    )
    DEFAULT_SUBJECTIVE_INTENSIFIERS: bool = Field(
        default=True,
        description="Run the intensifier detector when a request omits the flag",
    )
    DEFAULT_FACTIVE_VERBS: bool = Field(
        default=True,
        description="Run the factive verb detector when a request omits the flag",
    )

    # Report cache
    BIAS_CACHE_SIZE: int = Field(
        default=256,
        gt=0,
        description="Max cached analyze responses",
    )
    BIAS_CACHE_TTL_SECONDS: int = Field(
        default=900,
        gt=0,
        description="Seconds an analyze response stays cached",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and reject unknown level names."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{v}'")
        return level

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings. Call at startup to validate config."""
    return Settings()
