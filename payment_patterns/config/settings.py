"""Application settings using Pydantic for environment-based configuration."""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from PAYMENT_PATTERNS_* environment variables."""

    # Gateway selection
    default_gateway: str = Field(
        default="pagseguro", description="Gateway factory used when none is named"
    )

    # Application Configuration
    app_name: str = Field(default="payment-patterns", description="Application name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Render logs as JSON instead of console")

    model_config = SettingsConfigDict(
        env_prefix="PAYMENT_PATTERNS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("default_gateway")
    @classmethod
    def normalize_gateway(cls, v: str) -> str:
        """Gateway names are matched case-insensitively."""
        v = v.strip().lower()
        if not v:
            raise ValueError("default_gateway cannot be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v.upper()


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
