"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables with validation,
type coercion, and sensible defaults. None of it is required by the
deal selector itself; it drives the poller, the CLI, and logging.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from steam_deals.stores import STORE_ICON_BASE_URL


class CheapSharkConfig(BaseSettings):
    """CheapShark deals API configuration."""

    model_config = SettingsConfigDict(env_prefix="CHEAPSHARK_")

    base_url: str = Field(
        default="https://www.cheapshark.com/api/1.0",
        description="Base URL for the CheapShark API",
    )
    icon_base_url: str = Field(
        default=STORE_ICON_BASE_URL,
        description="Base URL for store icons ({base}/{index}.png)",
    )
    page_size: int = Field(
        default=60,
        ge=1,
        le=60,
        description="Number of deals requested per poll",
    )
    timeout_seconds: int = Field(
        default=30,
        ge=5,
        le=120,
        description="HTTP request timeout in seconds",
    )


class SteamAPIConfig(BaseSettings):
    """Steam Web API configuration."""

    model_config = SettingsConfigDict(env_prefix="STEAM_")

    api_key: SecretStr | None = Field(
        default=None,
        description="Steam Web API key from https://steamcommunity.com/dev/apikey",
    )
    steam_id: str | None = Field(
        default=None,
        description="64-bit SteamID of the user whose library is checked",
    )
    base_url: str = Field(
        default="https://api.steampowered.com",
        description="Base URL for Steam Web API",
    )
    timeout_seconds: int = Field(
        default=30,
        ge=5,
        le=120,
        description="HTTP request timeout in seconds",
    )

    @field_validator("steam_id")
    @classmethod
    def validate_steam_id(cls, v: str | None) -> str | None:
        """Validate that the SteamID looks like a SteamID64."""
        if v is None:
            return v
        v = v.strip()
        if not (v.isdigit() and len(v) == 17):
            raise ValueError(f"Invalid SteamID64: {v}")
        return v

    @property
    def is_configured(self) -> bool:
        """Check if both the API key and SteamID are available."""
        return bool(self.api_key and self.api_key.get_secret_value() and self.steam_id)


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    format: Literal["json", "console"] = Field(
        default="json",
        description="Log output format",
    )
    include_timestamp: bool = Field(
        default=True,
        description="Include timestamp in log entries",
    )


class Settings(BaseSettings):
    """
    Main application settings.

    Aggregates all configuration sections and provides
    a single entry point for configuration access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment",
    )

    # Sub-configurations
    cheapshark: CheapSharkConfig = Field(default_factory=CheapSharkConfig)
    steam: SteamAPIConfig = Field(default_factory=SteamAPIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()
