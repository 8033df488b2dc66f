"""Application configuration via pydantic-settings.

Values are loaded from environment variables (.env file).
Settings are organized into logical groups and composed into a single Settings object.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):
    """Where the plan catalog is loaded from."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    catalog_path: Path | None = Field(
        default=None,
        description="JSON plan catalog; None uses the bundled provider_plans.json",
    )


class CostSettings(BaseSettings):
    """Assumptions behind the annual cost estimate."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    visit_cost: int = Field(default=175, description="Cost of one primary care visit in USD")


class ApiSettings(BaseSettings):
    """HTTP adapter bind address."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)


class Settings(BaseSettings):
    """Root settings composing all sub-settings.

    Usage:
        settings = Settings()
        settings.catalog.catalog_path
        settings.costs.visit_cost
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Environment
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Composed settings (loaded from same .env)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    costs: CostSettings = Field(default_factory=CostSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper


# Module-level singleton — import this wherever settings are needed.
settings = Settings()
