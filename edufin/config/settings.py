"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BillingSettings(BaseSettings):
    """Charge composition defaults."""

    model_config = SettingsConfigDict(env_prefix="BILLING_")

    currency: str = "BRL"
    money_places: int = 2
    default_due_days: int = 30
    charge_number_prefix: str = "COB"
    default_invoice_status: Literal["draft", "pending", "paid", "cancelled", "overdue"] = (
        "pending"
    )


class GatewaySettings(BaseSettings):
    """Finance backend (REST) configuration."""

    model_config = SettingsConfigDict(env_prefix="GATEWAY_")

    base_url: str = "http://localhost:5000"
    charges_path: str = "/api/finance/charges"
    subscriptions_path: str = "/api/finance/subscriptions"
    api_key: str | None = None
    timeout: float = 30.0

    # Retries are only safe when the backend deduplicates on Idempotency-Key
    idempotency_enabled: bool = False
    max_retries: int = 3
    retry_delay: float = 0.5


class DraftSettings(BaseSettings):
    """In-process draft retention."""

    model_config = SettingsConfigDict(env_prefix="DRAFTS_")

    # Submitted drafts stay readable this long, then are evicted
    submitted_retention_seconds: float = 900.0


class APISettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = ["*"]


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "EduFin Charge Composer"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    billing: BillingSettings = Field(default_factory=BillingSettings)
    gateway: GatewaySettings = Field(default_factory=GatewaySettings)
    drafts: DraftSettings = Field(default_factory=DraftSettings)
    api: APISettings = Field(default_factory=APISettings)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
