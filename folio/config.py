"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from pydantic_settings import BaseSettings

# ===========================================
# Product Branding
# ===========================================
PRODUCT_NAME = "Folio Hub"
PRODUCT_TAGLINE = "Every broker, one portfolio."
PRODUCT_VERSION = "1.0.0"
PRODUCT_DESCRIPTION = "Connect your broker accounts and track them as a single portfolio."

# Currency symbol used by the terminal dashboard
CURRENCY_SYMBOL = "₹"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Key-value store backing database
    database_url: str = "sqlite:///./folio_hub.db"

    # Logging
    log_level: str = "INFO"

    # Demo user (no authentication in this release)
    default_user_id: str = "demo-user-001"

    # Mock broker sync
    broker_sync_delay_seconds: float = 1.0

    # API rate limiting (slowapi syntax)
    sync_rate_limit: str = "30/minute"

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
