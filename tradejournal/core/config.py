"""
Application Configuration

All settings loaded from environment variables.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "TradeJournal Calculator"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "info"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS (Frontend URL)
    frontend_url: str = "http://localhost:1420"
    allowed_origins: list[str] = ["http://localhost:1420"]

    # Allocation checks
    allocation_tolerance: float = 0.1  # percentage points, 0-100 scale
    take_profit_tolerance: float = 0.001  # 0-1 scale

    # Trade Limits (Defaults)
    default_min_risk_reward: float = 2.0
    leverage_ceiling: int = 125
    default_currency: str = "USD"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
