from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ==============================
    # Application
    # ==============================
    APP_NAME: str = "Stockwatch Inventory Service"
    ENVIRONMENT: str = "local"

    # ==============================
    # Database
    # ==============================
    DATABASE_URL: str = "sqlite:///./stockwatch.db"

    # ==============================
    # Logging
    # ==============================
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # ==============================
    # Catalog policy
    # ==============================
    # "company": SKUs are unique per tenant; "global": unique across tenants.
    SKU_SCOPE: Literal["company", "global"] = "company"
    ALLOW_NEGATIVE_INVENTORY: bool = True
    DEFAULT_LOW_STOCK_THRESHOLD: int = 10

    # ==============================
    # Low-stock alerts
    # ==============================
    LOW_STOCK_WINDOW_DAYS: int = 30


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()


__all__ = ["Settings", "get_settings"]
