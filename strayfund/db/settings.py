from decimal import Decimal
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Stray Fund"
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    database_url: str = "postgresql+asyncpg://postgres:postgres@db:5432/strayfund"
    seed_demo: bool = False
    log_level: str = "INFO"
    admin_token: str = ""
    currency: str = "IDR"
    min_donation_amount: Decimal = Decimal("10000")
    auto_complete_donations: bool = True
    recent_limit: int = 10
    report_timezone: str = "Asia/Jakarta"


@lru_cache
def get_settings() -> Settings:
    return Settings()
