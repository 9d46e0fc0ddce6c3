"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "finrisk-gateway"
    log_level: str = "INFO"

    # Analysis
    analysis_window_days: int = 30
    default_liquid_cash: float = 12500.0
    currency_symbol: str = "₹"

    # Seed data for the in-memory store
    seed_on_startup: bool = True
    seed_days: int = 90
    seed_random_seed: int = 42  # Fixed seed keeps reseeded ledgers reproducible


settings = Settings()
