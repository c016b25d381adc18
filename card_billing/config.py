"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "card-billing-engine"
    log_level: str = "INFO"

    # Billing
    due_soon_days: int = 5  # Pending payments due within this many days are flagged
    max_installments: int = 48
    currency: str = "BRL"


settings = Settings()
