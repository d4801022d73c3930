"""
Application configuration using pydantic-settings.
All config is loaded from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Vista Alegre Day Use API"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Capacity
    DEFAULT_DAY_LIMIT: int = 50
    ADMISSION_STRATEGY: str = "capacity"  # capacity, selection

    # Admin auth (plaintext comparison, single account)
    ADMIN_USERNAME: str = "Admin"
    ADMIN_PASSWORD: str = "eva1997"
    SECRET_KEY: str = "super-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    # Chat relay
    ANTHROPIC_API_KEY: str | None = None
    CHAT_MODEL: str = "claude-haiku-4-5-20251001"
    CHAT_TEMPERATURE: float = 0.7
    CHAT_MAX_TOKENS: int = 800

    # Messaging deep link recipient
    WHATSAPP_NUMBER: str = "5516981394818"

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
    }


@lru_cache()
def get_settings() -> Settings:
    return Settings()
