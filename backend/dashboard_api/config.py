"""
Application configuration loaded from environment variables.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from .env and environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    MONGODB_URI: str | None = None
    MONGODB_CONNECT_TIMEOUT_MS: int = Field(default=10_000, gt=0)
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = Field(default=10_000, gt=0)
    BCRYPT_ROUNDS: int = Field(default=10, ge=4, le=31)
    REVENUE_YEAR: int = 2023
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8888


@lru_cache
def get_settings() -> Settings:
    """
    Return cached application settings. Uses LRU cache to avoid re-loading from env.
    """
    return Settings()
