# selva/core/config.py
from functools import lru_cache
from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

FALLBACK_JWT_SECRET = "fallback-secret"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables (and `.env`).

    The JWT fallback secret is only accepted when APP_ENV=test.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_ENV: Literal["development", "production", "test"] = "development"
    LOG_LEVEL: str = "INFO"

    # Auth
    JWT_SECRET_KEY: str = FALLBACK_JWT_SECRET
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    # Storage
    STORAGE_BACKEND: Literal["memory", "mongo"] = "memory"
    MONGO_URL: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "selva"

    # Seeded admin account
    ADMIN_NAME: str = "Admin User"
    ADMIN_EMAIL: str = "admin@admin.com"
    ADMIN_PASSWORD: str = "admin123"
    SEED_ON_STARTUP: bool = True

    # CORS
    ALLOWED_ORIGINS: str = "http://localhost:5173,https://selva-nail-shop.vercel.app"

    # Blog "featured" derivation
    FEATURED_VIEWS_THRESHOLD: int = 1000
    FEATURED_LIMIT: int = 3

    @model_validator(mode="after")
    def reject_fallback_secret(self):
        if self.JWT_SECRET_KEY == FALLBACK_JWT_SECRET and self.APP_ENV != "test":
            raise ValueError("JWT_SECRET_KEY must be set outside of APP_ENV=test")
        return self

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"

    def get_allowed_origins_list(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [
            origin.strip()
            for origin in self.ALLOWED_ORIGINS.split(",")
            if origin.strip()
        ]


@lru_cache
def get_settings() -> Settings:
    return Settings()
