"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Mango Admi API"
    VERSION: str = "0.1.0"
    COMPANY_NAME: str = "Mango Admi"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Database
    DATABASE_URL: str
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:8080",
        "http://localhost:8081",
        "https://mango-admi.vercel.app",
    ]
    FRONTEND_URL: str = ""

    # Email
    ADMIN_EMAIL: str = ""
    OWNER_EMAIL: str = ""
    FROM_EMAIL: str = "noreply@mangoadmi.in"
    EMAIL_API_URL: str = ""
    EMAIL_API_KEY: str = ""
    EMAIL_HTTP_TIMEOUT: float = 10.0

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @field_validator("DATABASE_URL")
    @classmethod
    def normalize_database_url(cls, value: str) -> str:
        # Hosted Postgres providers hand out postgres:// URLs, SQLAlchemy only knows postgresql://
        if value.startswith("postgres://"):
            return "postgresql://" + value[len("postgres://"):]
        return value

    @property
    def allowed_origins(self) -> List[str]:
        """CORS origins, including the deployed frontend when configured."""
        return [origin for origin in [*self.CORS_ORIGINS, self.FRONTEND_URL] if origin]

    @property
    def admin_address(self) -> str:
        return self.ADMIN_EMAIL or self.OWNER_EMAIL or "admin@mangoadmi.in"


@lru_cache
def get_settings() -> Settings:
    """Read settings once per process."""
    return Settings()
