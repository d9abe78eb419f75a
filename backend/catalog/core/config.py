"""
Centralized application configuration

Values come from the process environment or a local .env file.

Author: TM3
Date: 2025-10-17
"""
import json
from functools import lru_cache
from typing import List, Optional
from urllib.parse import quote_plus

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    # Runtime
    APP_ENV: str = "development"

    # API Settings
    API_TITLE: str = "Catalog API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Product catalog REST API"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 3000

    # Database
    # DATABASE_URL wins; otherwise the URL is built from the DB_* parts
    DATABASE_URL: Optional[str] = None
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "catalog"
    DB_USER: str = "postgres"
    DB_PASS: str = ""
    DB_CONNECT_RETRIES: int = Field(3, ge=1)
    DB_RETRY_DELAY: float = 1.0
    DB_SYNC_SCHEMA: bool = True  # create missing tables on start-up

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:5173,https://yourdomain.com" or '["http://localhost:5173"]'
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:5173,http://localhost:3000"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "production"

    def get_database_url(self) -> str:
        """Return DATABASE_URL or build one from the DB_* settings"""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        credentials = quote_plus(self.DB_USER)
        if self.DB_PASS:
            credentials += f":{quote_plus(self.DB_PASS)}"

        return f"postgresql://{credentials}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["http://localhost:5173"]

        # Try JSON parse first (for array format)
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        # Fall back to comma-separated string
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Settings loaded once per process"""
    return Settings()
