"""
Configuration settings for the repository package.
"""

import os
from functools import lru_cache
from typing import Dict

from dotenv import load_dotenv
from pydantic import ConfigDict
from pydantic_settings import BaseSettings

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Package settings."""

    # Connections
    DB_CONNECTION: str = "default"
    DATABASE_URL: str = ""
    DATABASE_URL_DEV: str = ""
    # Extra named connections, e.g. DB_CONNECTIONS='{"analytics": "postgresql://..."}'
    DB_CONNECTIONS: Dict[str, str] = {}

    # Database Pool
    POOL_SIZE: int = int(os.getenv("POOL_SIZE", "5"))
    MAX_OVERFLOW: int = int(os.getenv("MAX_OVERFLOW", "10"))
    POOL_TIMEOUT: int = int(os.getenv("POOL_TIMEOUT", "30"))
    POOL_RECYCLE: int = int(os.getenv("POOL_RECYCLE", "1800"))

    # Logging
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Environment
    ENVIRONMENT: str = "development"
    TESTING: bool = False

    model_config = ConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
