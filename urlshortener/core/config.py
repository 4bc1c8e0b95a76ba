"""Application configuration module.

This module contains settings for the URL shortener application,
loaded from environment variables with appropriate defaults.
"""

from __future__ import annotations

import string
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Directory holding the bundled front-end
PACKAGE_DIR = Path(__file__).resolve().parent.parent

# Digits first, then lowercase, then uppercase: 62 symbols
DEFAULT_CODE_ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase


class EnvironmentType(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class StoreBackend(str, Enum):
    SQL = "sql"
    MEMORY = "memory"


class Settings(BaseSettings):
    """Application settings loaded from environment variables with defaults.

    Settings are loaded from environment variables, with fallback to
    values in .env file if present, and finally to the default values
    specified here.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment setting
    ENVIRONMENT: EnvironmentType = EnvironmentType.DEVELOPMENT

    # App Information
    APP_NAME: str = "URL Shortener"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Maps long URLs to short codes and redirects them back"

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8080
    DEBUG: bool = False

    # Prefix for returned short URLs; the request's base URL is used when unset
    BASE_URL: Optional[str] = None
    API_PREFIX: str = "/api"

    # CORS settings
    CORS_ORIGINS: Union[List[str], str] = ["*"]

    # Storage
    STORE_BACKEND: StoreBackend = StoreBackend.SQL
    DATABASE_URL: str = "sqlite+aiosqlite:///./urls.db"
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 20
    DB_POOL_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 300

    # Short code generation
    URL_CODE_LENGTH: int = Field(default=6, ge=1)
    URL_CODE_ALPHABET: str = DEFAULT_CODE_ALPHABET
    URL_CODE_MAX_ATTEMPTS: int = Field(default=5, ge=1)

    # Logging configuration
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_FILENAME: str = "app.log"
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "7 days"
    LOG_FORMAT: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {name}:{line} | {message}"
    LOG_JSON: bool = True
    LOG_TO_FILE: bool = True
    REQUEST_LOGGING_ENABLED: bool = True

    # Front-end
    STATIC_DIR: Path = PACKAGE_DIR / "static"

    @field_validator("URL_CODE_ALPHABET")
    def validate_alphabet(cls, v: str) -> str:
        if len(v) < 2:
            raise ValueError("URL_CODE_ALPHABET needs at least two symbols")
        if len(set(v)) != len(v):
            raise ValueError("URL_CODE_ALPHABET contains duplicate symbols")
        return v

    @field_validator("BASE_URL")
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip().rstrip("/")

    @field_validator("CORS_ORIGINS")
    def validate_list_or_string(cls, v: Union[List[str], str]) -> List[str]:
        """Convert comma-separated string to list if needed."""
        if isinstance(v, str):
            if not v.strip():
                return []
            if v == "*":
                return ["*"]
            return [item.strip() for item in v.split(",")]
        return v


# Create a singleton instance of the settings
settings = Settings()
