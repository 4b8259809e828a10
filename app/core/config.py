"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables (and .env)
- Centralizes config values (MongoDB URL, port, logging)
- Validates configuration on startup
- Environment-specific settings
"""

import logging

from pydantic import Field, validator
from pydantic_settings import BaseSettings
from typing import Literal


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # MongoDB
    MONGODB_URL: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URI"
    )
    MONGODB_DB_NAME: str = Field(
        default="users",
        description="MongoDB database name"
    )
    MONGODB_COLLECTION: str = Field(
        default="users",
        description="Collection holding user documents"
    )
    MONGODB_CONNECT_RETRIES: int = Field(
        default=3,
        description="Connection attempts made during startup"
    )

    # HTTP server
    HOST: str = Field(
        default="0.0.0.0",
        description="Address the HTTP listener binds to"
    )
    PORT: int = Field(
        default=3000,
        description="Port the HTTP listener binds to"
    )

    # Application
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    CORS_ORIGINS: list = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    @validator("PORT")
    def validate_port(cls, v):
        """Port must be a usable TCP port."""
        if not 1 <= v <= 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @validator("LOG_LEVEL")
    def validate_log_level(cls, v):
        """Normalize and check the log level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    class Config:
        env_file = ".env"
        case_sensitive = True
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()


def validate_settings(app_settings: Settings = None):
    """
    Validates critical settings on application startup.
    Raises ValueError if any required setting is missing or invalid.
    """
    app_settings = app_settings or settings
    errors = []

    if not app_settings.MONGODB_URL:
        errors.append("MONGODB_URL is required")
    elif not app_settings.MONGODB_URL.startswith(("mongodb://", "mongodb+srv://")):
        errors.append("MONGODB_URL must use the mongodb:// or mongodb+srv:// scheme")

    if not app_settings.MONGODB_DB_NAME:
        errors.append("MONGODB_DB_NAME is required")

    if not app_settings.MONGODB_COLLECTION:
        errors.append("MONGODB_COLLECTION is required")

    if app_settings.MONGODB_CONNECT_RETRIES < 1:
        errors.append("MONGODB_CONNECT_RETRIES must be at least 1")

    if app_settings.is_production and app_settings.DEBUG:
        errors.append("DEBUG must be disabled in production")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
