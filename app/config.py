# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.PORT)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Nothing here is required at startup: a missing JWT secret or mail
    credential only makes the matching demo step fail, it never stops
    the server from binding its port.
    """

    # -------------------------------------------------------------------------
    # HTTP Server
    # -------------------------------------------------------------------------

    HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the HTTP server to"
    )

    PORT: int = Field(
        default=3000,
        ge=0,
        le=65535,
        description="Port for the HTTP server"
    )

    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated, '*' for any)"
    )

    # -------------------------------------------------------------------------
    # MongoDB
    # -------------------------------------------------------------------------

    MONGO_URI: str = Field(
        default="mongodb://localhost:27017/starter",
        description="MongoDB connection string"
    )

    MONGO_TIMEOUT_MS: int = Field(
        default=30000,
        ge=1,
        description="Server selection timeout for the startup ping"
    )

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    JWT_SECRET: str = Field(
        default="",
        description="Secret key for signing tokens"
    )

    JWT_ALGORITHM: str = Field(
        default="HS256",
        description="Signing algorithm for issued tokens"
    )

    JWT_EXPIRES_SECONDS: int = Field(
        default=3600,
        ge=1,
        description="Lifetime of issued tokens"
    )

    BCRYPT_ROUNDS: int = Field(
        default=10,
        ge=4,
        le=31,
        description="bcrypt cost factor used for password hashing"
    )

    # -------------------------------------------------------------------------
    # Mail relay
    # -------------------------------------------------------------------------

    EMAIL_USER: str = Field(
        default="",
        description="Mail relay username, also used as the From address"
    )

    EMAIL_PASS: str = Field(
        default="",
        description="Mail relay password"
    )

    SMTP_HOST: str = Field(
        default="smtp.gmail.com",
        description="Mail relay host"
    )

    SMTP_PORT: int = Field(
        default=587,
        ge=1,
        le=65535,
        description="Mail relay port"
    )

    SMTP_USE_TLS: bool = Field(
        default=True,
        description="Upgrade the relay connection with STARTTLS"
    )

    # -------------------------------------------------------------------------
    # Startup demo
    # -------------------------------------------------------------------------

    RUN_DEMO: bool = Field(
        default=True,
        description="Run the startup demonstration once the port is bound"
    )

    DEMO_FETCH_URL: str = Field(
        default="https://jsonplaceholder.typicode.com/todos/1",
        description="URL fetched by the startup demo"
    )

    DEMO_RECIPIENT: str = Field(
        default="example@example.com",
        description="Recipient of the startup demo email"
    )

    # -------------------------------------------------------------------------
    # Logging / Application
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level (DEBUG overrides to DEBUG)"
    )

    LOG_FILE: str = Field(
        default="logfile.log",
        description="Append-only log file (empty to disable)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def log_level(self) -> str:
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL.upper()

    @property
    def mail_enabled(self) -> bool:
        """Check if relay credentials are configured."""
        return bool(self.EMAIL_USER and self.EMAIL_PASS)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
