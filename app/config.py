# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.API_PORT)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Every value has a default, so the demo server starts without any setup.
# =============================================================================

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Repository root: template/, source/ and target/ live next to the packages
PROJECT_ROOT = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide defaults matching the original demo server (localhost:8080,
      five minute timeouts)

    All settings are accessed via the global `settings` instance or the
    `get_settings` dependency.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    # -------------------------------------------------------------------------
    # Server Settings
    # -------------------------------------------------------------------------

    API_HOST: str = Field(
        default="localhost",
        description="Host to bind the server to"
    )

    API_PORT: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port for the server"
    )

    PREFORK: bool = Field(
        default=False,
        description="Spawn several worker processes sharing the listening socket"
    )

    WORKERS: int | None = Field(
        default=None,
        ge=1,
        description="Worker process count when PREFORK is on (defaults to CPU count)"
    )

    IDLE_TIMEOUT_SECONDS: int = Field(
        default=300,
        ge=1,
        description="Seconds an idle keep-alive connection stays open"
    )

    # -------------------------------------------------------------------------
    # File Locations
    # -------------------------------------------------------------------------

    TEMPLATE_DIR: Path = Field(
        default=PROJECT_ROOT / "template",
        description="Directory holding the Jinja2 templates"
    )

    STATIC_DIR: Path = Field(
        default=PROJECT_ROOT / "source",
        description="Directory served under /public and used by /download"
    )

    UPLOAD_DIR: Path = Field(
        default=PROJECT_ROOT / "target",
        description="Directory uploaded files are saved into"
    )

    # -------------------------------------------------------------------------
    # File Upload Settings
    # -------------------------------------------------------------------------

    MAX_UPLOAD_SIZE_MB: int = Field(
        default=10,
        ge=1,
        le=500,
        description="Maximum file upload size in MB"
    )

    # -------------------------------------------------------------------------
    # HTTP Client Settings
    # -------------------------------------------------------------------------

    HTTP_CLIENT_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        gt=0,
        description="Timeout applied to outgoing HTTP requests"
    )

    HTTP_CLIENT_USER_AGENT: str = Field(
        default="web-tour/1.0",
        description="User-Agent header sent with outgoing HTTP requests"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat empty values as unset
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def worker_count(self) -> int:
        """
        Number of server processes to start.

        One unless PREFORK is on; then WORKERS, falling back to the CPU count.
        """
        if not self.PREFORK:
            return 1
        return self.WORKERS or os.cpu_count() or 1

    @property
    def max_upload_size_bytes(self) -> int:
        """
        Convert MB to bytes for file size validation.
        """
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    @property
    def download_file(self) -> Path:
        """The bundled sample file sent by GET /download."""
        return self.STATIC_DIR / "file.txt"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access. This is the recommended pattern for
    pydantic-settings.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
