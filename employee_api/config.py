"""
Configuration module for the employee API façade.

This module provides centralized configuration management using Pydantic settings.
All configuration values can be overridden via environment variables or .env file.
"""

from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__


class Settings(BaseSettings):
    """
    Application settings for the employee façade.

    Attributes:
        UPSTREAM_BASE_URL: Base URL of the upstream mock employee API
        REQUEST_TIMEOUT: Timeout for upstream HTTP requests in seconds
        APP_NAME: Display name for the application
        SERVICE_NAME: Identity used in logs and health responses
        VERSION: Service version reported by health endpoints
        DEBUG: Enable debug mode (exposes API docs)
        HOST: Server bind address
        PORT: Server port number
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_JSON: Render logs as JSON instead of console output
        CORS_ORIGINS: Comma-separated list of allowed origins
    """

    # Upstream
    UPSTREAM_BASE_URL: str = Field(
        default="http://localhost:8112/api/v1",
        description="Base URL of the upstream employee API",
    )
    REQUEST_TIMEOUT: float = Field(
        default=10.0,
        gt=0,
        le=60.0,
        description="Timeout for upstream HTTP requests in seconds",
    )

    # Application configuration
    APP_NAME: str = Field(default="Employee API", description="Display name")
    SERVICE_NAME: str = Field(default="employee-api", description="Service identity")
    VERSION: str = Field(default=__version__, description="Service version")
    DEBUG: bool = Field(default=False, description="Enable debug mode")

    # Server configuration
    HOST: str = Field(default="0.0.0.0", description="Server bind address")
    PORT: int = Field(default=8111, ge=1, le=65535, description="Server port")

    # Logging configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    LOG_JSON: bool = Field(default=True, description="Emit JSON structured logs")

    CORS_ORIGINS: str = Field(default="*", description="Allowed CORS origins")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("UPSTREAM_BASE_URL")
    @classmethod
    def validate_url(cls, value: str) -> str:
        """
        Validate that the upstream URL is properly formatted.

        Args:
            value: The URL to validate

        Returns:
            The validated URL without trailing slash

        Raises:
            ValueError: If URL is invalid
        """
        if not value:
            raise ValueError("Upstream URL cannot be empty")

        value = value.rstrip("/")

        if not (value.startswith("http://") or value.startswith("https://")):
            raise ValueError(
                f"Upstream URL must start with http:// or https://, got: {value}"
            )

        return value

    @property
    def cors_origins(self) -> List[str]:
        """CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
