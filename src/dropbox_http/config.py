"""
Client configuration and environment variables.

This module unifies configuration using pydantic-settings.
Variables can come from:
1. .env file
2. System environment variables (have priority)
3. Default values

Naming convention:
- In Python code: snake_case (dropbox_client_id)
- In .env or ENV vars: UPPER_CASE (DROPBOX_CLIENT_ID)
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Unified client configuration.

    Example:
        # In .env or as environment variable:
        DROPBOX_CLIENT_ID=abc123
        DROPBOX_REDIRECT_URI=http://localhost:8000/
        LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ============================================================================
    # PROJECT SETTINGS
    # ============================================================================
    project_name: str = Field(default="dropbox-http", description="Project name")
    project_version: str = Field(default="1.0.0", description="Project version")

    # ============================================================================
    # LOGGING SETTINGS
    # ============================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: str = Field(
        default="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | trace_id={extra[trace_id]} | {name}:{function}:{line} - {message}",  # noqa: E501
        description="Log format",
    )
    logger_enqueue: bool = Field(
        default=False, description="Enqueue logs using multiprocessing"
    )

    # ============================================================================
    # HTTP SETTINGS
    # ============================================================================
    http_timeout: float = Field(
        default=30.0, description="Timeout in seconds for Dropbox API calls"
    )

    # ============================================================================
    # DROPBOX OAUTH SETTINGS
    # ============================================================================
    dropbox_client_id: str = Field(default="", description="Dropbox app key")
    dropbox_redirect_uri: str = Field(
        default="http://localhost:8000/",
        description="Redirect URI registered for the implicit grant",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get client settings (LRU cached).

    This function is cached, so the .env file is only read once.
    To refresh the configuration, clear the cache:
        get_settings.cache_clear()

    Returns:
        Settings: Client configuration instance.
    """
    return Settings()


settings = get_settings()
