"""Main application settings and configuration management.

This module composes all the application settings from the different modules
(app, database, auth) into a single, accessible `Settings` class.

It loads settings from environment variables and .env files, validates them,
and provides a single `settings` object for the running process. Tests build
their own `Settings` instances and hand them to the application factory.
"""

import logging

from pydantic_settings import SettingsConfigDict

from .app import AppSettings
from .auth import AuthSettings
from .database import DatabaseSettings

logger = logging.getLogger(__name__)
logging.getLogger("passlib").setLevel(logging.ERROR)


class Settings(AppSettings, DatabaseSettings, AuthSettings):
    """The main settings class that aggregates all application configurations.

    It inherits from all the specialized settings classes, providing a unified
    interface to all configuration parameters.

    Security Note:
        - Ensure sensitive fields (JWT_SECRET, DATABASE_URL) are never logged.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )


def create_settings() -> Settings:
    """Create settings instance from the environment and report its state.

    Returns:
        Settings: Configured settings instance
    """
    settings_instance = Settings()
    logger.info(f"Application running in {settings_instance.APP_ENV} environment")
    logger.info(f"Storage backend: {settings_instance.STORAGE_BACKEND}")
    settings_instance.warn_if_secret_missing()
    return settings_instance


# Singleton for the running process.
settings = create_settings()
