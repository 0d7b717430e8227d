"""
Configuration module for the Bookstore catalog service.

This module defines the Settings class, which loads environment variables
and provides application-wide configuration: database URL, environment,
logging level and the prefix under which the HTTP resources are mounted.

Usage:
    Import the `settings` object to access configuration throughout the project.
"""

import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        DATABASE_URL (str): Database connection string.
        ENVIRONMENT (str): Current environment (e.g., 'production', 'development').
        LOG_LEVEL (str): Root logging level name.
        SQL_ECHO (bool): Echo every SQL statement issued by the engine.
        API_PREFIX (str): Path prefix of every catalog resource.
    """
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./bookstore.db")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    SQL_ECHO: bool = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")
    API_PREFIX: str = os.getenv("API_PREFIX", "/api")

    @property
    def is_sqlite(self) -> bool:
        """
        Indicates whether the configured database is SQLite.

        Returns:
            bool: True when DATABASE_URL uses the sqlite dialect.
        """
        return self.DATABASE_URL.startswith("sqlite")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
