"""
Configuration management.

All settings are read from environment variables (optionally loaded from a .env file) with defaults for local development.
"""

import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base configuration class with all settings."""

    # Storage: "sql" uses DATABASE_URL, "memory" keeps everything in process
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "sql")
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./uno.db")
    DATABASE_ECHO = os.getenv("DATABASE_ECHO", "False").lower() == "true"

    # Authentication
    JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_EXPIRATION_HOURS = int(os.getenv("JWT_EXPIRATION_HOURS", 24))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class DevelopmentConfig(Config):
    DATABASE_ECHO = True


class ProductionConfig(Config):
    pass


class TestingConfig(Config):
    STORAGE_BACKEND = "memory"
    DATABASE_URL = "sqlite:///:memory:"
    JWT_SECRET = "testing-secret"
    LOG_LEVEL = "DEBUG"


config: dict[str, type[Config]] = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}


def get_config() -> type[Config]:
    """Select the configuration class named by APP_ENV."""
    return config.get(os.getenv("APP_ENV", "default"), DevelopmentConfig)
