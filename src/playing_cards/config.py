"""Configuration settings for the playing cards library."""

import os
from typing import Optional


def _optional_int(value: Optional[str]) -> Optional[int]:
    """Parse an integer environment value, treating unset or blank as None."""
    if value is None or not value.strip():
        return None
    return int(value)


class Config:
    """Base configuration class."""

    DEBUG = False
    TESTING = False

    # Shuffle settings; None seeds each deck from system entropy
    SHUFFLE_SEED = _optional_int(os.environ.get("PLAYING_CARDS_SHUFFLE_SEED"))

    # Logging settings
    LOG_LEVEL = os.environ.get("PLAYING_CARDS_LOG_LEVEL", "INFO").upper()

    # Display settings
    CARDS_PER_ROW = int(os.environ.get("PLAYING_CARDS_CARDS_PER_ROW", "13"))


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = os.environ.get("PLAYING_CARDS_LOG_LEVEL", "DEBUG").upper()


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True
    DEBUG = True

    # Reproducible shuffles in tests
    SHUFFLE_SEED = 0


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    TESTING = False
    LOG_LEVEL = os.environ.get("PLAYING_CARDS_LOG_LEVEL", "WARNING").upper()


# Configuration mapping
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(config_name: Optional[str] = None) -> type[Config]:
    """Get configuration class based on environment."""
    if config_name is None:
        config_name = os.environ.get("PLAYING_CARDS_ENV", "default")

    return config.get(config_name, config["default"])
