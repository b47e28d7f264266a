"""
Application Configuration

Centralizes all Flask and application configuration settings.
"""

import os

from constants import (
    DEFAULT_BATCH_MULTIPLIER,
    DEFAULT_INGREDIENT_UNIT,
    DEFAULT_SERVINGS,
    ID_LENGTH,
)

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///recipes.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Request size limit for posted recipe records
    MAX_CONTENT_LENGTH = 1 * 1024 * 1024  # 1MB

    # Recipe defaults
    DEFAULT_SERVINGS = DEFAULT_SERVINGS
    DEFAULT_BATCH_MULTIPLIER = DEFAULT_BATCH_MULTIPLIER
    DEFAULT_INGREDIENT_UNIT = os.environ.get('DEFAULT_INGREDIENT_UNIT', DEFAULT_INGREDIENT_UNIT)
    SHARE_ID_LENGTH = int(os.environ.get('SHARE_ID_LENGTH', ID_LENGTH))

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    DEFAULT_INGREDIENT_UNIT = 'unit'
    LOG_LEVEL = 'DEBUG'


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
