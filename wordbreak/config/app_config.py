"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes')


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = _env_flag('DEBUG', 'False')
    TESTING = False

    # Word Endpoint Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))
    WORD_API_KEY = os.getenv('WORD_API_KEY')

    # Word Provider (client) Settings
    WORD_ENDPOINT_URL = os.getenv('WORD_ENDPOINT_URL', 'http://127.0.0.1:5000/getRandomWord')
    WORD_REQUEST_TIMEOUT = float(os.getenv('WORD_REQUEST_TIMEOUT', 5))
    DEFAULT_DIFFICULTY = os.getenv('DEFAULT_DIFFICULTY', 'normal')
    USE_FALLBACK_ON_FAILURE = _env_flag('USE_FALLBACK_ON_FAILURE', 'True')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    WORD_API_KEY = None


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
