"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env (optional, next to this module)
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _env_flag(name: str, default: str = 'False') -> bool:
    return os.getenv(name, default).lower() == 'true'


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = _env_flag('DEBUG')
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Game Settings
    WORD_LENGTH = int(os.getenv('WORD_LENGTH', 4))
    MAX_GUESSES = int(os.getenv('MAX_GUESSES', 10))
    UNIQUE_LETTERS = _env_flag('UNIQUE_LETTERS')
    STRICT_KNOWLEDGE = _env_flag('STRICT_KNOWLEDGE')
    SECRET_WORDS_FILE = os.getenv('SECRET_WORDS_FILE')
    ALL_WORDS_FILE = os.getenv('ALL_WORDS_FILE')

    # Error Banner Settings
    ERROR_MESSAGE_DURATION = float(os.getenv('ERROR_MESSAGE_DURATION', 2.0))
    INVALID_WORD_MESSAGE = os.getenv('INVALID_WORD_MESSAGE', 'Not in word list')
    ALREADY_GUESSED_MESSAGE = os.getenv('ALREADY_GUESSED_MESSAGE', 'Already guessed')
    INCOMPLETE_WORD_MESSAGE = os.getenv('INCOMPLETE_WORD_MESSAGE', 'Not enough letters')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    STRICT_KNOWLEDGE = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    STRICT_KNOWLEDGE = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    STRICT_KNOWLEDGE = True
    ERROR_MESSAGE_DURATION = 0.05


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
