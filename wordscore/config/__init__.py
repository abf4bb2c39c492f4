"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and word lists (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    ALPHABET,
    MAX_GUESSES,
    WORD_LENGTH,
    get_word_statistics,
    load_word_list,
    load_word_lookup,
    validate_word_list_integrity,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'ALPHABET', 'MAX_GUESSES', 'WORD_LENGTH', 'get_word_statistics',
    'load_word_list', 'load_word_lookup', 'validate_word_list_integrity'
]
