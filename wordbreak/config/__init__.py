"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: application configuration (environment-based)
- game_settings.py: game rules, constants and the fallback word list
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LENGTH, MAX_GUESSES, DIFFICULTIES, DEFAULT_DIFFICULTY, FALLBACK_WORDS,
    validate_word_list_integrity, words_for_difficulty, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LENGTH', 'MAX_GUESSES', 'DIFFICULTIES', 'DEFAULT_DIFFICULTY', 'FALLBACK_WORDS',
    'validate_word_list_integrity', 'words_for_difficulty', 'get_word_statistics'
]
