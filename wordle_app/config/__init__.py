"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and the bundled word data
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LENGTH, MAX_GUESSES, ALPHABET, KEYBOARD_ROWS, TOAST_DURATION_MS, SAVE_KEY,
    DICTIONARY, ANSWERS, load_word_data, validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LENGTH', 'MAX_GUESSES', 'ALPHABET', 'KEYBOARD_ROWS', 'TOAST_DURATION_MS', 'SAVE_KEY',
    'DICTIONARY', 'ANSWERS', 'load_word_data', 'validate_word_list_integrity', 'get_word_statistics'
]
