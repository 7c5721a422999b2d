"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Vocabulary and round rules (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LIST, WORDS_PER_ROUND, BLINK_DURATION_SECONDS, COMPLETION_MESSAGE,
    validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LIST', 'WORDS_PER_ROUND', 'BLINK_DURATION_SECONDS', 'COMPLETION_MESSAGE',
    'validate_word_list_integrity', 'get_word_statistics'
]
