"""
Utilities Package

Contains utility functions and helper modules.
"""

from .helpers import get_user_identity
from .game_logger import game_logger, GameLogger

__all__ = ['get_user_identity', 'game_logger', 'GameLogger']
