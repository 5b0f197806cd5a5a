"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_api_key
from .helpers import get_user_identity, is_valid_word, normalize_word
from .game_logger import game_logger, GameLogger

__all__ = ['require_api_key', 'get_user_identity', 'is_valid_word', 'normalize_word', 'game_logger', 'GameLogger']
