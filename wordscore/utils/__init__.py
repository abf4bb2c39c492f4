"""
Utilities Package

Contains utility functions, the error banner and the game logger.
"""

from .error_banner import ErrorBanner
from .helpers import get_user_identity, json_body
from .game_logger import game_logger

__all__ = ['ErrorBanner', 'get_user_identity', 'json_body', 'game_logger']
