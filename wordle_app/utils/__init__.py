"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .game_logger import game_logger
from .helpers import get_user_identity, parse_key
from .decorators import require_game_service, websocket_game_service_required

__all__ = [
    'game_logger', 'get_user_identity', 'parse_key',
    'require_game_service', 'websocket_game_service_required'
]
