"""
Services Package

Contains all business logic and service classes.
"""

from .game_logic import evaluate_guess, merge_key_statuses, pick_answer, new_game, apply_event
from .save_store import SaveStore, MemoryStore, JsonFileStore, build_store
from .game_service import GameService, get_game_service, initialize_game_service, register_game_service
from .board_view import build_board, build_keyboard, build_view

__all__ = [
    'evaluate_guess', 'merge_key_statuses', 'pick_answer', 'new_game', 'apply_event',
    'SaveStore', 'MemoryStore', 'JsonFileStore', 'build_store',
    'GameService', 'get_game_service', 'initialize_game_service', 'register_game_service',
    'build_board', 'build_keyboard', 'build_view'
]
