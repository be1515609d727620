"""
WebSocket Event Handlers

Handles the real-time key event surface: every key is applied in arrival
order and the updated view is sent back to the sender.
"""

from flask import request
from flask_socketio import emit
from ..services.board_view import build_view
from ..utils.decorators import websocket_game_service_required
from ..utils.game_logger import game_logger


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    @websocket_game_service_required
    def handle_connect(auth=None, game_service=None):
        """Send the current game to a newly connected client."""
        emit('state', {'view': build_view(game_service.state)})

    @socketio.on('key')
    @websocket_game_service_required
    def handle_key(data=None, game_service=None):
        """Apply one key press sent by the browser."""
        key = data.get('key') if isinstance(data, dict) else None
        if not isinstance(key, str):
            emit('error', {'error': 'Key is required'})
            return

        game_logger.log_user_action(request, 'key', key=key, transport='websocket')
        transition = game_service.press_key(key)
        emit('state', {'view': build_view(transition.state, transition.notice)})

    @socketio.on('new_game')
    @websocket_game_service_required
    def handle_new_game(data=None, game_service=None):
        """Start a new game."""
        game_logger.log_user_action(request, 'new_game', transport='websocket')
        transition = game_service.new_game()
        emit('state', {'view': build_view(transition.state, transition.notice)})
