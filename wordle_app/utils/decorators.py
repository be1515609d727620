"""
Service Decorators

Contains decorators shared by the HTTP and WebSocket surfaces.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit


def require_game_service(f):
    """
    Decorator for HTTP endpoints that need the game service.
    
    The service is passed to the view as the ``game_service`` keyword.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service
        
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500
        
        kwargs['game_service'] = game_service
        return f(*args, **kwargs)
    
    return decorated_function


def websocket_game_service_required(f):
    """Decorator for WebSocket handlers that need the game service."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service
        
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return
        
        kwargs['game_service'] = game_service
        return f(*args, **kwargs)
    
    return decorated_function
