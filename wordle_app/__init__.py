"""
Wordle Game Application Package

A single-player Wordle served by Flask: the state machine and persistence
live in services, the HTTP and WebSocket surfaces in controllers and websocket.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config, game_service=None):
    """
    Application factory pattern for creating Flask app instances.
    
    Args:
        config_class: Configuration class to use
        game_service: Existing GameService to serve; one is created from the
            configuration when omitted
        
    Returns:
        Tuple of (Flask application, SocketIO instance)
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    
    from .utils.game_logger import game_logger
    game_logger.configure(app.config.get('LOG_DIR'), app.config.get('LOG_LEVEL', 'INFO'))
    
    # Initialize the single game session
    from .services.game_service import initialize_game_service, register_game_service
    from .services.save_store import build_store
    if game_service is None:
        initialize_game_service(build_store(app.config))
    else:
        register_game_service(game_service)
    
    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)
    
    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp)
    
    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)
    
    # Store socketio instance for use in other modules
    app.socketio = socketio
    
    return app, socketio
