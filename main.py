"""
Wordle Game Server - Main Entry Point

This is the main entry point for the Wordle game server.
It restores the saved game and starts the Flask-SocketIO application.
"""

from wordle_app import create_app
from wordle_app.config import Config, validate_word_list_integrity, get_word_statistics
from wordle_app.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")
        
        validate_word_list_integrity()
        stats = get_word_statistics()
        print(f"✓ Word data loaded: {stats['total_answers']} answers, {stats['dictionary_size']} accepted guesses")
        
        app, socketio = create_app(Config)
        print(f"✓ Flask application created successfully ({Config.SAVE_BACKEND} save slot)")
        
        game_logger.logger.info("Wordle Server Starting")
        
        print(f"\nStarting Wordle Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)
        
        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG, allow_unsafe_werkzeug=True)
        
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
