"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify, render_template
from ..services.board_view import build_view
from ..services.game_service import get_game_service
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


@game_bp.route('/', methods=['GET'])
@require_game_service
def index(game_service):
    """Render the game page."""
    game_logger.log_user_action(request, 'open_page')
    return render_template('index.html', view=build_view(game_service.state))


@game_bp.route('/api/state', methods=['GET'])
@require_game_service
def get_state(game_service):
    """Get current game view."""
    try:
        game_logger.log_user_action(request, 'get_state')

        response_data = {
            'success': True,
            'view': build_view(game_service.state)
        }

        game_logger.log_server_response(request, 'get_state', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/api/key', methods=['POST'])
@require_game_service
def press_key(game_service):
    """Apply a key press (letter, Enter or Backspace)."""
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('key'), str):
            error_response = {
                'success': False,
                'error': 'Key is required'
            }
            game_logger.log_server_response(request, 'key', False, error_response)
            return jsonify(error_response), 400

        key = data['key']
        game_logger.log_user_action(request, 'key', key=key)

        transition = game_service.press_key(key)
        response_data = {
            'success': True,
            'view': build_view(transition.state, transition.notice)
        }

        game_logger.log_server_response(request, 'key', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'key')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'key', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/api/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Discard the current game and start a new one."""
    try:
        game_logger.log_user_action(request, 'new_game')

        transition = game_service.new_game()
        response_data = {
            'success': True,
            'view': build_view(transition.state, transition.notice)
        }

        game_logger.log_server_response(request, 'new_game', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/api/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_service = get_game_service()

    response_data = {
        'status': 'healthy' if game_service else 'degraded',
        'game_available': game_service is not None,
        'phase': game_service.state.phase.value if game_service else None,
        'log_stats': game_logger.get_log_stats()
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)
    return jsonify(response_data)
