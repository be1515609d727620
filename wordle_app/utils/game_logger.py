"""
Game Logger Module for the Wordle Server

This module provides logging for user actions, server responses,
and game events as JSON structured entries.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path


class GameLogger:
    """
    Centralized logging system for the Wordle game server.

    Features:
    - User action tracking with IP identification
    - Server response logging
    - Game event logging
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: Optional[str] = None, level: str = 'INFO'):
        self.log_dir: Optional[Path] = None
        self.logger = logging.getLogger('wordle_game')
        self.configure(log_dir, level)

    def configure(self, log_dir: Optional[str] = None, level: str = 'INFO') -> None:
        """
        (Re)build the handlers of the game logger.

        Args:
            log_dir: Directory for the daily log file, or None for console only
            level: Minimum level written to the log file
        """
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
        self._setup_logger(level)

    def _setup_logger(self, level: str) -> logging.Logger:
        """Setup the main game logger with file and console handlers."""
        logger = self.logger
        logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

        # Prevent duplicate handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        log_file = self._log_file()
        if log_file is not None:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        return logger

    def _log_file(self) -> Optional[Path]:
        if self.log_dir is None:
            return None
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _get_user_identity(self, request) -> Dict[str, Optional[str]]:
        """Extract user identity information from request."""
        from .helpers import get_user_identity
        return get_user_identity(request)

    def _create_log_entry(self,
                         event_type: str,
                         action: str,
                         user_info: Dict[str, Optional[str]],
                         details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self, request, action: str, **kwargs):
        """
        Log user actions with request context.

        Args:
            request: Flask request object (or None for socket events)
            action: Type of action (e.g., 'key', 'new_game', 'get_state')
            **kwargs: Additional details to log
        """
        details = {
            'endpoint': getattr(request, 'endpoint', None),
            'method': getattr(request, 'method', None),
            **kwargs
        }

        log_message = self._create_log_entry('USER_ACTION', action, self._get_user_identity(request), details)
        self.logger.info(log_message)

    def log_server_response(self,
                           request,
                           action: str,
                           success: bool,
                           response_data: Dict[str, Any],
                           **kwargs):
        """
        Log server responses with request context.

        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            **kwargs: Additional details to log
        """
        details = {
            'success': success,
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, self._get_user_identity(request), details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.error(log_message)

    def log_game_event(self, event: str, **kwargs):
        """
        Log game-specific events (wins, losses, new games).

        Args:
            event: Type of game event (e.g., 'game_won', 'game_lost', 'game_started')
            **kwargs: Additional game details
        """
        user_info = {'user_ip': 'local', 'session_id': None}
        log_message = self._create_log_entry('GAME_EVENT', event, user_info, dict(kwargs))
        self.logger.info(log_message)

    def log_error(self, request, error: Exception, action: str):
        """
        Log errors with full context.

        Args:
            request: Flask request object
            error: Exception that occurred
            action: Action that was being performed
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry('ERROR', action, self._get_user_identity(request), details)
        self.logger.error(log_message)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Keep response logs small and free of the hidden answer."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()

        if 'view' in sanitized and isinstance(sanitized['view'], dict):
            view = sanitized['view']
            sanitized['view'] = {
                'phase': view.get('phase'),
                'guesses_count': view.get('guesses_count'),
                'notice': view.get('notice'),
                'answer_revealed': view.get('answer') is not None
            }

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events (useful for monitoring)."""
        log_file = self._log_file()
        if log_file is None:
            return {'error': 'File logging disabled'}
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        try:
            stats = {
                'log_file': str(log_file),
                'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
                'total_entries': 0,
                'user_actions': 0,
                'server_responses': 0,
                'game_events': 0,
                'errors': 0
            }

            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if line.strip():
                        stats['total_entries'] += 1
                        if 'USER_ACTION' in line:
                            stats['user_actions'] += 1
                        elif 'SERVER_RESPONSE' in line:
                            stats['server_responses'] += 1
                        elif 'GAME_EVENT' in line:
                            stats['game_events'] += 1
                        elif 'ERROR' in line:
                            stats['errors'] += 1

            return stats

        except OSError as e:
            return {'error': f'Failed to get stats: {str(e)}'}


# Global logger instance, file output is enabled by create_app
game_logger = GameLogger()
