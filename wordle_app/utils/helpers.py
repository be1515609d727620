"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional
from flask import has_request_context, request

from ..config.game_settings import ALPHABET
from ..models.game import KeyEvent


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    if request_obj is None and has_request_context():
        request_obj = request
        
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'
    
    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None)
    }


def parse_key(raw_key) -> Optional[KeyEvent]:
    """
    Map a key name from the browser to a state machine event.
    
    Accepts single letters in either case and the names used by
    ``KeyboardEvent.key`` and the on-screen keyboard ("Enter", "Backspace").
    
    Returns:
        KeyEvent, or None when the key has no meaning in the game
    """
    if not isinstance(raw_key, str):
        return None
    
    key = raw_key.strip()
    if len(key) == 1 and key.lower() in ALPHABET:
        return KeyEvent.letter_key(key.lower())
    if key.lower() == 'enter':
        return KeyEvent.submit()
    if key.lower() in ('backspace', 'delete'):
        return KeyEvent.backspace()
    return None
