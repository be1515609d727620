"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import EventKind, GamePhase, GameState, KeyEvent, LetterStatus, SnapshotError, Transition

__all__ = ['EventKind', 'GamePhase', 'GameState', 'KeyEvent', 'LetterStatus', 'SnapshotError', 'Transition']
