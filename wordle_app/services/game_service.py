"""
Game Service

Owns the single game session: restores it from the save slot, feeds input
events through the state machine in arrival order and persists the result.
"""

import random
import threading
from typing import Collection, Optional, Sequence

from ..config.game_settings import DICTIONARY, ANSWERS
from ..models.game import EventKind, GameState, KeyEvent, SnapshotError, Transition
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_key
from . import game_logic
from .save_store import SaveStore, MemoryStore


class GameService:
    """
    Application controller for the single-player game.

    This class handles:
    - Restoring the saved game, or starting a fresh one
    - Serializing input events so each runs to completion before the next
    - Persisting the game after every change that belongs in the save slot
    - Logging game events (new game, win, loss)
    """

    def __init__(self,
                 store: Optional[SaveStore] = None,
                 dictionary: Collection[str] = DICTIONARY,
                 answers: Sequence[str] = ANSWERS,
                 rng: Optional[random.Random] = None):
        self.store = store if store is not None else MemoryStore()
        self.dictionary = dictionary
        self.answers = answers
        self.rng = rng
        self._lock = threading.RLock()
        self._state = self._restore()

    @property
    def state(self) -> GameState:
        return self._state

    def _restore(self) -> GameState:
        """Load the saved game, falling back to a fresh one."""
        try:
            snapshot = self.store.load()
        except Exception as e:
            game_logger.logger.warning(f"Load failed, starting a new game: {e}")
            snapshot = None

        if snapshot is not None:
            try:
                state = GameState.from_snapshot(snapshot, self.dictionary)
                game_logger.log_game_event(
                    'game_restored',
                    guesses_count=len(state.guesses),
                    phase=state.phase.value
                )
                return state
            except SnapshotError as e:
                game_logger.logger.warning(f"Discarding saved game: {e}")

        state = game_logic.new_game(self.answers, self.rng)
        game_logger.log_game_event('game_started', reason='no_saved_game')
        self._save(state)
        return state

    def _save(self, state: GameState) -> None:
        try:
            self.store.save(state.to_snapshot())
        except Exception as e:
            # A broken store must never end the game; keep playing in memory
            game_logger.logger.warning(f"Save failed, continuing in memory: {e}")

    def handle(self, event: KeyEvent) -> Transition:
        """
        Apply one input event to the session.

        Args:
            event: Input to apply

        Returns:
            Transition with the new state and an optional transient notice
        """
        with self._lock:
            previous = self._state
            transition = game_logic.apply_event(
                previous, event, self.dictionary, self.answers, self.rng
            )
            current = transition.state
            self._state = current

            if event.kind is EventKind.RESET:
                self._save(current)
                game_logger.log_game_event('game_started', reason='reset')
            elif current is not previous and current.to_snapshot() != previous.to_snapshot():
                self._save(current)
                self._log_outcome(current)

            return transition

    def _log_outcome(self, current: GameState) -> None:
        if current.won:
            game_logger.log_game_event(
                'game_won',
                guesses_used=len(current.guesses),
                target_word=current.answer
            )
        elif current.lost:
            game_logger.log_game_event(
                'game_lost',
                guesses_used=len(current.guesses),
                target_word=current.answer
            )

    def press_key(self, raw_key) -> Transition:
        """Apply a key by name ("a", "Enter", "Backspace"); unknown keys are ignored."""
        event = parse_key(raw_key)
        if event is None:
            return Transition(self._state)
        return self.handle(event)

    def new_game(self) -> Transition:
        """Discard the current session and start over."""
        return self.handle(KeyEvent.reset())


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(store: Optional[SaveStore] = None, **kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(store=store, **kwargs)
    return _game_service


def register_game_service(game_service: GameService) -> GameService:
    """Install an already built service as the global instance."""
    global _game_service
    _game_service = game_service
    return _game_service
