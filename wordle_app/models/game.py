"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..config.game_settings import WORD_LENGTH, MAX_GUESSES, ALPHABET


class LetterStatus(Enum):
    """Per-letter feedback for a submitted guess."""
    ABSENT = "absent"
    PRESENT = "present"
    CORRECT = "correct"

    @property
    def rank(self) -> int:
        """Position in the order absent < present < correct."""
        return _STATUS_RANK[self]


_STATUS_RANK = {
    LetterStatus.ABSENT: 0,
    LetterStatus.PRESENT: 1,
    LetterStatus.CORRECT: 2,
}


class GamePhase(Enum):
    """Game lifecycle phase. WON and LOST are both terminal."""
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class EventKind(Enum):
    """Input actions understood by the state machine."""
    LETTER = "letter"
    BACKSPACE = "backspace"
    SUBMIT = "submit"
    RESET = "reset"


@dataclass(frozen=True)
class KeyEvent:
    """A single input event coming from the keyboard or the on-screen controls."""
    kind: EventKind
    letter: Optional[str] = None

    @classmethod
    def letter_key(cls, letter: str) -> 'KeyEvent':
        return cls(EventKind.LETTER, letter)

    @classmethod
    def backspace(cls) -> 'KeyEvent':
        return cls(EventKind.BACKSPACE)

    @classmethod
    def submit(cls) -> 'KeyEvent':
        return cls(EventKind.SUBMIT)

    @classmethod
    def reset(cls) -> 'KeyEvent':
        return cls(EventKind.RESET)


class SnapshotError(ValueError):
    """Raised when a persisted record does not describe a valid game."""


@dataclass(frozen=True)
class GameState:
    """Complete state of the single game session."""
    answer: str
    guesses: Tuple[str, ...] = ()
    current_input: str = ""
    key_statuses: Mapping[str, LetterStatus] = field(default_factory=dict)
    is_over: bool = False

    @property
    def won(self) -> bool:
        return self.is_over and bool(self.guesses) and self.guesses[-1] == self.answer

    @property
    def lost(self) -> bool:
        return self.is_over and not self.won

    @property
    def phase(self) -> GamePhase:
        if not self.is_over:
            return GamePhase.PLAYING
        return GamePhase.WON if self.won else GamePhase.LOST

    @property
    def evaluations(self) -> List[List[LetterStatus]]:
        """Feedback for every submitted guess, in submission order."""
        from ..services.game_logic import evaluate_guess
        return [evaluate_guess(guess, self.answer) for guess in self.guesses]

    def with_input(self, current_input: str) -> 'GameState':
        return replace(self, current_input=current_input)

    def to_snapshot(self) -> Dict[str, Any]:
        """
        Serializable record of the game for the save slot.

        The in-progress input is not part of the record.
        """
        return {
            'answer': self.answer,
            'guesses': list(self.guesses),
            'statuses': {letter: status.value for letter, status in sorted(self.key_statuses.items())},
            'isOver': self.is_over,
        }

    @classmethod
    def from_snapshot(cls, snapshot: Any, dictionary=None) -> 'GameState':
        """
        Rebuild a game from a save slot record.

        Args:
            snapshot: Decoded record as produced by ``to_snapshot``
            dictionary: Optional set of accepted guesses to check history against

        Returns:
            GameState with an empty in-progress input

        Raises:
            SnapshotError: If the record is missing fields or is inconsistent
        """
        if not isinstance(snapshot, dict):
            raise SnapshotError("Snapshot must be an object")

        answer = snapshot.get('answer')
        guesses = snapshot.get('guesses')
        statuses = snapshot.get('statuses')
        is_over = snapshot.get('isOver')

        if not _is_word(answer):
            raise SnapshotError(f"Invalid answer: {answer!r}")
        answer = answer.lower()

        if not isinstance(guesses, list) or len(guesses) > MAX_GUESSES:
            raise SnapshotError("Guesses must be a list of at most %d words" % MAX_GUESSES)
        if not all(_is_word(guess) for guess in guesses):
            raise SnapshotError(f"Invalid guess history: {guesses!r}")
        guesses = tuple(guess.lower() for guess in guesses)
        if dictionary is not None and any(guess not in dictionary for guess in guesses):
            raise SnapshotError("Guess history contains words outside the dictionary")

        if not isinstance(statuses, dict):
            raise SnapshotError("Statuses must be an object")
        key_statuses = {}
        for letter, value in statuses.items():
            if not (isinstance(letter, str) and len(letter) == 1 and letter in ALPHABET):
                raise SnapshotError(f"Invalid status key: {letter!r}")
            try:
                key_statuses[letter] = LetterStatus(value)
            except ValueError:
                raise SnapshotError(f"Invalid status for '{letter}': {value!r}")

        if not isinstance(is_over, bool):
            raise SnapshotError("isOver must be a boolean")
        finished = answer in guesses or len(guesses) == MAX_GUESSES
        if is_over != finished:
            raise SnapshotError("isOver does not match the guess history")
        if answer in guesses[:-1]:
            raise SnapshotError("Guesses continue after the answer was found")

        return cls(answer=answer, guesses=guesses, key_statuses=key_statuses, is_over=is_over)


def _is_word(value: Any) -> bool:
    return (
        isinstance(value, str)
        and len(value) == WORD_LENGTH
        and value.isascii()
        and value.isalpha()
    )


@dataclass(frozen=True)
class Transition:
    """Result of applying one event: the next state and an optional transient notice."""
    state: GameState
    notice: Optional[str] = None
