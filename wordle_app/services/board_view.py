"""
Board View

Builds the plain-data view model rendered by the page template and sent to
the browser after every key: the 6x5 board, the on-screen keyboard and the
footer. The hidden answer only appears once the game is over.
"""

from typing import Any, Dict, List, Optional

from ..config.game_settings import WORD_LENGTH, MAX_GUESSES, KEYBOARD_ROWS, TOAST_DURATION_MS
from ..models.game import GameState

ACTION_KEYS = ("Enter", "Backspace")
KEY_LABELS = {"Backspace": "⌫"}


def build_board(state: GameState) -> List[List[Dict[str, str]]]:
    """
    Builds the guess grid.

    Cell states are "correct", "present" or "absent" for submitted rows,
    "filled" for typed letters of the in-progress row and "empty" otherwise.
    """
    rows = []
    for guess, statuses in zip(state.guesses, state.evaluations):
        rows.append([
            {'letter': letter.upper(), 'state': status.value}
            for letter, status in zip(guess, statuses)
        ])

    if not state.is_over and len(rows) < MAX_GUESSES:
        typed = state.current_input.upper()
        rows.append([
            {'letter': typed[i], 'state': 'filled'} if i < len(typed) else {'letter': '', 'state': 'empty'}
            for i in range(WORD_LENGTH)
        ])

    while len(rows) < MAX_GUESSES:
        rows.append([{'letter': '', 'state': 'empty'} for _ in range(WORD_LENGTH)])

    return rows


def build_keyboard(state: GameState) -> List[List[Dict[str, Any]]]:
    """Builds the three keyboard rows with the best known status of each letter."""
    keyboard = []
    for row in KEYBOARD_ROWS:
        keys = []
        for key in row:
            status = None
            if key not in ACTION_KEYS:
                known = state.key_statuses.get(key.lower())
                status = known.value if known else None
            keys.append({
                'key': key,
                'label': KEY_LABELS.get(key, key),
                'status': status,
                'wide': key in ACTION_KEYS
            })
        keyboard.append(keys)
    return keyboard


def build_view(state: GameState, notice: Optional[str] = None) -> Dict[str, Any]:
    """
    Builds the complete view model for one render.

    Args:
        state: Game to display
        notice: Transient message for the toast area

    Returns:
        JSON-serializable dict
    """
    if state.is_over:
        footer = f"Answer: {state.answer}"
    else:
        footer = f"Guess the {WORD_LENGTH}-letter word in {MAX_GUESSES} tries."

    return {
        'board': build_board(state),
        'keyboard': build_keyboard(state),
        'notice': notice,
        'toast_ms': TOAST_DURATION_MS,
        'phase': state.phase.value,
        'game_over': state.is_over,
        'guesses_count': len(state.guesses),
        'current_input': state.current_input,
        'answer': state.answer if state.is_over else None,
        'footer': footer
    }
