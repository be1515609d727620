"""
Game Logic

Pure functions implementing guess evaluation, keyboard hint aggregation and
the game state machine. Nothing in here performs I/O; every transition takes
a state and an event and returns a new state.
"""

import random
from typing import Collection, Dict, List, Mapping, Optional, Sequence

from ..config.game_settings import WORD_LENGTH, MAX_GUESSES, ALPHABET
from ..models.game import EventKind, GameState, KeyEvent, LetterStatus, Transition

NOT_ENOUGH_LETTERS = "Not enough letters"
NOT_IN_WORD_LIST = "Not in word list"
WIN_NOTICE = "You got it!"
NEW_GAME_NOTICE = "New game!"


def evaluate_guess(guess: str, answer: str) -> List[LetterStatus]:
    """
    Implements the Wordle letter evaluation algorithm.

    Exact matches are consumed first so that a repeated letter in the guess
    is never credited more often than it occurs in the answer.

    Args:
        guess: Word being scored, same case as the answer
        answer: Hidden word

    Returns:
        One LetterStatus per position
    """
    if len(guess) != len(answer):
        raise ValueError(f"Guess '{guess}' and answer must have the same length")

    result = [LetterStatus.ABSENT] * len(answer)

    # Working copies to track letter consumption
    answer_chars: List[Optional[str]] = list(answer)
    guess_chars: List[Optional[str]] = list(guess)

    # First pass: exact position matches
    for i, letter in enumerate(guess_chars):
        if letter == answer_chars[i]:
            result[i] = LetterStatus.CORRECT
            answer_chars[i] = None
            guess_chars[i] = None

    # Second pass: letters present elsewhere, consuming the first free occurrence
    for i, letter in enumerate(guess_chars):
        if letter is not None and letter in answer_chars:
            result[i] = LetterStatus.PRESENT
            answer_chars[answer_chars.index(letter)] = None

    return result


def merge_key_statuses(existing: Mapping[str, LetterStatus],
                       guess: str,
                       statuses: Sequence[LetterStatus]) -> Dict[str, LetterStatus]:
    """
    Returns a new keyboard hint map updated with the feedback of one guess.

    A letter's status only ever moves up the order absent < present < correct.
    """
    merged = dict(existing)
    for letter, status in zip(guess, statuses):
        previous = merged.get(letter)
        if previous is None or status.rank > previous.rank:
            merged[letter] = status
    return merged


def pick_answer(answers: Sequence[str], rng: random.Random = None) -> str:
    """Uniformly draws an answer and returns it in canonical lowercase form."""
    if not answers:
        raise ValueError("Answer list cannot be empty")
    chooser = rng or random
    return chooser.choice(answers).lower()


def new_game(answers: Sequence[str], rng: random.Random = None) -> GameState:
    """Creates a fresh game in the playing phase."""
    return GameState(answer=pick_answer(answers, rng))


def submit_guess(state: GameState, dictionary: Collection[str]) -> Transition:
    """Validates and scores the in-progress input."""
    guess = state.current_input.lower()

    if len(guess) != WORD_LENGTH:
        return Transition(state, NOT_ENOUGH_LETTERS)
    if guess not in dictionary:
        return Transition(state, NOT_IN_WORD_LIST)

    statuses = evaluate_guess(guess, state.answer)
    guesses = state.guesses + (guess,)
    won = guess == state.answer
    lost = not won and len(guesses) >= MAX_GUESSES

    next_state = GameState(
        answer=state.answer,
        guesses=guesses,
        current_input="",
        key_statuses=merge_key_statuses(state.key_statuses, guess, statuses),
        is_over=won or lost,
    )

    notice = None
    if won:
        notice = WIN_NOTICE
    elif lost:
        notice = f"Answer: {state.answer.upper()}"
    return Transition(next_state, notice)


def apply_event(state: GameState,
                event: KeyEvent,
                dictionary: Collection[str],
                answers: Sequence[str],
                rng: random.Random = None) -> Transition:
    """
    Applies a single input event to the game.

    Args:
        state: Current game
        event: Input to apply
        dictionary: Words accepted as guesses
        answers: Candidate answers, used when the event starts a new game
        rng: Random source for answer selection

    Returns:
        Transition holding the next state and an optional transient notice
    """
    if event.kind is EventKind.RESET:
        return Transition(new_game(answers, rng), NEW_GAME_NOTICE)

    # Terminal games ignore every other input
    if state.is_over:
        return Transition(state)

    if event.kind is EventKind.LETTER:
        letter = (event.letter or "").lower()
        if len(letter) != 1 or letter not in ALPHABET:
            return Transition(state)
        if len(state.current_input) >= WORD_LENGTH:
            return Transition(state)
        return Transition(state.with_input(state.current_input + letter))

    if event.kind is EventKind.BACKSPACE:
        if not state.current_input:
            return Transition(state)
        return Transition(state.with_input(state.current_input[:-1]))

    if event.kind is EventKind.SUBMIT:
        return submit_guess(state, dictionary)

    raise ValueError(f"Unknown event kind: {event.kind}")
