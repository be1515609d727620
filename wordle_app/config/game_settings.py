"""
Game Configuration Constants Module

This module defines all game configuration constants and loads the bundled
word data. All game parameters are centralized here to enable easy modification.
"""

import json
import os
import string
from typing import FrozenSet, List, Final, Tuple

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""Number of letters in every guess and answer."""

MAX_GUESSES: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

ALPHABET: Final[str] = string.ascii_lowercase

# On-screen keyboard layout, top to bottom
KEYS_ROW_1: Final[List[str]] = list("QWERTYUIOP")
KEYS_ROW_2: Final[List[str]] = list("ASDFGHJKL")
KEYS_ROW_3: Final[List[str]] = ["Enter", *"ZXCVBNM", "Backspace"]
KEYBOARD_ROWS: Final[List[List[str]]] = [KEYS_ROW_1, KEYS_ROW_2, KEYS_ROW_3]

# How long the browser keeps a notice on screen
TOAST_DURATION_MS: Final[int] = 1400

# Name of the single save slot record
SAVE_KEY: Final[str] = "wordle-state"

WORDS_FILE: Final[str] = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'words.json')


def _normalize_words(words, field: str) -> List[str]:
    if not isinstance(words, list):
        raise ValueError(f"'{field}' must be an array of words")
    
    normalized = []
    for word in words:
        if not isinstance(word, str):
            raise ValueError(f"Entry {word!r} in '{field}' is not a string")
        word = word.strip().lower()
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' in '{field}' is not {WORD_LENGTH} characters long")
        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word '{word}' in '{field}' contains non-alphabetic characters")
        normalized.append(word)
    return normalized


def load_word_data(json_file_path: str = WORDS_FILE) -> Tuple[FrozenSet[str], Tuple[str, ...]]:
    """
    Load the dictionary and the answer list from a words JSON file.
    
    The file holds an object with two arrays, ``dictionary`` (every word
    accepted as a guess) and ``answers`` (candidate solutions). Every word is
    lower-cased here, once, and answers are folded into the dictionary so an
    answer is always an acceptable guess.
    
    Returns:
        Tuple of (dictionary set, ordered answers)
        
    Raises:
        FileNotFoundError: If the words file is not found
        ValueError: If the file is malformed or contains invalid words
    """
    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}")
    
    if not isinstance(data, dict):
        raise ValueError("Words file must contain an object with 'dictionary' and 'answers'")
    
    answers = _normalize_words(data.get('answers'), 'answers')
    dictionary = _normalize_words(data.get('dictionary'), 'dictionary')
    
    if not answers:
        raise ValueError("Answer list cannot be empty")
    
    return frozenset(dictionary) | frozenset(answers), tuple(answers)


# Word data loaded from the bundled JSON file
DICTIONARY, ANSWERS = load_word_data()


def validate_word_list_integrity() -> bool:
    """
    Validates the integrity and consistency of the word data.
    
    Checks that every answer is a lowercase five letter word, that answers
    contain no duplicates and that every answer is accepted as a guess.
    
    Returns:
        bool: True if word data passes all validation checks
        
    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not ANSWERS:
        raise ValueError("Answer list cannot be empty")
    
    for index, word in enumerate(ANSWERS):
        if len(word) != WORD_LENGTH or not word.isalpha():
            raise ValueError(f"Answer at index {index} '{word}' is not a {WORD_LENGTH} letter word")
        if not word.islower():
            raise ValueError(f"Answer at index {index} '{word}' is not in lowercase format")
        if word not in DICTIONARY:
            raise ValueError(f"Answer at index {index} '{word}' is missing from the dictionary")
    
    if len(ANSWERS) != len(set(ANSWERS)):
        duplicates = sorted({word for word in ANSWERS if ANSWERS.count(word) > 1})
        raise ValueError(f"Duplicate words found in answer list: {duplicates}")
    
    return True


def get_word_statistics() -> dict:
    """
    Analyzes the answer list and returns statistical information.
    
    Returns:
        dict: total_answers, dictionary_size, avg_vowel_count and the
        five most common letters across all answers
    """
    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in ANSWERS)
    
    letter_frequency = {}
    for word in ANSWERS:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1
    
    return {
        "total_answers": len(ANSWERS),
        "dictionary_size": len(DICTIONARY),
        "avg_vowel_count": round(total_vowels / len(ANSWERS), 2),
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")
        print(f" Game statistics: {get_word_statistics()}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
