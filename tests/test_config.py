import json

import pytest

from wordle_app import create_app
from wordle_app.config import TestingConfig, game_settings
from wordle_app.config.game_settings import (
    ANSWERS, DICTIONARY, get_word_statistics, load_word_data, validate_word_list_integrity
)
from wordle_app.models.game import EventKind
from wordle_app.utils.game_logger import game_logger
from wordle_app.utils.helpers import parse_key


def write_words(tmp_path, data):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_bundled_word_data():
    assert ANSWERS
    assert all(word in DICTIONARY for word in ANSWERS)
    assert all(word == word.lower() and len(word) == 5 for word in DICTIONARY)
    assert validate_word_list_integrity() is True


def test_word_statistics():
    stats = get_word_statistics()
    assert stats["total_answers"] == len(ANSWERS)
    assert stats["dictionary_size"] == len(DICTIONARY)
    assert len(stats["most_common_letters"]) == 5


def test_load_word_data_normalizes_case(tmp_path):
    path = write_words(tmp_path, {"dictionary": ["Slate"], "answers": ["CRANE"]})
    dictionary, answers = load_word_data(path)
    assert answers == ("crane",)
    assert dictionary == {"slate", "crane"}


@pytest.mark.parametrize("data", [
    [],
    {"dictionary": [], "answers": []},
    {"dictionary": ["slate"], "answers": ["cran"]},
    {"dictionary": ["sl4te"], "answers": ["crane"]},
    {"dictionary": "slate", "answers": ["crane"]},
])
def test_load_word_data_rejects_bad_files(tmp_path, data):
    with pytest.raises(ValueError):
        load_word_data(write_words(tmp_path, data))


def test_load_word_data_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_word_data(str(tmp_path / "missing.json"))


def test_keyboard_layout():
    assert game_settings.KEYBOARD_ROWS[2][0] == "Enter"
    assert game_settings.KEYBOARD_ROWS[2][-1] == "Backspace"


@pytest.mark.parametrize("raw, kind, letter", [
    ("a", EventKind.LETTER, "a"),
    ("Q", EventKind.LETTER, "q"),
    ("Enter", EventKind.SUBMIT, None),
    ("Backspace", EventKind.BACKSPACE, None),
])
def test_parse_key(raw, kind, letter):
    event = parse_key(raw)
    assert event.kind is kind
    assert event.letter == letter


@pytest.mark.parametrize("raw", ["Shift", "1", "", "ab", None, 5])
def test_parse_key_ignores_other_keys(raw):
    assert parse_key(raw) is None


def test_create_app_configures_file_logging(tmp_path, service):
    class FileLoggingConfig(TestingConfig):
        LOG_DIR = str(tmp_path / "logs")

    try:
        create_app(FileLoggingConfig, service)
        assert game_logger.log_dir == tmp_path / "logs"
        game_logger.logger.info("started")
        assert game_logger.get_log_stats()["total_entries"] >= 1
    finally:
        game_logger.configure(None)
