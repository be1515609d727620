from wordle_app.models.game import GamePhase, GameState, KeyEvent
from wordle_app.services.game_service import GameService, get_game_service, initialize_game_service
from wordle_app.services.save_store import JsonFileStore, MemoryStore, SaveStore

from conftest import ANSWERS, DICTIONARY


class BrokenStore(SaveStore):
    def load(self):
        return None

    def save(self, snapshot):
        raise OSError("disk full")


def make_service(store):
    return GameService(store=store, dictionary=DICTIONARY, answers=ANSWERS)


def press_word(service, word):
    for letter in word:
        service.press_key(letter)
    return service.press_key("Enter")


def test_fresh_game_is_saved(service, store):
    assert service.state == GameState(answer="crane")
    assert store.load() == service.state.to_snapshot()


def test_restores_saved_game():
    saved = {"answer": "crane", "guesses": ["slate"], "statuses": {"a": "correct"}, "isOver": False}
    service = make_service(MemoryStore(saved))
    assert service.state.guesses == ("slate",)
    assert service.state.to_snapshot() == saved


def test_malformed_save_starts_fresh():
    store = MemoryStore({"answer": 42})
    service = make_service(store)
    assert service.state == GameState(answer="crane")
    assert store.load() == service.state.to_snapshot()


def test_save_with_unknown_guess_starts_fresh():
    store = MemoryStore({"answer": "crane", "guesses": ["qqqqq"], "statuses": {}, "isOver": False})
    assert make_service(store).state.guesses == ()


def test_keystrokes_do_not_touch_the_save(service, store):
    saves = store.save_count
    service.press_key("c")
    service.press_key("Backspace")
    assert store.save_count == saves


def test_submitted_guess_is_saved(service, store):
    transition = press_word(service, "slate")
    assert transition.notice is None
    assert store.load()["guesses"] == ["slate"]


def test_rejected_guess_is_not_saved(service, store):
    saves = store.save_count
    transition = press_word(service, "zzzzz")
    assert transition.notice == "Not in word list"
    assert store.save_count == saves
    assert service.state.current_input == "zzzzz"


def test_win_is_saved(service, store):
    transition = press_word(service, "crane")
    assert transition.state.phase is GamePhase.WON
    assert store.load()["isOver"] is True


def test_new_game_resets_and_saves(service, store):
    press_word(service, "slate")
    transition = service.new_game()
    assert transition.notice == "New game!"
    assert service.state == GameState(answer="crane")
    assert store.load()["guesses"] == []


def test_unknown_keys_are_ignored(service):
    before = service.state
    assert service.press_key("Shift").state is before
    assert service.press_key(None).state is before


def test_store_failures_keep_game_in_memory():
    service = make_service(BrokenStore())
    transition = press_word(service, "slate")
    assert transition.state.guesses == ("slate",)
    service.handle(KeyEvent.reset())
    assert service.state.guesses == ()


def test_global_registry():
    service = initialize_game_service(MemoryStore(), dictionary=DICTIONARY, answers=ANSWERS)
    assert get_game_service() is service


class UnreadableStore(MemoryStore):
    def load(self):
        raise OSError("storage unavailable")


def test_store_load_failure_starts_fresh():
    store = UnreadableStore()
    service = make_service(store)
    assert service.state == GameState(answer="crane")
    assert store.save_count == 1


def test_corrupt_save_file_starts_fresh(tmp_path):
    path = tmp_path / "save.json"
    path.write_text("[" * 200000 + "]" * 200000, encoding="utf-8")
    service = make_service(JsonFileStore(path))
    assert service.state == GameState(answer="crane")
    assert JsonFileStore(path).load() == service.state.to_snapshot()
