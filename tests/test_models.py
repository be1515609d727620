import pytest

from wordle_app.models.game import GamePhase, GameState, LetterStatus, SnapshotError


def test_status_order():
    assert LetterStatus.ABSENT.rank < LetterStatus.PRESENT.rank < LetterStatus.CORRECT.rank


def test_snapshot_round_trip():
    state = GameState(
        answer="crane",
        guesses=("slate", "eerie"),
        key_statuses={"s": LetterStatus.ABSENT, "a": LetterStatus.CORRECT, "e": LetterStatus.CORRECT},
    )
    snapshot = state.to_snapshot()
    assert snapshot == {
        "answer": "crane",
        "guesses": ["slate", "eerie"],
        "statuses": {"a": "correct", "e": "correct", "s": "absent"},
        "isOver": False,
    }
    assert GameState.from_snapshot(snapshot) == state


def test_snapshot_drops_current_input():
    state = GameState(answer="crane", current_input="cr")
    assert GameState.from_snapshot(state.to_snapshot()).current_input == ""


def test_finished_snapshot_restores_phase():
    won = GameState.from_snapshot({"answer": "crane", "guesses": ["crane"], "statuses": {}, "isOver": True})
    assert won.phase is GamePhase.WON

    lost = GameState.from_snapshot({
        "answer": "crane",
        "guesses": ["slate"] * 6,
        "statuses": {},
        "isOver": True,
    })
    assert lost.phase is GamePhase.LOST


@pytest.mark.parametrize("snapshot", [
    None,
    [],
    "crane",
    {},
    {"answer": "cran", "guesses": [], "statuses": {}, "isOver": False},
    {"answer": "crane", "guesses": "slate", "statuses": {}, "isOver": False},
    {"answer": "crane", "guesses": ["slate"] * 7, "statuses": {}, "isOver": True},
    {"answer": "crane", "guesses": ["sl4te"], "statuses": {}, "isOver": False},
    {"answer": "crane", "guesses": [], "statuses": {"a": "green"}, "isOver": False},
    {"answer": "crane", "guesses": [], "statuses": {"ab": "absent"}, "isOver": False},
    {"answer": "crane", "guesses": [], "statuses": {"": "absent"}, "isOver": False},
    {"answer": "crane", "guesses": [], "statuses": {"xyz": "present"}, "isOver": False},
    {"answer": "crane", "guesses": [], "statuses": {"A": "correct"}, "isOver": False},
    {"answer": "crane", "guesses": [], "statuses": {}, "isOver": "no"},
    {"answer": "crane", "guesses": [], "statuses": {}, "isOver": True},
    {"answer": "crane", "guesses": ["crane"], "statuses": {}, "isOver": False},
    {"answer": "crane", "guesses": ["crane", "slate"], "statuses": {}, "isOver": False},
])
def test_malformed_snapshots_are_rejected(snapshot):
    with pytest.raises(SnapshotError):
        GameState.from_snapshot(snapshot)


def test_snapshot_checked_against_dictionary():
    snapshot = {"answer": "crane", "guesses": ["qqqqq"], "statuses": {}, "isOver": False}
    with pytest.raises(SnapshotError):
        GameState.from_snapshot(snapshot, dictionary={"crane"})
