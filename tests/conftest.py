import random

import pytest

from wordle_app import create_app
from wordle_app.config import TestingConfig
from wordle_app.models.game import GameState
from wordle_app.services.game_service import GameService
from wordle_app.services.save_store import MemoryStore

DICTIONARY = frozenset([
    "crane", "slate", "eerie", "speed", "abbey", "robot", "pilot",
    "light", "might", "night", "sight", "tight", "fight", "eight",
])
ANSWERS = ("crane",)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def playing():
    return GameState(answer="crane")


@pytest.fixture
def service(store, rng):
    return GameService(store=store, dictionary=DICTIONARY, answers=ANSWERS, rng=rng)


@pytest.fixture
def app(service):
    app, socketio = create_app(TestingConfig, service)
    app.socketio = socketio
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
