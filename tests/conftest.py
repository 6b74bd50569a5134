import os
import tempfile

# Keep test logs out of the working tree; must be set before wordle_engine is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle_engine_logs_'))

import pytest

from wordle_engine import create_app
from wordle_engine.config import TestingConfig
from wordle_engine.services import GuessEngine, WordListProvider, game_service as game_service_module
from wordle_engine.services.game_service import initialize_game_service

WORDS = [
    "CRANE", "SLATE", "ALLOY", "LOLLY", "HELLO", "LEVEL", "BELLE",
    "SCOOP", "COOLS", "RAISE", "STARE", "TRACE", "ABBEY", "SPEED",
]


class StubWordProvider(WordListProvider):
    """Word list provider whose secret words are drawn from a fixed queue."""

    def __init__(self, secrets, words=WORDS):
        super().__init__(words)
        self.secrets = list(secrets)
        self.draws = 0

    def draw_secret_word(self):
        self.words()
        self.draws += 1
        if len(self.secrets) > 1:
            return self.secrets.pop(0)
        return self.secrets[0]


def type_word(engine, word):
    return [engine.type_letter(letter) for letter in word]


def play(engine, word):
    """Type a whole word and submit it, returning the submit result."""
    type_word(engine, word)
    return engine.submit()


@pytest.fixture
def provider():
    return StubWordProvider(["CRANE", "ALLOY"])


@pytest.fixture
def engine(provider):
    return GuessEngine(provider)


@pytest.fixture
def app(provider):
    initialize_game_service(provider)
    app, socketio = create_app(TestingConfig)
    yield app
    game_service_module._game_service = None


@pytest.fixture
def client(app):
    return app.test_client()
