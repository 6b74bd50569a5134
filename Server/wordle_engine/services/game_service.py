"""
Game Service

Keeps one GuessEngine per game session and serializes every call into it.
"""

import threading
import uuid
from typing import Dict, Optional

from ..config.app_config import Config
from ..models.game import EventResult, GameSnapshot, InputEvent
from .guess_engine import GuessEngine
from .word_provider import FileWordProvider, WordProvider


class GameSession:
    """A GuessEngine together with the lock that owns it."""

    def __init__(self, game_id: str, engine: GuessEngine):
        self.game_id = game_id
        self.engine = engine
        self.lock = threading.Lock()


class GameService:
    """
    Core game service managing multiple single-player game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Serialized event delivery to each session's engine
    - Game state snapshots that hide the secret word until the game is over
    """

    def __init__(self, word_provider: WordProvider, fallback_word: str = Config.FALLBACK_SECRET_WORD):
        self.word_provider = word_provider
        self.fallback_word = fallback_word
        self.games: Dict[str, GameSession] = {}
        self._games_lock = threading.Lock()

    def create_new_game(self) -> str:
        """
        Creates a new game session with a randomly selected word.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        engine = GuessEngine(self.word_provider, fallback_word=self.fallback_word)

        with self._games_lock:
            self.games[game_id] = GameSession(game_id, engine)
        return game_id

    def get_game_state(self, game_id: str) -> Optional[GameSnapshot]:
        """
        Returns the current snapshot for a session.

        Returns:
            GameSnapshot or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None

        with session.lock:
            return session.engine.snapshot()

    def handle_event(self, game_id: str, event: InputEvent) -> Optional[EventResult]:
        """
        Delivers one semantic event to a session's engine.

        Returns:
            EventResult or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None

        with session.lock:
            return session.engine.handle(event)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._games_lock:
            return self.games.pop(game_id, None) is not None


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_provider: Optional[WordProvider] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    if word_provider is None:
        word_provider = FileWordProvider(Config.WORD_LIST_PATH)
    _game_service = GameService(word_provider)
    return _game_service
