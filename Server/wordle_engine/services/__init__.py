"""
Services Package

Contains all business logic and service classes.
"""

from .evaluator import evaluate_guess, is_exact_match
from .game_service import GameService, get_game_service, initialize_game_service
from .guess_engine import GuessEngine
from .word_provider import (
    CorpusUnavailable, FileWordProvider, WordListProvider, WordProvider, WordProviderError
)

__all__ = [
    'evaluate_guess', 'is_exact_match',
    'GameService', 'get_game_service', 'initialize_game_service',
    'GuessEngine',
    'CorpusUnavailable', 'FileWordProvider', 'WordListProvider', 'WordProvider', 'WordProviderError'
]
