"""
Word Provider

Supplies secret words and dictionary membership checks to the guess engine.
The engine only talks to the ``WordProvider`` interface; the adapters below
back it with an in-memory list or a word list file.
"""

import json
import logging
import os
import random
from typing import Iterable, List, Optional, Set

from ..config.game_settings import ALPHABET, WORD_LENGTH

logger = logging.getLogger(__name__)


class WordProviderError(Exception):
    """Base class for word provider failures."""


class CorpusUnavailable(WordProviderError):
    """The word corpus could not be loaded, so no word can be drawn or validated."""


def normalize_word(word: str) -> str:
    """Normalize a corpus entry or candidate: trim, uppercase, strip BOM."""
    return word.replace("\ufeff", "").strip().upper()


def _is_playable(word: str, word_length: int) -> bool:
    return len(word) == word_length and all(char in ALPHABET for char in word)


class WordProvider:
    """
    Interface for the word corpus.

    Subclasses implement ``_load_words``; this base class handles caching,
    random choice and case-insensitive membership.
    """

    def __init__(self, word_length: int = WORD_LENGTH, rng: Optional[random.Random] = None):
        self.word_length = word_length
        self._rng = rng or random.Random()
        self._words: Optional[List[str]] = None
        self._word_set: Set[str] = set()

    def _load_words(self) -> Iterable[str]:
        raise NotImplementedError

    def words(self) -> List[str]:
        """
        Returns the playable corpus, loading it on first use.

        Raises:
            CorpusUnavailable: If the corpus cannot be loaded or is empty.
                The load is retried on the next call.
        """
        if self._words is None:
            try:
                raw_words = self._load_words()
                words = sorted({normalize_word(w) for w in raw_words if isinstance(w, str)})
            except CorpusUnavailable:
                raise
            except (OSError, ValueError) as e:
                raise CorpusUnavailable(f"Failed to load word corpus: {e}") from e

            words = [w for w in words if _is_playable(w, self.word_length)]
            if not words:
                raise CorpusUnavailable(f"Word corpus has no {self.word_length}-letter words")

            self._words = words
            self._word_set = set(words)
            logger.info("Loaded %d valid %d-letter words", len(words), self.word_length)

        return self._words

    def draw_secret_word(self) -> str:
        """
        Chooses a uniformly random word from the corpus.

        Returns:
            str: Uppercase word of ``word_length`` letters

        Raises:
            CorpusUnavailable: If the corpus cannot be loaded
        """
        return self._rng.choice(self.words())

    def is_valid_word(self, candidate) -> bool:
        """
        Case-insensitive membership test. Any input that is not a string of
        ``word_length`` letters is simply not valid.

        Raises:
            CorpusUnavailable: If the corpus cannot be loaded, so callers can
                tell "not a word" apart from "cannot check"
        """
        self.words()
        if not isinstance(candidate, str):
            return False
        return normalize_word(candidate) in self._word_set


class WordListProvider(WordProvider):
    """Provider over an in-memory collection of words."""

    def __init__(self, words: Iterable[str], word_length: int = WORD_LENGTH,
                 rng: Optional[random.Random] = None):
        super().__init__(word_length, rng)
        self._source = list(words)

    def _load_words(self) -> Iterable[str]:
        return self._source


class FileWordProvider(WordProvider):
    """
    Provider backed by a word list file.

    ``.json`` files must hold an array of words; any other file is read as one
    word per line.
    """

    def __init__(self, path: str, word_length: int = WORD_LENGTH,
                 rng: Optional[random.Random] = None):
        super().__init__(word_length, rng)
        self.path = path

    def _load_words(self) -> Iterable[str]:
        if not os.path.isfile(self.path):
            raise CorpusUnavailable(f"Word list file not found: {self.path}")

        with open(self.path, 'r', encoding='utf-8') as f:
            if self.path.lower().endswith('.json'):
                try:
                    word_list = json.load(f)
                except json.JSONDecodeError as e:
                    raise CorpusUnavailable(f"Invalid JSON in {self.path}: {e}") from e
                if not isinstance(word_list, list):
                    raise CorpusUnavailable("JSON file must contain an array of words")
                return word_list
            return [line for line in f if line.strip()]
