"""
Game Configuration Constants Module

Game rule constants for the guess engine. All values are read once, when an
engine is constructed, and never change during a game.
"""

import os
from typing import Final, Iterable, List

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""Number of letters in the secret word and in every guess row."""

MAX_ATTEMPTS: Final[int] = 6
"""Number of rows in the grid, i.e. guesses allowed per game."""

FALLBACK_SECRET_WORD: Final[str] = "HELLO"
"""
Secret word used when the word provider cannot supply one.
Keeps the game playable while the corpus is missing.
"""

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'wordles.json'
)

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def validate_word_list_integrity(words: Iterable[str], word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of a word corpus.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly ``word_length`` characters
    2. Character validation: Only A-Z characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent uppercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    word_list = list(words)
    if not word_list:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(word_list):
        if len(word) != word_length:
            raise ValueError(f"Word at index {index} '{word}' is not {word_length} characters long")

        if not all(char in ALPHABET for char in word.upper()):
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(word_list) != len(set(word_list)):
        duplicates = sorted({word for word in word_list if word_list.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: Iterable[str]) -> dict:
    """
    Analyzes a word corpus and returns statistical information.

    Returns:
        dict: total_words, avg_vowel_count, letter_frequency and
        most_common_letters
    """
    word_list: List[str] = [word.upper() for word in words]
    if not word_list:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in word_list)

    letter_frequency = {}
    for word in word_list:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(word_list),
        "avg_vowel_count": round(total_vowels / len(word_list), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
