"""
Guess Evaluation

Scores a guess against the secret word with duplicate-letter handling.
"""

from collections import Counter
from typing import List, Optional, Sequence

from ..models.game import Feedback


def evaluate_guess(guess: str, secret: str) -> List[Feedback]:
    """
    Implements the two-pass counting evaluation.

    Exact matches are resolved first, left to right, and each one claims an
    occurrence of its letter. Remaining positions are then scanned left to
    right; a letter is WRONG_POSITION while unclaimed occurrences remain in the
    secret and ABSENT once they are exhausted.

    Args:
        guess: Uppercase guess, same length as ``secret``
        secret: Uppercase secret word

    Returns:
        List[Feedback]: One label per position, never UNSET
    """
    assert len(guess) == len(secret), "guess and secret must have the same length"
    assert guess.isupper() and secret.isupper(), "guess and secret must be uppercase"

    total_count = Counter(secret)
    claimed_count: Counter = Counter()
    result: List[Optional[Feedback]] = [None] * len(secret)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == secret[i]:
            result[i] = Feedback.CORRECT_POSITION
            claimed_count[letter] += 1

    if all(status is Feedback.CORRECT_POSITION for status in result):
        return [Feedback.CORRECT_POSITION] * len(secret)

    # Second pass: presence among unclaimed occurrences
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if claimed_count[letter] < total_count[letter]:
            result[i] = Feedback.WRONG_POSITION
            claimed_count[letter] += 1
        else:
            result[i] = Feedback.ABSENT

    return [status for status in result if status is not None]


def is_exact_match(feedback: Sequence[Feedback]) -> bool:
    """Return True if every position is CORRECT_POSITION."""
    return bool(feedback) and all(status is Feedback.CORRECT_POSITION for status in feedback)
