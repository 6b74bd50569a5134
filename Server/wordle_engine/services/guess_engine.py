"""
Guess Engine

Owns one game: the secret word, the grid, the cursor and the game status.
Every semantic input event is handled to completion and answered with an
``EventResult`` for the presentation layer.
"""

import logging
from typing import Callable, Dict, Optional

from ..config.game_settings import ALPHABET, FALLBACK_SECRET_WORD, MAX_ATTEMPTS, WORD_LENGTH
from ..models.game import (
    Cursor, EventKind, EventResult, Feedback, GameSnapshot, GameStatus,
    Grid, InputEvent, Notice
)
from .evaluator import evaluate_guess, is_exact_match
from .word_provider import CorpusUnavailable, WordProvider

logger = logging.getLogger(__name__)

REASON_NOT_IN_WORD_LIST = "not_in_word_list"
REASON_CORPUS_UNAVAILABLE = "corpus_unavailable"


class GuessEngine:
    """
    Game state machine.

    States are ACTIVE (initial), WON and LOST (terminal). RESET returns any
    state to ACTIVE with a new secret word. The engine is not thread-safe;
    callers must serialize access.
    """

    def __init__(self, word_provider: WordProvider,
                 word_length: int = WORD_LENGTH,
                 max_attempts: int = MAX_ATTEMPTS,
                 fallback_word: str = FALLBACK_SECRET_WORD):
        if len(fallback_word) != word_length:
            raise ValueError(f"Fallback word must be {word_length} letters long")

        self.word_provider = word_provider
        self.word_length = word_length
        self.max_attempts = max_attempts
        self.fallback_word = fallback_word.upper()

        self.grid = Grid(max_attempts, word_length)
        self.cursor = Cursor()
        self.status = GameStatus.ACTIVE
        self.secret_word = self._draw_secret_word()

        self._handlers: Dict[EventKind, Callable[[InputEvent], EventResult]] = {
            EventKind.TYPE_LETTER: self._handle_type_letter,
            EventKind.BACKSPACE: self._handle_backspace,
            EventKind.SUBMIT: self._handle_submit,
            EventKind.RESET: self._handle_reset,
        }

    @property
    def active(self) -> bool:
        return self.status is GameStatus.ACTIVE

    @property
    def attempts_used(self) -> int:
        """Number of rows that have been submitted and scored."""
        if self.status is GameStatus.ACTIVE:
            return self.cursor.row
        return self.cursor.row + 1

    def handle(self, event: InputEvent) -> EventResult:
        """Dispatch a semantic event. Non-reset events are ignored once the game is over."""
        if event.kind is not EventKind.RESET and not self.active:
            logger.debug("Ignoring %s: game is %s", event.kind.value, self.status.value)
            return self._result(event.kind)
        return self._handlers[event.kind](event)

    def type_letter(self, letter: str) -> EventResult:
        return self.handle(InputEvent.type_letter(letter))

    def backspace(self) -> EventResult:
        return self.handle(InputEvent.backspace())

    def submit(self) -> EventResult:
        return self.handle(InputEvent.submit())

    def reset(self) -> EventResult:
        return self.handle(InputEvent.reset())

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            status=self.status.value,
            grid=self.grid.to_list(),
            cursor_row=self.cursor.row,
            cursor_col=self.cursor.col,
            attempts_used=self.attempts_used,
            word_length=self.word_length,
            max_attempts=self.max_attempts,
            answer=None if self.active else self.secret_word,
        )

    def _draw_secret_word(self) -> str:
        try:
            word = self.word_provider.draw_secret_word()
        except CorpusUnavailable as e:
            logger.warning("Word corpus unavailable, using fallback secret word: %s", e)
            return self.fallback_word
        return word.upper()

    def _handle_type_letter(self, event: InputEvent) -> EventResult:
        letter = event.letter or ""
        if len(letter) != 1 or letter.upper() not in ALPHABET:
            logger.debug("Ignoring non-letter input %r", letter)
            return self._result(event.kind)

        if self.cursor.col >= self.word_length - 1:
            return self._result(event.kind)

        self.cursor.col += 1
        cell = self.grid.cell(self.cursor.row, self.cursor.col)
        cell.character = letter.upper()
        cell.feedback = Feedback.UNSET
        return self._result(event.kind, changed=[self.cursor.col])

    def _handle_backspace(self, event: InputEvent) -> EventResult:
        if self.cursor.col < 0:
            return self._result(event.kind)

        col = self.cursor.col
        self.grid.cell(self.cursor.row, col).clear()
        self.cursor.col -= 1
        return self._result(event.kind, changed=[col])

    def _handle_submit(self, event: InputEvent) -> EventResult:
        if self.cursor.col < self.word_length - 1:
            return self._result(event.kind)

        row = self.cursor.row
        guess = self.grid.row_word(row)

        try:
            valid = self.word_provider.is_valid_word(guess)
        except CorpusUnavailable as e:
            logger.warning("Cannot validate %s, word corpus unavailable: %s", guess, e)
            return self._result(event.kind, notice=Notice.REJECTED_WORD,
                                reason=REASON_CORPUS_UNAVAILABLE)

        if not valid:
            return self._result(event.kind, notice=Notice.REJECTED_WORD,
                                reason=REASON_NOT_IN_WORD_LIST)

        feedback = evaluate_guess(guess, self.secret_word)
        for col, status in enumerate(feedback):
            self.grid.cell(row, col).feedback = status
        changed = list(range(self.word_length))

        if is_exact_match(feedback):
            self.status = GameStatus.WON
            logger.info("Game won in %d attempt(s)", row + 1)
            return self._result(event.kind, changed=changed, row=row, notice=Notice.WON)

        if row == self.max_attempts - 1:
            self.status = GameStatus.LOST
            logger.info("Game lost, secret word was %s", self.secret_word)
            return self._result(event.kind, changed=changed, row=row,
                                notice=Notice.LOST, secret_word=self.secret_word)

        self.cursor.row += 1
        self.cursor.col = -1
        return self._result(event.kind, changed=changed, row=row)

    def _handle_reset(self, event: InputEvent) -> EventResult:
        self.secret_word = self._draw_secret_word()
        self.grid.clear()
        self.cursor = Cursor()
        self.status = GameStatus.ACTIVE
        return self._result(event.kind)

    def _result(self, kind: EventKind, changed=(), row: Optional[int] = None,
                notice: Optional[Notice] = None, secret_word: Optional[str] = None,
                reason: Optional[str] = None) -> EventResult:
        if row is None:
            row = self.cursor.row
        changed_cells = [
            {'row': row, 'col': col, **self.grid.cell(row, col).to_dict()}
            for col in changed
        ]
        return EventResult(
            event=kind.value,
            snapshot=self.snapshot(),
            changed_cells=changed_cells,
            notice=notice,
            secret_word=secret_word,
            reason=reason,
        )
