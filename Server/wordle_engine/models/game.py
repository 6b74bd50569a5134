"""
Game Data Models

Contains the grid, cursor, input event and result structures used by the
guess engine.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Feedback(Enum):
    """Per-letter evaluation state of a grid cell."""
    UNSET = "UNSET"
    CORRECT_POSITION = "CORRECT_POSITION"
    WRONG_POSITION = "WRONG_POSITION"
    ABSENT = "ABSENT"


class GameStatus(Enum):
    """Lifecycle state of a single game."""
    ACTIVE = "ACTIVE"
    WON = "WON"
    LOST = "LOST"


class EventKind(Enum):
    """Semantic input events accepted by the engine."""
    TYPE_LETTER = "type_letter"
    BACKSPACE = "backspace"
    SUBMIT = "submit"
    RESET = "reset"


class Notice(Enum):
    """Terminal or user-visible notices produced by a submit."""
    WON = "WON"
    LOST = "LOST"
    REJECTED_WORD = "REJECTED_WORD"


class EventDecodeError(ValueError):
    """Raised when a raw payload cannot be turned into an InputEvent."""


@dataclass
class Cell:
    """One grid position."""
    character: str = ""
    feedback: Feedback = Feedback.UNSET

    @property
    def is_blank(self) -> bool:
        return self.character == "" and self.feedback is Feedback.UNSET

    def clear(self) -> None:
        self.character = ""
        self.feedback = Feedback.UNSET

    def to_dict(self) -> Dict[str, str]:
        return {"character": self.character, "feedback": self.feedback.value}


class Grid:
    """Fixed-size matrix of cells, ``rows`` attempts by ``columns`` letters."""

    def __init__(self, rows: int, columns: int):
        if rows <= 0 or columns <= 0:
            raise ValueError("Grid dimensions must be positive")
        self.rows = rows
        self.columns = columns
        self._cells: List[List[Cell]] = [
            [Cell() for _ in range(columns)] for _ in range(rows)
        ]

    def cell(self, row: int, col: int) -> Cell:
        return self._cells[row][col]

    def row(self, row: int) -> List[Cell]:
        return list(self._cells[row])

    def row_word(self, row: int) -> str:
        """Letters of ``row`` joined, blanks skipped."""
        return "".join(cell.character for cell in self._cells[row])

    def is_blank(self) -> bool:
        return all(cell.is_blank for row in self._cells for cell in row)

    def clear(self) -> None:
        for row in self._cells:
            for cell in row:
                cell.clear()

    def to_list(self) -> List[List[Dict[str, str]]]:
        return [[cell.to_dict() for cell in row] for row in self._cells]


@dataclass
class Cursor:
    """
    Next writable cell. ``col`` is -1 while the active row is empty and is
    clamped to ``[-1, columns - 1]``.
    """
    row: int = 0
    col: int = -1

    def as_tuple(self):
        return self.row, self.col


@dataclass(frozen=True)
class InputEvent:
    """A semantic input event. ``letter`` is only set for TYPE_LETTER."""
    kind: EventKind
    letter: Optional[str] = None

    @classmethod
    def type_letter(cls, letter: str) -> "InputEvent":
        return cls(EventKind.TYPE_LETTER, letter)

    @classmethod
    def backspace(cls) -> "InputEvent":
        return cls(EventKind.BACKSPACE)

    @classmethod
    def submit(cls) -> "InputEvent":
        return cls(EventKind.SUBMIT)

    @classmethod
    def reset(cls) -> "InputEvent":
        return cls(EventKind.RESET)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InputEvent":
        """
        Decode a JSON payload such as ``{"type": "type_letter", "letter": "a"}``.

        Raises:
            EventDecodeError: If the payload has no known event type, or a
                TYPE_LETTER event carries no letter string.
        """
        if not isinstance(data, dict):
            raise EventDecodeError("Event payload must be an object")

        raw_type = data.get('type')
        try:
            kind = EventKind(str(raw_type).lower())
        except ValueError:
            raise EventDecodeError(f"Unknown event type: {raw_type!r}")

        if kind is EventKind.TYPE_LETTER:
            letter = data.get('letter')
            if not isinstance(letter, str):
                raise EventDecodeError("type_letter event requires a 'letter' string")
            return cls(kind, letter)

        return cls(kind)


@dataclass
class GameSnapshot:
    """Full, JSON-serializable view of the game handed to the presentation layer."""
    status: str
    grid: List[List[Dict[str, str]]]
    cursor_row: int
    cursor_col: int
    attempts_used: int
    word_length: int
    max_attempts: int
    answer: Optional[str] = None  # Only included when game is over


@dataclass
class EventResult:
    """What one event changed, plus the snapshot taken after it."""
    event: str
    snapshot: GameSnapshot
    changed_cells: List[Dict[str, Any]] = field(default_factory=list)
    notice: Optional[Notice] = None
    secret_word: Optional[str] = None  # Only set with Notice.LOST
    reason: Optional[str] = None       # Only set with Notice.REJECTED_WORD

    @property
    def ignored(self) -> bool:
        """True when the event was a no-op."""
        return not self.changed_cells and self.notice is None and self.event != EventKind.RESET.value

    def to_dict(self) -> Dict[str, Any]:
        return {
            'event': self.event,
            'changed_cells': list(self.changed_cells),
            'notice': self.notice.value if self.notice else None,
            'secret_word': self.secret_word,
            'reason': self.reason,
            'ignored': self.ignored,
            'state': asdict(self.snapshot),
        }
