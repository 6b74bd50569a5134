import pytest

from conftest import StubWordProvider, play, type_word
from wordle_engine.config import FALLBACK_SECRET_WORD, MAX_ATTEMPTS, WORD_LENGTH
from wordle_engine.models import EventKind, Feedback, GameStatus, InputEvent, Notice
from wordle_engine.services import FileWordProvider, GuessEngine
from wordle_engine.services.guess_engine import REASON_CORPUS_UNAVAILABLE, REASON_NOT_IN_WORD_LIST

C = Feedback.CORRECT_POSITION
W = Feedback.WRONG_POSITION
A = Feedback.ABSENT

LOSING_GUESSES = ["SLATE", "TRACE", "RAISE", "STARE", "SCOOP", "HELLO"]


def row_feedback(engine, row):
    return [cell.feedback for cell in engine.grid.row(row)]


def assert_fresh(engine):
    assert engine.status is GameStatus.ACTIVE
    assert engine.cursor.as_tuple() == (0, -1)
    assert engine.grid.is_blank()


def test_initial_state(engine):
    assert_fresh(engine)
    assert engine.secret_word == "CRANE"
    assert engine.grid.rows == MAX_ATTEMPTS
    assert engine.grid.columns == WORD_LENGTH


def test_type_letter_writes_uppercase_and_advances(engine):
    result = engine.type_letter("c")

    assert engine.cursor.as_tuple() == (0, 0)
    cell = engine.grid.cell(0, 0)
    assert cell.character == "C"
    assert cell.feedback is Feedback.UNSET
    assert result.changed_cells == [{'row': 0, 'col': 0, 'character': 'C', 'feedback': 'UNSET'}]
    assert result.notice is None


def test_type_letter_on_full_row_is_ignored(engine):
    type_word(engine, "CRANE")
    result = engine.type_letter("X")

    assert result.ignored
    assert engine.cursor.as_tuple() == (0, WORD_LENGTH - 1)
    assert engine.grid.row_word(0) == "CRANE"


@pytest.mark.parametrize("letter", ["1", "", "AB", " ", "é", None])
def test_non_letters_are_ignored(engine, letter):
    result = engine.handle(InputEvent(EventKind.TYPE_LETTER, letter))

    assert result.ignored
    assert_fresh(engine)


def test_backspace_clears_last_letter(engine):
    type_word(engine, "CR")
    result = engine.backspace()

    assert engine.cursor.as_tuple() == (0, 0)
    assert engine.grid.cell(0, 1).is_blank
    assert result.changed_cells == [{'row': 0, 'col': 1, 'character': '', 'feedback': 'UNSET'}]


def test_backspace_on_empty_row_is_ignored(engine):
    result = engine.backspace()

    assert result.ignored
    assert engine.cursor.as_tuple() == (0, -1)


def test_submit_incomplete_row_is_ignored(engine):
    type_word(engine, "CRAN")
    result = engine.submit()

    assert result.ignored
    assert engine.cursor.as_tuple() == (0, 3)
    assert row_feedback(engine, 0) == [Feedback.UNSET] * WORD_LENGTH


def test_submit_unknown_word_is_rejected_and_row_stays_editable(engine):
    result = play(engine, "ZZZZZ")

    assert result.notice is Notice.REJECTED_WORD
    assert result.reason == REASON_NOT_IN_WORD_LIST
    assert not result.ignored
    assert engine.status is GameStatus.ACTIVE
    assert engine.cursor.as_tuple() == (0, WORD_LENGTH - 1)
    assert row_feedback(engine, 0) == [Feedback.UNSET] * WORD_LENGTH

    engine.backspace()
    assert engine.cursor.as_tuple() == (0, WORD_LENGTH - 2)


def test_slate_then_crane_wins_in_two(engine):
    first = play(engine, "SLATE")

    assert first.notice is None
    assert row_feedback(engine, 0) == [A, A, C, A, C]
    assert [cell['feedback'] for cell in first.changed_cells] == [
        'ABSENT', 'ABSENT', 'CORRECT_POSITION', 'ABSENT', 'CORRECT_POSITION'
    ]
    assert engine.cursor.as_tuple() == (1, -1)

    second = play(engine, "crane")

    assert second.notice is Notice.WON
    assert engine.status is GameStatus.WON
    assert row_feedback(engine, 1) == [C] * WORD_LENGTH
    assert engine.attempts_used == 2
    assert second.snapshot.answer == "CRANE"


def test_exact_guess_on_first_row_wins(engine):
    result = play(engine, "CRANE")

    assert result.notice is Notice.WON
    assert engine.attempts_used == 1


def test_submitted_rows_are_frozen(engine):
    play(engine, "SLATE")
    type_word(engine, "TR")
    engine.backspace()
    engine.backspace()
    engine.backspace()

    assert engine.grid.row_word(0) == "SLATE"
    assert row_feedback(engine, 0) == [A, A, C, A, C]
    assert engine.cursor.as_tuple() == (1, -1)


def test_rows_below_active_row_stay_blank(engine):
    play(engine, "SLATE")
    type_word(engine, "TRA")

    for row in range(2, MAX_ATTEMPTS):
        assert all(cell.is_blank for cell in engine.grid.row(row))


def test_last_row_miss_loses_and_reveals_secret(engine):
    for guess in LOSING_GUESSES[:-1]:
        assert play(engine, guess).notice is None

    assert engine.cursor.row == MAX_ATTEMPTS - 1
    result = play(engine, LOSING_GUESSES[-1])

    assert result.notice is Notice.LOST
    assert result.secret_word == "CRANE"
    assert engine.status is GameStatus.LOST
    assert engine.attempts_used == MAX_ATTEMPTS
    assert result.snapshot.answer == "CRANE"


def test_answer_hidden_while_active(engine):
    play(engine, "SLATE")
    assert engine.snapshot().answer is None


@pytest.mark.parametrize("event", [
    InputEvent.type_letter("A"), InputEvent.backspace(), InputEvent.submit()
])
def test_events_ignored_after_game_over(engine, event):
    play(engine, "CRANE")
    before = engine.snapshot()

    result = engine.handle(event)

    assert result.ignored
    assert engine.snapshot() == before


def test_reset_from_active(engine, provider):
    play(engine, "SLATE")
    type_word(engine, "AB")

    result = engine.reset()

    assert_fresh(engine)
    assert engine.secret_word == "ALLOY"
    assert result.snapshot.status == GameStatus.ACTIVE.value
    assert provider.draws == 2


def test_reset_from_won(engine):
    play(engine, "CRANE")
    engine.reset()

    assert_fresh(engine)
    assert play(engine, "LOLLY").notice is None
    assert row_feedback(engine, 0) == [W, W, C, A, C]


def test_reset_from_lost(engine):
    for guess in LOSING_GUESSES:
        play(engine, guess)
    assert engine.status is GameStatus.LOST

    engine.reset()

    assert_fresh(engine)
    assert engine.snapshot().answer is None


def test_missing_corpus_uses_fallback_and_rejects_guesses(tmp_path):
    engine = GuessEngine(FileWordProvider(str(tmp_path / "missing.json")))

    assert engine.secret_word == FALLBACK_SECRET_WORD
    result = play(engine, FALLBACK_SECRET_WORD)

    assert result.notice is Notice.REJECTED_WORD
    assert result.reason == REASON_CORPUS_UNAVAILABLE
    assert engine.status is GameStatus.ACTIVE


def test_corpus_recovery_accepts_guesses_again(tmp_path):
    path = tmp_path / "words.txt"
    engine = GuessEngine(FileWordProvider(str(path)))
    type_word(engine, "HELLO")
    assert engine.submit().reason == REASON_CORPUS_UNAVAILABLE

    path.write_text("hello\ncrane\n", encoding="utf-8")

    assert engine.submit().notice is Notice.WON


def test_fallback_word_must_match_word_length():
    with pytest.raises(ValueError):
        GuessEngine(StubWordProvider(["CRANE"]), fallback_word="HI")


def test_snapshot_shape(engine):
    type_word(engine, "SL")
    snapshot = engine.snapshot()

    assert snapshot.status == "ACTIVE"
    assert snapshot.cursor_row == 0 and snapshot.cursor_col == 1
    assert snapshot.grid[0][0] == {'character': 'S', 'feedback': 'UNSET'}
    assert len(snapshot.grid) == MAX_ATTEMPTS
    assert all(len(row) == WORD_LENGTH for row in snapshot.grid)
