import pytest

from ball_sort.engine import GameSession, MoveRecord, apply_move, is_legal_move
from ball_sort.models import Board, Color, EmptyTubeError, Puzzle

RD = Color.RED
PK = Color.PINK


def create_board() -> Board:
    # T1: RD PK      (top RD)
    # T2: PK         (top PK, room)
    # T3: -          (empty)
    # T4: RD PK PK   (full, top RD)
    return Board(((RD, PK), (PK,), (), (RD, PK, PK)))


def test_legal_move_rules() -> None:
    board = create_board()

    # Different top color
    assert not is_legal_move(board, 0, 1, 3)
    # Empty destination with room
    assert is_legal_move(board, 0, 2, 3)
    # Full destination, even with matching top color
    assert not is_legal_move(board, 0, 3, 3)
    # Same tube
    assert not is_legal_move(board, 0, 0, 3)
    # Empty source
    assert not is_legal_move(board, 2, 0, 3)
    # Matching top color with room
    assert is_legal_move(board, 3, 0, 3)


def test_legal_move_out_of_range() -> None:
    board = create_board()
    assert not is_legal_move(board, 0, 9, 3)
    assert not is_legal_move(board, -1, 0, 3)


def test_apply_move_is_pure() -> None:
    board = create_board()
    new_board, ball = apply_move(board, 0, 2)

    assert ball == RD
    assert new_board.tubes == ((PK,), (PK,), (RD,), (RD, PK, PK))
    assert board == create_board()


def test_apply_move_from_empty_tube() -> None:
    with pytest.raises(EmptyTubeError):
        apply_move(create_board(), 2, 0)


def test_session_apply_and_completion() -> None:
    board = Board(((RD, PK), (PK,), (RD,)))
    session = GameSession(board, 2)
    assert not session.is_complete

    outcome = session.apply_move(0, 2)
    assert outcome.accepted
    assert outcome.move_count == 1
    assert not outcome.solved

    outcome = session.apply_move(0, 1)
    assert outcome.accepted
    assert outcome.move_count == 2
    assert outcome.solved
    assert session.is_complete
    assert session.board.tubes == ((), (PK, PK), (RD, RD))
    assert session.history == (MoveRecord(0, 2, RD), MoveRecord(0, 1, PK))


def test_completion_flag_follows_current_board() -> None:
    session = GameSession(Board(((RD,), (RD,), ())), 2)
    assert session.apply_move(0, 1).solved

    # Moving away from the solved board clears the flag again
    outcome = session.apply_move(1, 2)
    assert outcome.accepted
    assert not outcome.solved
    assert not session.is_complete

    session.undo()
    assert session.is_complete


def test_illegal_move_leaves_session_untouched() -> None:
    session = GameSession(create_board(), 3)
    session.apply_move(0, 2)
    session.undo()
    assert session.can_redo

    outcome = session.apply_move(0, 1)
    assert not outcome.accepted
    assert outcome.board == create_board()
    assert outcome.move_count == 0
    assert session.history == ()
    # Rejected moves do not clear the redo stack
    assert session.can_redo


def test_undo_restores_board() -> None:
    session = GameSession(create_board(), 3)
    session.apply_move(0, 2)
    board = session.undo()

    assert board == create_board()
    assert session.move_count == 0
    assert not session.can_undo
    assert session.can_redo


def test_undo_and_redo_noop_on_empty_stacks() -> None:
    session = GameSession(create_board(), 3)
    assert session.undo() == create_board()
    assert session.redo() == create_board()
    assert session.move_count == 0


def test_redo_reapplies_move() -> None:
    session = GameSession(create_board(), 3)
    after = session.apply_move(0, 2).board
    session.undo()

    assert session.redo() == after
    assert session.move_count == 1
    assert session.history == (MoveRecord(0, 2, RD),)


def test_redo_only_last_undo() -> None:
    session = GameSession(create_board(), 3)
    session.apply_move(0, 2)
    session.apply_move(3, 2)
    session.undo()
    session.undo()

    # Redo re-applies the most recently undone move, which clears the redo stack
    session.redo()
    assert session.move_count == 1
    assert not session.can_redo
    before = session.board
    assert session.redo() == before
    assert session.move_count == 1


def test_new_move_clears_redo() -> None:
    session = GameSession(create_board(), 3)
    session.apply_move(0, 2)
    session.undo()
    session.apply_move(3, 0)

    assert not session.can_redo
    board = session.board
    assert session.redo() == board


def test_reset() -> None:
    session = GameSession(create_board(), 3)
    session.apply_move(0, 2)
    session.apply_move(3, 2)
    session.undo()

    assert session.reset() == create_board()
    assert session.move_count == 0
    assert not session.can_undo
    assert not session.can_redo


def test_session_from_puzzle() -> None:
    puzzle = Puzzle(name="done", capacity=2, tubes=[["RD", "RD"], []])
    session = GameSession.from_puzzle(puzzle)
    assert session.capacity == 2
    assert session.is_complete
