import logging
from dataclasses import dataclass
from typing import List, Tuple

from ball_sort.models import Board, Color, Puzzle, is_board_solved, is_tube_full, top_of

logger = logging.getLogger(__name__)


def is_legal_move(board: Board, source: int, destination: int, capacity: int) -> bool:
    if source == destination:
        return False
    if not (0 <= source < len(board.tubes) and 0 <= destination < len(board.tubes)):
        return False

    from_tube = board.tubes[source]
    to_tube = board.tubes[destination]
    if not from_tube:
        return False
    if is_tube_full(to_tube, capacity):
        return False
    return not to_tube or to_tube[0] == from_tube[0]


def apply_move(board: Board, source: int, destination: int) -> Tuple[Board, Color]:
    """
    Moves the top ball of `source` onto `destination` and returns the new board
    together with the moved ball. The input board is left untouched.
    Legality is the caller's responsibility (see is_legal_move).
    """
    ball = top_of(board.tubes[source])
    new_board = board.with_tubes(
        {
            source: board.tubes[source][1:],
            destination: (ball,) + board.tubes[destination],
        }
    )
    return new_board, ball


@dataclass(frozen=True)
class MoveRecord:
    source: int
    destination: int
    ball: Color


@dataclass(frozen=True)
class MoveOutcome:
    accepted: bool
    board: Board
    move_count: int
    solved: bool


class GameSession:
    """
    A single interactive game: the live board plus linear undo/redo history.

    The session is the only owner of its history and redo stacks. Applying a new
    move clears the redo stack, so only the most recently undone move can be redone.
    """

    def __init__(self, board: Board, capacity: int):
        self.initial_board = board
        self.capacity = capacity
        self.board = board
        self.move_count = 0
        self.is_complete = is_board_solved(board, capacity)
        self._history: List[MoveRecord] = []
        self._redo: List[MoveRecord] = []

    @classmethod
    def from_puzzle(cls, puzzle: Puzzle) -> "GameSession":
        return cls(puzzle.to_board(), puzzle.capacity)

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def history(self) -> Tuple[MoveRecord, ...]:
        return tuple(self._history)

    def apply_move(self, source: int, destination: int) -> MoveOutcome:
        if not is_legal_move(self.board, source, destination, self.capacity):
            logger.debug("Rejected move %d -> %d", source, destination)
            return self._outcome(accepted=False)

        self.board, ball = apply_move(self.board, source, destination)
        self._history.append(MoveRecord(source, destination, ball))
        self._redo.clear()
        self.move_count += 1
        self._update_completion()
        return self._outcome(accepted=True)

    def undo(self) -> Board:
        if not self._history:
            return self.board

        record = self._history.pop()
        # Reverse: the ball sits on top of the destination tube
        self.board, _ = apply_move(self.board, record.destination, record.source)
        self.move_count -= 1
        self._redo.append(record)
        self._update_completion()
        return self.board

    def redo(self) -> Board:
        if not self._redo:
            return self.board

        record = self._redo.pop()
        self.apply_move(record.source, record.destination)
        return self.board

    def reset(self) -> Board:
        self.board = self.initial_board
        self.move_count = 0
        self._history.clear()
        self._redo.clear()
        self.is_complete = is_board_solved(self.board, self.capacity)
        return self.board

    def _update_completion(self) -> None:
        was_complete = self.is_complete
        self.is_complete = is_board_solved(self.board, self.capacity)
        if self.is_complete and not was_complete:
            logger.info("Puzzle complete after %d moves", self.move_count)

    def _outcome(self, accepted: bool) -> MoveOutcome:
        return MoveOutcome(
            accepted=accepted,
            board=self.board,
            move_count=self.move_count,
            solved=self.is_complete,
        )
