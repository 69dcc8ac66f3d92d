from dataclasses import dataclass
from typing import Iterator

from ball_sort.describer import describe_move
from ball_sort.engine import apply_move, is_legal_move
from ball_sort.models import Board, Color, Tube, is_tube_complete, is_tube_full


@dataclass(frozen=True)
class Successor:
    source: int
    destination: int
    ball: Color
    board: Board
    description: str


def is_frozen(tube: Tube, capacity: int) -> bool:
    """
    A complete tube is frozen for the remainder of a search: it is never
    chosen as a source or as a destination.
    """
    return is_tube_complete(tube, capacity)


def admits_empty_destination(board: Board, source: int, ball: Color, capacity: int) -> bool:
    """
    Moving into an empty tube is only admitted when no other tube could take
    the ball instead, i.e. no tube other than the source is non-empty, has room
    and already shows `ball` on top.
    """
    for index, tube in enumerate(board.tubes):
        if index == source or not tube:
            continue
        if len(tube) < capacity and tube[0] == ball:
            return False
    return True


def generate_successors(board: Board, capacity: int, pruning: bool = True) -> Iterator[Successor]:
    """
    Yields successor boards in a fixed order: ascending source index, then
    ascending destination index.

    With pruning enabled, complete tubes are frozen and moves into empty tubes
    are restricted by admits_empty_destination. Without pruning every legal move
    is yielded.
    """
    tubes = board.tubes
    for i, from_tube in enumerate(tubes):
        if not from_tube:
            continue
        if pruning and is_frozen(from_tube, capacity):
            continue

        ball = from_tube[0]
        for j, to_tube in enumerate(tubes):
            if j == i or is_tube_full(to_tube, capacity):
                continue
            if pruning and is_frozen(to_tube, capacity):
                continue
            if not is_legal_move(board, i, j, capacity):
                continue
            if pruning and not to_tube and not admits_empty_destination(board, i, ball, capacity):
                continue

            new_board, moved = apply_move(board, i, j)
            yield Successor(
                source=i,
                destination=j,
                ball=moved,
                board=new_board,
                description=describe_move(i, j, moved, to_tube),
            )
