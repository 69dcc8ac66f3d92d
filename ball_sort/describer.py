from typing import Sequence

from ball_sort.models import Color


def describe_move(source: int, destination: int, ball: Color, destination_before: Sequence[Color]) -> str:
    """
    Formats a move for display. Tube indices are 0-based on input and shown 1-based.
    `destination_before` is the destination tube as it was before the move.
    """
    if not destination_before:
        return f"Move {ball.display_name} from tube {source + 1} to empty tube {destination + 1}"
    return (
        f"Move {ball.display_name} from tube {source + 1} "
        f"onto {destination_before[0].display_name} in tube {destination + 1}"
    )
