from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List

from ball_sort.models import Color


@dataclass
class ValidationResult:
    valid: bool
    errors: List[str] = field(default_factory=list)
    color_counts: dict[Color, int] = field(default_factory=dict)


def validate(tubes: Iterable[Iterable["str | Color"]], capacity: int) -> ValidationResult:
    """
    Checks that a puzzle is well-formed and solvable in principle.

    Every check runs so that all violations are reported together:
    - capacity must be positive
    - no tube may hold more than `capacity` balls
    - every ball must be a known color code
    - every color present must appear exactly `capacity` times

    Accepts either Color members or raw color codes.
    """
    errors: List[str] = []
    counts: Counter[Color] = Counter()

    if capacity <= 0:
        errors.append(f"Tube capacity must be positive, got {capacity}")

    for tube_num, tube in enumerate(tubes, 1):
        balls = list(tube)
        if len(balls) > capacity:
            errors.append(f"Tube {tube_num} holds {len(balls)} balls, exceeding capacity {capacity}")

        for position, code in enumerate(balls, 1):
            if not Color.is_known(code):
                errors.append(f"Tube {tube_num} position {position}: unknown color code '{code}'")
                continue
            counts[Color.from_code(code)] += 1

    # Counter preserves first-appearance order
    for color, count in counts.items():
        if count != capacity:
            errors.append(f"Color {color.display_name} has {count} balls, expected {capacity}")

    return ValidationResult(valid=not errors, errors=errors, color_counts=dict(counts))
