from pathlib import Path
from typing import Any

import yaml

from ball_sort.models import EMPTY_TUBE_MARK, Puzzle, parse_tube_lines

TEXT_SUFFIXES = (".txt",)


def read_puzzle(file_path: str | Path) -> Puzzle:
    path = Path(file_path)
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    if path.suffix in TEXT_SUFFIXES:
        return puzzle_from_text(content, default_name=path.stem)
    return puzzle_from_dict(yaml.safe_load(content), default_name=path.stem)


def write_puzzle(puzzle: Puzzle, file_path: str | Path) -> None:
    path = Path(file_path)
    if path.suffix in TEXT_SUFFIXES:
        content = puzzle_to_text(puzzle)
    else:
        content = yaml.safe_dump(puzzle_to_dict(puzzle), sort_keys=False, default_flow_style=None)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


def puzzle_from_dict(data: Any, default_name: str = "puzzle") -> Puzzle:
    if not isinstance(data, dict):
        raise ValueError("Puzzle file must contain a mapping")
    if "capacity" not in data:
        raise ValueError("Puzzle must have a 'capacity' field")
    if "tubes" not in data or not isinstance(data["tubes"], list):
        raise ValueError("Puzzle must have a 'tubes' list")

    capacity = data["capacity"]
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise ValueError(f"Puzzle capacity must be an integer, got {capacity!r}")

    tubes = []
    for i, tube in enumerate(data["tubes"], 1):
        if tube is None:
            tube = []
        if not isinstance(tube, list):
            raise ValueError(f"Tube {i} must be a list of color codes")
        # Unknown codes are kept as-is and reported by the validator
        tubes.append([str(code) for code in tube])

    return Puzzle(name=str(data.get("name", default_name)), capacity=capacity, tubes=tubes)


def puzzle_to_dict(puzzle: Puzzle) -> dict[str, Any]:
    return {
        "name": puzzle.name,
        "capacity": puzzle.capacity,
        "tubes": [list(tube) for tube in puzzle.tubes],
    }


def puzzle_from_text(text: str, default_name: str = "puzzle") -> Puzzle:
    name = default_name
    capacity: int | None = None
    tube_lines = []
    for line in text.strip().splitlines():
        key, sep, value = line.partition(":")
        key = key.strip().lower()
        if sep and key == "name":
            name = value.strip()
        elif sep and key == "capacity":
            try:
                capacity = int(value.strip())
            except ValueError:
                raise ValueError(f"Invalid capacity: '{value.strip()}'") from None
        else:
            tube_lines.append(line)

    if capacity is None:
        raise ValueError("Puzzle text must have a 'capacity:' line")
    return Puzzle(name=name, capacity=capacity, tubes=parse_tube_lines("\n".join(tube_lines)))


def puzzle_to_text(puzzle: Puzzle) -> str:
    lines = [f"name: {puzzle.name}", f"capacity: {puzzle.capacity}"]
    for i, tube in enumerate(puzzle.tubes, 1):
        lines.append(f"T{i}: {' '.join(tube) if tube else EMPTY_TUBE_MARK}")
    return "\n".join(lines) + "\n"
