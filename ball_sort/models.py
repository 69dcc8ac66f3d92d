from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Sequence, Tuple

BALL_SEPARATOR = ","
TUBE_SEPARATOR = "|"
EMPTY_TUBE_MARK = "-"


class Color(str, Enum):
    LIGHT_BLUE = "LB"
    DARK_BLUE = "DB"
    LIGHT_GREEN = "LG"
    DARK_GREEN = "DG"
    PINK = "PK"
    RED = "RD"
    ORANGE = "OR"
    PURPLE = "PU"
    GRAY = "GY"

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def hex(self) -> str:
        mapping = {
            Color.LIGHT_BLUE: "#87CEEB",
            Color.DARK_BLUE: "#0000CD",
            Color.LIGHT_GREEN: "#90EE90",
            Color.DARK_GREEN: "#006400",
            Color.PINK: "#FFB6C1",
            Color.RED: "#FF0000",
            Color.ORANGE: "#FFA500",
            Color.PURPLE: "#800080",
            Color.GRAY: "#808080",
        }
        return mapping[self]

    @classmethod
    def from_code(cls, code: "str | Color") -> "Color":
        if isinstance(code, Color):
            return code
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"Unknown color code: '{code}'") from None

    @classmethod
    def is_known(cls, code: object) -> bool:
        if isinstance(code, Color):
            return True
        return code in cls._value2member_map_

    def __str__(self) -> str:
        return self.value


# Index 0 is the top of the tube.
Tube = Tuple[Color, ...]


class EmptyTubeError(IndexError):
    """Raised when the top of an empty tube is requested."""


def is_tube_full(tube: Sequence[Color], capacity: int) -> bool:
    return len(tube) >= capacity


def top_of(tube: Sequence[Color]) -> Color:
    if not tube:
        raise EmptyTubeError("Cannot take the top of an empty tube")
    return tube[0]


def is_tube_complete(tube: Sequence[Color], capacity: int) -> bool:
    """
    A tube is complete when it is filled to capacity with a single color.
    Partially filled tubes are never complete, even when monochrome.
    """
    if len(tube) != capacity or capacity <= 0:
        return False
    first = tube[0]
    return all(ball == first for ball in tube)


@dataclass(frozen=True)
class Board:
    tubes: Tuple[Tube, ...]

    def __post_init__(self) -> None:
        # Accept lists and raw codes but always store tuples of Color
        tubes = tuple(tuple(Color.from_code(ball) for ball in tube) for tube in self.tubes)
        object.__setattr__(self, "tubes", tubes)

    def __len__(self) -> int:
        return len(self.tubes)

    def serialize(self) -> str:
        return TUBE_SEPARATOR.join(BALL_SEPARATOR.join(ball.value for ball in tube) for tube in self.tubes)

    def color_counts(self) -> Counter[Color]:
        return Counter(ball for tube in self.tubes for ball in tube)

    def with_tubes(self, replacements: dict[int, Tube]) -> "Board":
        tubes = list(self.tubes)
        for index, tube in replacements.items():
            tubes[index] = tube
        return Board(tuple(tubes))

    @classmethod
    def from_codes(cls, tubes: Iterable[Iterable["str | Color"]]) -> "Board":
        return cls(tuple(tuple(tube) for tube in tubes))

    def to_codes(self) -> List[List[str]]:
        return [[ball.value for ball in tube] for tube in self.tubes]

    def to_string(self) -> str:
        lines = []
        for i, tube in enumerate(self.tubes, 1):
            balls = " ".join(ball.value for ball in tube) if tube else EMPTY_TUBE_MARK
            lines.append(f"T{i}: {balls}")
        return "\n".join(lines) + "\n"

    @classmethod
    def from_string(cls, text: str) -> "Board":
        return cls.from_codes(parse_tube_lines(text))


def parse_tube_lines(text: str) -> List[List[str]]:
    """
    Parses the text rendering produced by Board.to_string into raw color codes.
    Codes are not checked against the known colors here.
    """
    tubes: List[List[str]] = []
    for line_num, line in enumerate(text.strip().splitlines(), 1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        label, sep, content = line.partition(":")
        if not sep or not label.strip().startswith("T"):
            raise ValueError(f"Invalid tube line {line_num}: '{line}'")
        tokens = content.split()
        if tokens == [EMPTY_TUBE_MARK]:
            tokens = []
        tubes.append(tokens)
    return tubes


def is_board_solved(board: Board, capacity: int) -> bool:
    return all(len(tube) == 0 or is_tube_complete(tube, capacity) for tube in board.tubes)


@dataclass
class Puzzle:
    """
    A puzzle instance as read from configuration. Tubes hold raw color codes
    so that unknown codes can be reported by the validator instead of failing
    at load time.
    """

    name: str
    capacity: int
    tubes: List[List[str]] = field(default_factory=list)

    def to_board(self) -> Board:
        return Board.from_codes(self.tubes)

    @classmethod
    def from_board(cls, name: str, board: Board, capacity: int) -> "Puzzle":
        return cls(name=name, capacity=capacity, tubes=board.to_codes())
