import logging
import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Deque, List, Tuple

import yaml

from ball_sort.models import Board, is_board_solved
from ball_sort.solver.definitions import generate_successors
from ball_sort.validator import validate

logger = logging.getLogger(__name__)

DEFAULT_MAX_STATES_EXPLORED = 25_000_000
DEFAULT_TIME_LIMIT_MS = 600_000
DEFAULT_SAMPLE_INTERVAL = 10_000
DEFAULT_HISTORY_SIZE = 1_000

# (source, destination, description)
Step = Tuple[int, int, str]


class SolverStatus(Enum):
    SOLVED = "SOLVED"
    NO_SOLUTION = "NO_SOLUTION"
    TIME_LIMIT = "TIME_LIMIT"
    STATE_LIMIT = "STATE_LIMIT"
    INVALID = "INVALID"


REASONS = {
    SolverStatus.SOLVED: "Solution found",
    SolverStatus.NO_SOLUTION: "No solution found",
    SolverStatus.TIME_LIMIT: "Time limit exceeded",
    SolverStatus.STATE_LIMIT: "Exceeded maximum moves",
    SolverStatus.INVALID: "Invalid puzzle",
}


@dataclass(frozen=True)
class QueueSample:
    elapsed: float
    states_per_second: float
    queue_size: int


@dataclass
class SearchStats:
    """Running statistics of a single search. Returned for every outcome except invalid input."""

    start_time: float
    end_time: float | None = None
    total_states_explored: int = 0
    max_queue_size: int = 0
    search_duration: float = 0.0
    states_per_second: float = 0.0
    queue_size_history: Deque[QueueSample] = field(default_factory=deque)
    reason: str = ""


@dataclass
class SolveResult:
    solvable: bool
    status: SolverStatus
    reason: str
    moves: List[str] = field(default_factory=list)
    steps: List[Tuple[int, int]] = field(default_factory=list)
    states_explored: int = 0
    visited_count: int = 0
    stats: SearchStats | None = None
    errors: List[str] = field(default_factory=list)

    @property
    def move_count(self) -> int:
        return len(self.moves)


class Solver:
    """
    Breadth-first search over the move graph.

    All moves cost one, and the frontier is a FIFO queue, so the first solved
    board dequeued is reached by a shortest move sequence among the moves the
    successor generator admits.

    With pruning on that is not always a shortest sequence overall. The
    capacity-3 board LG DB | LB LB | - | LB LG DB | LG DB needs 6 moves, but
    the empty-tube rule makes the search return a 7 move solution. Use
    pruning=False for the unpruned search.
    """

    def __init__(
        self,
        max_states_explored: int = DEFAULT_MAX_STATES_EXPLORED,
        time_limit_ms: int = DEFAULT_TIME_LIMIT_MS,
        sample_interval: int = DEFAULT_SAMPLE_INTERVAL,
        history_size: int = DEFAULT_HISTORY_SIZE,
        pruning: bool = True,
    ):
        if sample_interval <= 0:
            raise ValueError(f"sample_interval must be positive, got {sample_interval}")
        self.max_states_explored = max_states_explored
        self.time_limit_ms = time_limit_ms
        self.sample_interval = sample_interval
        self.history_size = history_size
        self.pruning = pruning

    def solve(
        self,
        board: Board,
        capacity: int,
        max_states_explored: int | None = None,
        time_limit_ms: int | None = None,
    ) -> SolveResult:
        max_states = self.max_states_explored if max_states_explored is None else max_states_explored
        time_limit = self.time_limit_ms if time_limit_ms is None else time_limit_ms

        validation = validate(board.tubes, capacity)
        if not validation.valid:
            logger.warning("Refusing to solve invalid puzzle: %s", "; ".join(validation.errors))
            return SolveResult(
                solvable=False,
                status=SolverStatus.INVALID,
                reason=REASONS[SolverStatus.INVALID],
                errors=validation.errors,
            )

        stats = SearchStats(start_time=time.time(), queue_size_history=deque(maxlen=self.history_size))
        started = time.perf_counter()
        time_limit_s = time_limit / 1000.0

        queue: Deque[Tuple[Board, List[Step]]] = deque([(board, [])])
        visited = {board.serialize()}
        stats.max_queue_size = 1
        explored = 0

        status = SolverStatus.NO_SOLUTION
        path: List[Step] = []

        while queue:
            current, current_path = queue.popleft()
            explored += 1

            if is_board_solved(current, capacity):
                status = SolverStatus.SOLVED
                path = current_path
                break

            elapsed = time.perf_counter() - started
            if elapsed > time_limit_s:
                status = SolverStatus.TIME_LIMIT
                break
            if explored >= max_states:
                status = SolverStatus.STATE_LIMIT
                break

            for successor in generate_successors(current, capacity, pruning=self.pruning):
                key = successor.board.serialize()
                if key in visited:
                    continue
                visited.add(key)
                step = (successor.source, successor.destination, successor.description)
                queue.append((successor.board, current_path + [step]))

            if len(queue) > stats.max_queue_size:
                stats.max_queue_size = len(queue)

            if explored % self.sample_interval == 0:
                self._record_sample(stats, elapsed, explored, len(queue))

        self._finish(stats, started, explored, REASONS[status])
        logger.info(
            "Search finished: %s after %d states (%d visited) in %.2fs",
            stats.reason,
            explored,
            len(visited),
            stats.search_duration,
        )

        return SolveResult(
            solvable=status == SolverStatus.SOLVED,
            status=status,
            reason=REASONS[status],
            moves=[description for _, _, description in path],
            steps=[(source, destination) for source, destination, _ in path],
            states_explored=explored,
            visited_count=len(visited),
            stats=stats,
        )

    def _record_sample(self, stats: SearchStats, elapsed: float, explored: int, queue_size: int) -> None:
        rate = explored / elapsed if elapsed > 0 else 0.0
        stats.queue_size_history.append(QueueSample(elapsed=elapsed, states_per_second=rate, queue_size=queue_size))
        logger.info("Explored %d states, queue %d, %.0f states/s", explored, queue_size, rate)

    def _finish(self, stats: SearchStats, started: float, explored: int, reason: str) -> None:
        stats.end_time = time.time()
        stats.search_duration = time.perf_counter() - started
        stats.total_states_explored = explored
        stats.states_per_second = explored / stats.search_duration if stats.search_duration > 0 else 0.0
        stats.reason = reason


def solve(
    board: Board,
    capacity: int,
    max_states_explored: int = DEFAULT_MAX_STATES_EXPLORED,
    time_limit_ms: int = DEFAULT_TIME_LIMIT_MS,
) -> SolveResult:
    return Solver().solve(board, capacity, max_states_explored=max_states_explored, time_limit_ms=time_limit_ms)


def create_solver(config_file: str | Path | None = None, **overrides: Any) -> Solver:
    """
    Create a Solver configured from a YAML file.

    Args:
        config_file: Path to the YAML solver config. If None, uses config/solver.yaml
        **overrides: Values taking precedence over the file (e.g. pruning=False)

    Returns:
        A configured Solver instance
    """
    if config_file is None:
        # Default to config/solver.yaml relative to the project root
        project_root = Path(__file__).parent.parent.parent
        config_file = project_root / "config" / "solver.yaml"
    else:
        config_file = Path(config_file)

    with open(config_file) as f:
        config_data = yaml.safe_load(f) or {}

    if not isinstance(config_data, dict):
        raise ValueError(f"Solver config must be a mapping, got {type(config_data).__name__}")

    settings = {
        "max_states_explored": config_data.get("max_states_explored", DEFAULT_MAX_STATES_EXPLORED),
        "time_limit_ms": config_data.get("time_limit_ms", DEFAULT_TIME_LIMIT_MS),
        "sample_interval": config_data.get("sample_interval", DEFAULT_SAMPLE_INTERVAL),
        "history_size": config_data.get("history_size", DEFAULT_HISTORY_SIZE),
        "pruning": config_data.get("pruning", True),
    }
    unknown = set(config_data) - set(settings)
    if unknown:
        raise ValueError(f"Unknown solver config keys: {', '.join(sorted(unknown))}")

    settings.update(overrides)
    return Solver(**settings)
