# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import argparse
import logging
from datetime import datetime

from ball_sort.io import read_puzzle
from ball_sort.solver import SolverStatus, create_solver
from ball_sort.validator import validate


def main() -> None:
    parser = argparse.ArgumentParser(description="Validate and solve a ball sort puzzle.")
    parser.add_argument("puzzle_path", help="Path to a puzzle .yaml or .txt file")
    parser.add_argument("--config", default=None, help="Solver config YAML (default: config/solver.yaml)")
    parser.add_argument("--max-states", type=int, default=None, help="Override the explored-state budget")
    parser.add_argument("--time-limit-ms", type=int, default=None, help="Override the time budget")
    parser.add_argument("--no-pruning", action="store_true", help="Search every legal move")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log search progress")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    puzzle = read_puzzle(args.puzzle_path)
    print(f"Puzzle '{puzzle.name}' ({len(puzzle.tubes)} tubes, capacity {puzzle.capacity})")

    validation = validate(puzzle.tubes, puzzle.capacity)
    if not validation.valid:
        print("\nPuzzle is invalid:")
        for error in validation.errors:
            print(f"  - {error}")
        return

    board = puzzle.to_board()
    print(board.to_string())

    overrides = {}
    if args.no_pruning:
        overrides["pruning"] = False
    solver = create_solver(args.config, **overrides)

    print("Solving...")
    result = solver.solve(
        board,
        puzzle.capacity,
        max_states_explored=args.max_states,
        time_limit_ms=args.time_limit_ms,
    )

    print(f"\nStatus: {result.status.value} ({result.reason})")
    if result.status == SolverStatus.SOLVED:
        print(f"Solved in {result.move_count} moves:")
        for i, move in enumerate(result.moves, 1):
            print(f"  {i:>3}. {move}")

    stats = result.stats
    if stats is None:
        return

    print("\n--- Search Statistics ---")
    print(f"{'Started':<22} | {datetime.fromtimestamp(stats.start_time):%H:%M:%S}")
    if stats.end_time is not None:
        print(f"{'Finished':<22} | {datetime.fromtimestamp(stats.end_time):%H:%M:%S}")
    print(f"{'States explored':<22} | {stats.total_states_explored}")
    print(f"{'Visited boards':<22} | {result.visited_count}")
    print(f"{'Max queue size':<22} | {stats.max_queue_size}")
    print(f"{'Duration (s)':<22} | {stats.search_duration:.3f}")
    print(f"{'States / second':<22} | {stats.states_per_second:.0f}")

    if stats.queue_size_history:
        print("\n--- Queue Samples ---")
        print(f"{'Elapsed (s)':<12} | {'States/s':<10} | {'Queue':<10}")
        print("-" * 38)
        for sample in stats.queue_size_history:
            print(f"{sample.elapsed:<12.2f} | {sample.states_per_second:<10.0f} | {sample.queue_size:<10}")


if __name__ == "__main__":
    main()
