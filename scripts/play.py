import argparse
import logging

from ball_sort.engine import GameSession
from ball_sort.io import read_puzzle
from ball_sort.validator import validate

HELP = "Commands: '<from> <to>' (1-based tubes), u = undo, r = redo, reset, q = quit"


def main() -> None:
    parser = argparse.ArgumentParser(description="Play a ball sort puzzle in the terminal.")
    parser.add_argument("puzzle_path", help="Path to a puzzle .yaml or .txt file")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    puzzle = read_puzzle(args.puzzle_path)
    validation = validate(puzzle.tubes, puzzle.capacity)
    if not validation.valid:
        print("Puzzle is invalid:")
        for error in validation.errors:
            print(f"  - {error}")
        return

    session = GameSession.from_puzzle(puzzle)
    print(HELP)

    while True:
        print(f"\nMoves: {session.move_count}")
        print(session.board.to_string())
        if session.is_complete:
            print(f"Puzzle complete in {session.move_count} moves!")

        try:
            command = input("> ").strip().lower()
        except EOFError:
            break

        if command in ("q", "quit"):
            break
        if command == "u":
            if not session.can_undo:
                print("Nothing to undo")
            session.undo()
        elif command == "r":
            if not session.can_redo:
                print("Nothing to redo")
            session.redo()
        elif command == "reset":
            session.reset()
        else:
            parts = command.split()
            if len(parts) != 2 or not all(p.isdigit() for p in parts):
                print(HELP)
                continue
            source, destination = (int(p) - 1 for p in parts)
            outcome = session.apply_move(source, destination)
            if not outcome.accepted:
                print("Invalid move")


if __name__ == "__main__":
    main()
