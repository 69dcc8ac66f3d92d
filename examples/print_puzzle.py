# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from ball_sort.models import Board, Color, is_board_solved


def main() -> None:
    # A small capacity-4 puzzle with two empty tubes
    board = Board.from_codes(
        [
            ["RD", "PK", "LG", "PK"],
            ["LG", "RD", "PK", "LG"],
            ["DB", "DB", "RD", "RD"],
            ["DB", "PK", "LG", "DB"],
            [],
            [],
        ]
    )

    print("Example ball sort puzzle (top of each tube first):")
    print(board.to_string())
    print(f"Solved: {is_board_solved(board, 4)}")

    print("\nColors:")
    for color in Color:
        print(f"  {color.value}  {color.display_name:<12} {color.hex}")


if __name__ == "__main__":
    main()
