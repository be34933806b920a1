"""Chessboard and Queens: count placements of eight queens on free squares."""

import sys
from collections.abc import Sequence

from cses.io import BOARD_SIZE, read_board


def solve(board: Sequence[Sequence[bool]]) -> int:
    """Count ways to place eight non-attacking queens on the free (True) squares.

    board[row][column] is True where a queen may stand.
    """
    if len(board) < BOARD_SIZE or any(len(row) < BOARD_SIZE for row in board[:BOARD_SIZE]):
        raise ValueError(f"board must be at least {BOARD_SIZE}x{BOARD_SIZE}")

    rows: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(column: int) -> int:
        if column == BOARD_SIZE:
            return 1
        count = 0
        for row in range(BOARD_SIZE):
            if not board[row][column]:
                continue
            if row in rows or row - column in diagonals or row + column in anti_diagonals:
                continue
            rows.add(row)
            diagonals.add(row - column)
            anti_diagonals.add(row + column)
            count += place(column + 1)
            rows.remove(row)
            diagonals.remove(row - column)
            anti_diagonals.remove(row + column)
        return count

    return place(0)


def main(argv: list[str] | None = None) -> int:
    """Read the board and report the number of placements on standard error."""
    board = read_board()
    sys.stderr.write(f"{solve(board)}\n")
    return 0