"""Number Spiral: the value at a given row and column of the number spiral."""

import sys
from collections.abc import Iterable

from cses.io import join_values, read_int, read_pairs


def _spiral_value(row: int, column: int) -> int:
    if row < 1 or column < 1:
        raise ValueError("row and column must be positive")
    layer = max(row, column)
    diagonal = 1 + layer * (layer - 1)
    if layer % 2 == 0:
        return diagonal + row - column
    return diagonal + column - row


def solve(queries: Iterable[tuple[int, int]]) -> list[int]:
    """Return the spiral value for each (row, column) query."""
    return [_spiral_value(row, column) for row, column in queries]


def main(argv: list[str] | None = None) -> int:
    """Read the queries and write one value per line."""
    n = read_int()
    sys.stdout.write(join_values(solve(read_pairs(n)), "\n"))
    return 0