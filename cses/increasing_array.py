"""Increasing Array: the fewest increments that make an array non-decreasing."""

import sys
from collections.abc import Iterable

from cses.io import read_int, read_ints


def solve(values: Iterable[int]) -> int:
    """Return the total of increments needed so no value is below an earlier one."""
    numbers = list(values)
    if not numbers:
        raise ValueError("values must not be empty")
    highest = numbers[0]
    moves = 0
    for value in numbers:
        if value < highest:
            moves += highest - value
        else:
            highest = value
    return moves


def main(argv: list[str] | None = None) -> int:
    """Read the array size and the array, then write the number of moves."""
    read_int()
    sys.stdout.write(f"{solve(read_ints())}\n")
    return 0