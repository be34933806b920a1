"""Missing Number: find the one number of 1..n that is absent."""

import sys
from collections.abc import Iterable

from cses.io import read_int, read_ints


def solve(n: int, numbers: Iterable[int]) -> int:
    """Return the number of 1..n missing from numbers."""
    missing = n * (n + 1) // 2 - sum(numbers)
    if missing < 0:
        raise ValueError("numbers add up to more than 1..n")
    return missing


def main(argv: list[str] | None = None) -> int:
    """Read n and the n-1 numbers, then write the missing one."""
    n = read_int()
    sys.stdout.write(f"{solve(n, read_ints())}\n")
    return 0