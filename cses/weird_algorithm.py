"""Weird Algorithm: the Collatz sequence from n down to 1."""

import sys
from collections.abc import Iterator

from cses.io import join_values, read_int

LOWER_BOUND = 1
UPPER_BOUND = 1_000_000


def _sequence(n: int) -> Iterator[int]:
    while True:
        yield n
        if n == 1:
            return
        n = n // 2 if n % 2 == 0 else 3 * n + 1


def solve(n: int) -> list[int]:
    """Return the values taken from n until 1, halving evens and mapping odds to 3n+1.

    Raises ValueError unless 1 <= n <= 10^6.
    """
    if not LOWER_BOUND <= n <= UPPER_BOUND:
        raise ValueError(f"n = {n}: n should be 1 <= n <= 1e6")
    return list(_sequence(n))


def main(argv: list[str] | None = None) -> int:
    """Read n and write the sequence on one line."""
    sequence = solve(read_int())
    sys.stdout.write(join_values(sequence, " ") + " \n")
    return 0