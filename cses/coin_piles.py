"""Coin Piles: decide whether two piles can both be emptied."""

import sys
from collections.abc import Iterable

from cses.io import join_values, read_int, read_pairs


def _can_empty(a: int, b: int) -> bool:
    return a <= 2 * b and b <= 2 * a and (a + b) % 3 == 0


def solve(piles: Iterable[tuple[int, int]]) -> list[str]:
    """Return "YES" or "NO" for each pair of pile sizes."""
    return ["YES" if _can_empty(a, b) else "NO" for a, b in piles]


def main(argv: list[str] | None = None) -> int:
    """Read the tests and write one answer per line."""
    n = read_int()
    sys.stdout.write(join_values(solve(read_pairs(n)), "\n"))
    return 0