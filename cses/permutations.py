"""Permutations: order 1..n so that no neighbours differ by one."""

import sys

from cses.io import read_int

NO_SOLUTION = "NO SOLUTION"


def solve(n: int) -> str:
    """Return a beautiful permutation of 1..n as a space-separated line.

    Returns "NO SOLUTION" for n of 2 or 3; raises ValueError for n below 1.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return "1"
    if n in (2, 3):
        return NO_SOLUTION
    order = [*range(2, n + 1, 2), *range(1, n + 1, 2)]
    return " ".join(map(str, order))


def main(argv: list[str] | None = None) -> int:
    """Read n and write the permutation."""
    n = read_int()
    sys.stdout.write(solve(n) + "\n")
    return 0