"""Two Knights: ways to place two non-attacking knights on k x k boards."""

import sys

from cses.io import join_values, read_int


def solve(n: int) -> list[int]:
    """Return the count of non-attacking knight pairs for every board size 1..n."""
    return [k * k * (k * k - 1) // 2 - 4 * (k - 1) * (k - 2) for k in range(1, n + 1)]


def main(argv: list[str] | None = None) -> int:
    """Read n and write one count per line."""
    sys.stdout.write(join_values(solve(read_int()), "\n"))
    return 0