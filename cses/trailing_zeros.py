"""Trailing Zeros: the number of trailing zeros of n factorial."""

import sys

from cses.io import read_int


def solve(n: int) -> int:
    """Return how many zeros n! ends with."""
    if n < 0:
        raise ValueError("n must not be negative")
    zeros = 0
    power = 5
    while power <= n:
        zeros += n // power
        power *= 5
    return zeros


def main(argv: list[str] | None = None) -> int:
    """Read n and write the trailing zeros of n!."""
    n = read_int()
    sys.stdout.write(f"{solve(n)}\n")
    return 0