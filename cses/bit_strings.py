"""Bit Strings: count bit strings of length n modulo 10^9 + 7."""

import sys

from cses.io import read_int

MODULO = 1_000_000_007


def solve(n: int) -> int:
    """Return 2**n modulo 10^9 + 7."""
    if n < 0:
        raise ValueError("n must not be negative")
    return pow(2, n, MODULO)


def main(argv: list[str] | None = None) -> int:
    """Read n and write the number of bit strings of that length."""
    length = read_int()
    sys.stdout.write(f"{solve(length)}\n")
    return 0