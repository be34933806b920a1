"""Gray Code: list all bit strings of length n, neighbours differing in one bit."""

import sys

from cses.io import join_values, read_int


def solve(n: int) -> list[str]:
    """Return the 2**n strings of a Gray code, least significant bit first."""
    if n < 0:
        raise ValueError("n must not be negative")
    codes = []
    for i in range(1 << n):
        gray = i ^ (i >> 1)
        codes.append("".join("1" if gray >> j & 1 else "0" for j in range(n)))
    return codes


def main(argv: list[str] | None = None) -> int:
    """Read n and write the code, one string per line."""
    sys.stdout.write(join_values(solve(read_int()), "\n"))
    return 0