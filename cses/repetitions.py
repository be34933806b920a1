"""Repetitions: the longest run of one repeated character."""

import sys
from itertools import groupby

from cses.io import read_line


def solve(text: str) -> int:
    """Return the length of the longest run of equal characters, at least 1."""
    return max((sum(1 for _ in run) for _, run in groupby(text)), default=1)


def main(argv: list[str] | None = None) -> int:
    """Read a string and write its longest repetition."""
    sys.stdout.write(f"{solve(read_line())}\n")
    return 0