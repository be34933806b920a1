"""Tower of Hanoi: the moves that carry a stack of discs from tower 1 to tower 3."""

import sys
from collections.abc import Iterator

from cses.io import read_int


def _moves(n: int, source: int, target: int) -> Iterator[tuple[int, int]]:
    if n == 1:
        yield source, target
        return
    spare = 6 - (source + target)
    yield from _moves(n - 1, source, spare)
    yield source, target
    yield from _moves(n - 1, spare, target)


def solve(n: int) -> list[tuple[int, int]]:
    """Return the (from, to) moves that transfer n discs from tower 1 to tower 3."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return list(_moves(n, 1, 3))


def main(argv: list[str] | None = None) -> int:
    """Read n, write the number of moves and then each move."""
    moves = solve(read_int())
    lines = [str(len(moves))]
    lines.extend(f"{source} {target}" for source, target in moves)
    sys.stdout.write("\n".join(lines) + "\n")
    return 0