"""Two Sets: split 1..n into two sets of equal sum."""

import sys

from cses.io import read_int


def solve(n: int) -> tuple[list[int], list[int]] | None:
    """Return two lists partitioning 1..n with equal sums, or None if impossible.

    Numbers are taken greedily from n downwards into the first list.
    """
    total = n * (n + 1) // 2
    if total % 2:
        return None
    remaining = total // 2
    first: list[int] = []
    second: list[int] = []
    for value in range(n, 0, -1):
        if value <= remaining:
            remaining -= value
            first.append(value)
        else:
            second.append(value)
    return first, second


def _format(result: tuple[list[int], list[int]] | None) -> str:
    if result is None:
        return "NO\n"
    first, second = result
    parts = ["YES\n", f"{len(first)}\n"]
    parts.extend(f"{value} " for value in first)
    parts.append(f"\n{len(second)}\n")
    parts.extend(f"{value} " for value in second)
    parts.append("\n")
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Read n and write YES with both sets, or NO."""
    sys.stdout.write(_format(solve(read_int())) + "\n")
    return 0