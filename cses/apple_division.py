"""Apple Division: split apples into two groups with minimal weight difference."""

import sys
from collections.abc import Iterable

from cses.io import read_int, read_ints


def solve(apples: Iterable[int]) -> int:
    """Return the smallest possible difference between two groups' total weights."""
    weights = list(apples)
    total = sum(weights)
    subset_sums = [0]
    for weight in weights:
        subset_sums += [s + weight for s in subset_sums]
    return min(abs(total - 2 * s) for s in subset_sums)


def main(argv: list[str] | None = None) -> int:
    """Read the number of apples and their weights, write the minimal difference."""
    n = read_int()
    apples = read_ints()
    if len(apples) < n:
        raise ValueError(f"expected {n} weights, got {len(apples)}")
    sys.stdout.write(f"{solve(apples[:n])}\n")
    return 0