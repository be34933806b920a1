"""Creating Strings: list every distinct arrangement of a string's characters."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

from cses.io import join_values, read_line


def _permutations(chars: list[str]) -> Iterator[str]:
    """Yield the distinct permutations of chars in lexicographic order."""
    chars = sorted(chars)
    while True:
        yield "".join(chars)
        pivot = next(
            (i for i in reversed(range(len(chars) - 1)) if chars[i] < chars[i + 1]),
            None,
        )
        if pivot is None:
            return
        swap = next(j for j in reversed(range(pivot + 1, len(chars))) if chars[pivot] < chars[j])
        chars[pivot], chars[swap] = chars[swap], chars[pivot]
        chars[pivot + 1:] = reversed(chars[pivot + 1:])


def solve(text: str) -> list[str]:
    """Return the distinct arrangements of text's characters, sorted."""
    if not text:
        raise ValueError("text must not be empty")
    return list(_permutations(list(text)))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a string, print the count of arrangements and then each one."""
    strings = solve(read_line())
    print(len(strings))
    sys.stdout.write(join_values(strings, "\n"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())