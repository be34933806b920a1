"""Palindrome Reorder: rearrange upper-case letters into a palindrome."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from string import ascii_uppercase

from cses.io import read_line

NO_SOLUTION = "NO SOLUTION"


def solve(text: str) -> str | None:
    """Return a palindrome made of text's letters, or None if there is none.

    Letters are placed in alphabetical order from the outside in.
    """
    counts = Counter(text)
    stray = set(counts) - set(ascii_uppercase)
    if stray:
        raise ValueError(f"only letters A-Z are allowed, got {sorted(stray)!r}")
    odd = [letter for letter in ascii_uppercase if counts[letter] % 2 == 1]
    if len(odd) > 1:
        return None
    front = "".join(letter * (counts[letter] // 2) for letter in ascii_uppercase)
    middle = odd[0] if odd else ""
    return front + middle + front[::-1]


def main(argv: Sequence[str] | None = None) -> int:
    """Read a string and print a palindrome of it, or NO SOLUTION."""
    result = solve(read_line())
    print(NO_SOLUTION if result is None else result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())