"""Entry point that announces the problem set."""

import sys

TITLE = "CSES Problem Set"


def main(argv: list[str] | None = None) -> int:
    """Write the name of the problem set to standard output."""
    sys.stdout.write(f"{TITLE}\n")
    return 0