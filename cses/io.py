"""Reading problem input from streams and files, and formatting output."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from os import PathLike
from typing import Any, TextIO

BOARD_SIZE = 8
FREE_SQUARE = "."


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdin if stream is None else stream


def _to_int(token: str, where: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"{where}: cannot parse {token!r} as an integer") from None


def read_line(stream: TextIO | None = None) -> str:
    """Read one line and return it without surrounding whitespace."""
    return _stream(stream).readline().strip()


def read_int(stream: TextIO | None = None) -> int:
    """Read one line holding a single integer."""
    return _to_int(read_line(stream), "read_int")


def parse_ints(text: str) -> list[int]:
    """Split text on whitespace and parse every token as an integer."""
    return [_to_int(token, "parse_ints") for token in text.split()]


def read_ints(stream: TextIO | None = None) -> list[int]:
    """Read one line of whitespace-separated integers."""
    return parse_ints(_stream(stream).readline())


def join_values(values: Iterable[Any], sep: str | None = None) -> str:
    """Join the string forms of values, separated by sep or run together."""
    return ("" if sep is None else sep).join(str(value) for value in values)


def read_pairs(n: int, stream: TextIO | None = None) -> list[tuple[int, int]]:
    """Read n lines, each starting with two integers."""
    source = _stream(stream)
    pairs = []
    for _ in range(n):
        tokens = source.readline().split()
        if len(tokens) < 2:
            raise ValueError("read_pairs: expected two integers on a line")
        pairs.append((_to_int(tokens[0], "read_pairs"), _to_int(tokens[1], "read_pairs")))
    return pairs


def _board_row(line: str) -> list[bool]:
    return [ch == FREE_SQUARE for ch in line.rstrip("\r\n")]


def read_board(stream: TextIO | None = None) -> list[list[bool]]:
    """Read an 8-line board; a '.' square is free (True), anything else is not."""
    source = _stream(stream)
    return [_board_row(source.readline()) for _ in range(BOARD_SIZE)]


def read_board_file(path: str | PathLike[str]) -> list[list[bool]]:
    """Read a board from a file, one row per line."""
    with open(path, encoding="utf-8") as handle:
        return [_board_row(line) for line in handle.read().splitlines()]


def read_text_file(path: str | PathLike[str]) -> str:
    """Return the whole content of a file without surrounding whitespace."""
    with open(path, encoding="utf-8") as handle:
        return handle.read().strip()


def read_ints_file(path: str | PathLike[str]) -> list[int]:
    """Return every whitespace-separated integer in a file."""
    with open(path, encoding="utf-8") as handle:
        return [_to_int(token, "read_ints_file") for token in handle.read().split()]


def read_int_file(path: str | PathLike[str]) -> int:
    """Return the single integer a file holds."""
    return _to_int(read_text_file(path), "read_int_file")


def next_token(tokens: Iterator[str]) -> int:
    """Take the next token from an iterator and parse it as an integer."""
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError("next_token: no tokens left") from None
    return _to_int(token, "next_token")


def load_tokens(stream: TextIO | None = None) -> Iterator[str]:
    """Read the whole stream and return an iterator over its tokens."""
    return iter(_stream(stream).read().split())