import io

import pytest

from cses.io import (
    join_values,
    load_tokens,
    next_token,
    parse_ints,
    read_board,
    read_board_file,
    read_int,
    read_int_file,
    read_ints,
    read_ints_file,
    read_line,
    read_pairs,
    read_text_file,
)


def test_parse_ints():
    assert parse_ints("1 2 3 4 5") == [1, 2, 3, 4, 5]


def test_parse_ints_rejects_garbage():
    with pytest.raises(ValueError):
        parse_ints("1 x 3")


def test_join_values_with_separator():
    assert join_values(["a", "b", "c", "d", "e"], ", ") == "a, b, c, d, e"


def test_join_values_without_separator():
    assert join_values(["a", "b", "c"]) == "abc"


def test_join_and_parse_round_trip():
    values = [7, 3, 42, 0]
    assert parse_ints(join_values(values, " ")) == values


def test_read_int_and_line():
    stream = io.StringIO("  17 \nhello world\n")
    assert read_int(stream) == 17
    assert read_line(stream) == "hello world"


def test_read_int_empty_raises():
    with pytest.raises(ValueError):
        read_int(io.StringIO(""))


def test_read_ints():
    stream = io.StringIO("4 5 6\n7\n")
    assert read_ints(stream) == [4, 5, 6]
    assert read_ints(stream) == [7]


def test_read_pairs():
    stream = io.StringIO("2 3\n1 1\n4 2\n")
    assert read_pairs(3, stream) == [(2, 3), (1, 1), (4, 2)]


def test_read_pairs_short_line_raises():
    with pytest.raises(ValueError):
        read_pairs(1, io.StringIO("5\n"))


def test_read_board():
    rows = ["........", "..*.....", "........", "*.......",
            "........", "........", "........", ".......*"]
    board = read_board(io.StringIO("\n".join(rows) + "\n"))
    assert len(board) == 8
    assert all(len(row) == 8 for row in board)
    assert board[1][2] is False
    assert board[3][0] is False
    assert board[7][7] is False
    assert sum(row.count(False) for row in board) == 3


def test_read_board_file(tmp_path):
    path = tmp_path / "board.txt"
    path.write_text("..*\n*..\n", encoding="utf-8")
    assert read_board_file(path) == [[True, True, False], [False, True, True]]


def test_read_text_file(tmp_path):
    path = tmp_path / "text.txt"
    path.write_text("\n  ABC  \n\n", encoding="utf-8")
    assert read_text_file(path) == "ABC"


def test_read_ints_file(tmp_path):
    path = tmp_path / "nums.txt"
    path.write_text("5\n1 2 4 5\n", encoding="utf-8")
    assert read_ints_file(path) == [5, 1, 2, 4, 5]


def test_read_int_file(tmp_path):
    path = tmp_path / "n.txt"
    path.write_text("871\n", encoding="utf-8")
    assert read_int_file(path) == 871


def test_read_int_file_bad_content(tmp_path):
    path = tmp_path / "n.txt"
    path.write_text("1 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_int_file(path)


def test_load_tokens_and_next_token():
    tokens = load_tokens(io.StringIO("3\n 10 20\n30\n"))
    assert [next_token(tokens) for _ in range(4)] == [3, 10, 20, 30]
    with pytest.raises(ValueError):
        next_token(tokens)


def test_next_token_bad_value():
    with pytest.raises(ValueError):
        next_token(iter(["abc"]))