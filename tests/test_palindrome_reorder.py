import io
from collections import Counter

import pytest

from cses.palindrome_reorder import main, solve


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("AAAAAAAAAA", "AAAAAAAAAA"),
        ("ABABABABAB", None),
        ("MWNYFUIRUX", None),
        ("AAAACACBA", "AAACBCAAA"),
    ],
)
def test_solve(text, expected):
    assert solve(text) == expected


def test_result_is_palindrome_of_same_letters():
    text = "AAABBCAAAAA"
    result = solve(text)
    assert result == result[::-1]
    assert Counter(result) == Counter(text)


def test_empty_text():
    assert solve("") == ""


def test_lowercase_raises():
    with pytest.raises(ValueError):
        solve("abc")


def test_main_prints_palindrome(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("AAAACACBA\n"))
    assert main() == 0
    assert capsys.readouterr().out == "AAACBCAAA\n"


def test_main_prints_no_solution(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ABABABABAB\n"))
    assert main() == 0
    assert capsys.readouterr().out == "NO SOLUTION\n"