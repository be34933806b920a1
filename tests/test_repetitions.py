import io

import pytest

from cses.repetitions import main, solve


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("ATTCGGGA", 3),
        ("AATTCGGGAAAA", 4),
        ("AAATTCGGGA", 3),
        ("AAAAATTCGGGA", 5),
        ("AAABBGGGGTT", 4),
    ],
)
def test_solve(text, expected):
    assert solve(text) == expected


def test_single_character():
    assert solve("G") == 1


def test_empty_string_counts_one():
    assert solve("") == 1


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ATTCGGGA\n"))
    assert main() == 0
    assert capsys.readouterr().out == "3\n"