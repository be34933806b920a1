# cses

Solutions to the introductory tasks of the CSES Problem Set. Each task lives
in its own module. The module has a `solve` function for use from Python and
a `main` function behind a console command. The command reads the task's
input from standard input and writes the answer to standard output.
`cses-chessboard-and-queens` is the exception: it writes its count to
standard error.

## Installation

```
pip install .
```

Add the `test` extra to get the test suite's dependencies:

```
pip install ".[test]"
```

## Commands

| Command                      | Task                  |
|------------------------------|-----------------------|
| `cses`                       | prints a banner       |
| `cses-apple-division`        | Apple Division        |
| `cses-bit-strings`           | Bit Strings           |
| `cses-chessboard-and-queens` | Chessboard and Queens |
| `cses-coin-piles`            | Coin Piles            |
| `cses-creating-strings`      | Creating Strings      |
| `cses-gray-code`             | Gray Code             |
| `cses-increasing-array`      | Increasing Array      |
| `cses-missing-number`        | Missing Number        |
| `cses-number-spiral`         | Number Spiral         |
| `cses-palindrome-reorder`    | Palindrome Reorder    |
| `cses-permutations`          | Permutations          |
| `cses-repetitions`           | Repetitions           |
| `cses-tower-of-hanoi`        | Tower of Hanoi        |
| `cses-trailing-zeros`        | Trailing Zeros        |
| `cses-two-knights`           | Two Knights           |
| `cses-two-sets`              | Two Sets              |
| `cses-weird-algorithm`       | Weird Algorithm       |

Examples:

```
$ echo 3 | cses-weird-algorithm
3 10 5 16 8 4 2 1

$ echo 7 | cses-permutations
2 4 6 1 3 5 7

$ printf '5\n1 2 3 4 5\n' | cses-apple-division
1
```

## Library use

```python
from cses import tower_of_hanoi, creating_strings, palindrome_reorder

tower_of_hanoi.solve(2)                # [(1, 2), (1, 3), (2, 3)]
creating_strings.solve("ABC")          # ['ABC', 'ACB', 'BAC', 'BCA', 'CAB', 'CBA']
palindrome_reorder.solve("AAAACACBA")  # 'AAACBCAAA'
```

Invalid input raises `ValueError`. For example, `weird_algorithm.solve`
accepts only 1 <= n <= 10^6, and `permutations.solve` needs n >= 1.
Where a task has no answer, `solve` returns `None` (`palindrome_reorder`,
`two_sets`) or the string `"NO SOLUTION"` (`permutations`).

The `cses.io` module holds the helpers that the commands use to read input:
`read_line`, `read_int`, `read_ints`, `read_pairs` and `read_board` for
streams (standard input by default); `read_text_file`, `read_int_file`,
`read_ints_file` and `read_board_file` for files; `parse_ints`,
`load_tokens` and `next_token` for token handling; and `join_values` for
output.

`cses.integration_setup.setup(problem, data_dir="data")` lists the files
under `data_dir/problem` whose names contain `input` and those whose names
contain `output`, and returns both lists sorted. It raises `ValueError`
when the two lists differ in length.

## What is not included

The package ships no task data. `setup` only finds input and output files
that you place in a data directory yourself.

## Tests

```
pytest
```