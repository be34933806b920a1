[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cses"
version = "0.1.0"
description = "Solutions to introductory CSES Problem Set tasks, usable as a library or from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cses",
    "competitive-programming",
    "algorithms",
    "problem-set",
    "combinatorics",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cses = "cses.cli:main"
cses-apple-division = "cses.apple_division:main"
cses-bit-strings = "cses.bit_strings:main"
cses-chessboard-and-queens = "cses.chessboard_and_queens:main"
cses-coin-piles = "cses.coin_piles:main"
cses-creating-strings = "cses.creating_strings:main"
cses-gray-code = "cses.gray_code:main"
cses-increasing-array = "cses.increasing_array:main"
cses-missing-number = "cses.missing_number:main"
cses-number-spiral = "cses.number_spiral:main"
cses-palindrome-reorder = "cses.palindrome_reorder:main"
cses-permutations = "cses.permutations:main"
cses-repetitions = "cses.repetitions:main"
cses-tower-of-hanoi = "cses.tower_of_hanoi:main"
cses-trailing-zeros = "cses.trailing_zeros:main"
cses-two-knights = "cses.two_knights:main"
cses-two-sets = "cses.two_sets:main"
cses-weird-algorithm = "cses.weird_algorithm:main"

[tool.hatch.build.targets.wheel]
packages = ["cses"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
