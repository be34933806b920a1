"""Locating the input and expected-output files of a problem's test data."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path

logger = logging.getLogger(__name__)


def setup(problem: str, data_dir: str | PathLike[str] = "data") -> tuple[list[str], list[str]]:
    """Return the sorted input and output file paths under data_dir/problem.

    Raises ValueError when the numbers of input and output files differ.
    """
    directory = Path(data_dir) / problem
    logger.info("integration_setup reading %s directory", directory)
    questions: list[str] = []
    answers: list[str] = []
    for entry in directory.iterdir():
        if not entry.is_file():
            continue
        if "input" in entry.name:
            questions.append(str(entry))
        elif "output" in entry.name:
            answers.append(str(entry))
    if len(questions) != len(answers):
        raise ValueError("questions and answers are not equal in length")
    return sorted(questions), sorted(answers)