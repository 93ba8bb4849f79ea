"""Trebuchet: calibration values from the first and last digit on each line."""

from __future__ import annotations

import re
from collections.abc import Iterable

_DIGIT = re.compile(r"\d")
_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}
# A lookahead finds matches starting at every position, so "twone" gives both.
_DIGIT_OR_WORD = re.compile(r"(?=(\d|" + "|".join(_WORDS) + "))")


def _calibration(line: str, digits: Iterable[int]) -> int:
    values = list(digits)
    if not values:
        raise ValueError(f"no digit on line: {line!r}")
    return values[0] * 10 + values[-1]


def _to_number(token: str) -> int:
    return _WORDS[token] if token in _WORDS else int(token)


class Day01:
    def solve_a(self, text: str) -> int:
        """Sum of calibration values using numeric digits only."""
        return sum(
            _calibration(line, (int(d) for d in _DIGIT.findall(line)))
            for line in text.strip().splitlines()
        )

    def solve_b(self, text: str) -> int:
        """Sum of calibration values counting spelled-out digits too."""
        return sum(
            _calibration(
                line,
                (_to_number(m.group(1)) for m in _DIGIT_OR_WORD.finditer(line)),
            )
            for line in text.strip().splitlines()
        )