"""Mirage maintenance: extrapolate sequences from their differences."""

from __future__ import annotations

from collections.abc import Iterator


def parse_line(line: str) -> list[int]:
    """The integers on a line; other tokens are ignored."""
    numbers = []
    for part in line.split():
        try:
            numbers.append(int(part))
        except ValueError:
            continue
    return numbers


def _difference_rows(numbers: list[int]) -> Iterator[list[int]]:
    """Yield the sequence and its successive differences until all are zero."""
    while any(numbers):
        yield numbers
        numbers = [b - a for a, b in zip(numbers, numbers[1:])]


def _next_value(numbers: list[int]) -> int:
    return sum(row[-1] for row in _difference_rows(numbers))


def _previous_value(numbers: list[int]) -> int:
    firsts = [row[0] for row in _difference_rows(numbers)]
    value = 0
    for first in reversed(firsts):
        value = first - value
    return value


class Day09:
    def solve_a(self, text: str) -> int:
        """Sum of the extrapolated next values."""
        return sum(_next_value(parse_line(line)) for line in text.strip().splitlines())

    def solve_b(self, text: str) -> int:
        """Sum of the extrapolated previous values."""
        return sum(
            _previous_value(parse_line(line)) for line in text.strip().splitlines()
        )