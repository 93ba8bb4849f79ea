"""Cosmic expansion: distances between galaxies in an expanding universe."""

from __future__ import annotations

from bisect import bisect_left
from itertools import combinations

_GALAXY = "#"


def _count_between(sorted_values: list[int], low: int, high: int) -> int:
    """How many values lie in ``[low, high)``."""
    return bisect_left(sorted_values, high) - bisect_left(sorted_values, low)


def solve(text: str, expand_factor: int) -> int:
    """Sum of shortest distances between all galaxy pairs.

    Each empty row or column counts ``expand_factor`` times.
    """
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty image")
    width = len(lines[0])

    empty_rows = [row for row, line in enumerate(lines) if _GALAXY not in line]
    empty_cols = [
        col
        for col in range(width)
        if all(line[col] != _GALAXY for line in lines if col < len(line))
    ]
    galaxies = [
        (row, col)
        for row, line in enumerate(lines)
        for col, c in enumerate(line)
        if c == _GALAXY
    ]

    total = 0
    for (ar, ac), (br, bc) in combinations(galaxies, 2):
        low_row, high_row = sorted((ar, br))
        low_col, high_col = sorted((ac, bc))
        empties = _count_between(empty_rows, low_row, high_row) + _count_between(
            empty_cols, low_col, high_col
        )
        distance = (high_row - low_row) + (high_col - low_col)
        total += distance + (expand_factor - 1) * empties
    return total


class Day11:
    def solve_a(self, text: str) -> int:
        """Distances with empty lines doubled."""
        return solve(text, 2)

    def solve_b(self, text: str) -> int:
        """Distances with empty lines a million times larger."""
        return solve(text, 1_000_000)