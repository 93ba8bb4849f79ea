"""Treetop tree house: visibility and scenic scores in a height grid."""

from __future__ import annotations

from collections.abc import Iterable

from aocsolutions.iterutil import take_until_inclusive


def parse(text: str) -> list[list[int]]:
    """Parse rows of single-digit tree heights."""
    forest = [[int(c) for c in line] for line in text.rstrip().splitlines()]
    if any(len(row) != len(forest[0]) for row in forest):
        raise ValueError("rows of the forest differ in length")
    return forest


def _sight_lines(
    forest: list[list[int]], row: int, col: int
) -> tuple[Iterable[int], Iterable[int], Iterable[int], Iterable[int]]:
    """Trees seen from (row, col) looking left, right, up and down, nearest first."""
    line = forest[row]
    column = [r[col] for r in forest]
    return (
        reversed(line[:col]),
        line[col + 1 :],
        reversed(column[:row]),
        column[row + 1 :],
    )


def scenic_score(forest: list[list[int]], row: int, col: int) -> int:
    """Product of the viewing distances in the four directions."""
    height = forest[row][col]
    score = 1
    for view in _sight_lines(forest, row, col):
        score *= sum(1 for _ in take_until_inclusive(view, lambda t: t >= height))
    return score


class Day08:
    def solve_a(self, text: str) -> int:
        """Number of trees visible from outside the grid."""
        forest = parse(text)
        return sum(
            1
            for r, row in enumerate(forest)
            for c, height in enumerate(row)
            if any(
                all(tree < height for tree in view)
                for view in _sight_lines(forest, r, c)
            )
        )

    def solve_b(self, text: str) -> int:
        """Highest scenic score of any tree."""
        forest = parse(text)
        return max(
            scenic_score(forest, r, c)
            for r, row in enumerate(forest)
            for c in range(len(row))
        )