"""Hill climbing: shortest path up a height map."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

Location = tuple[int, int]

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def parse(text: str) -> tuple[list[list[int]], Location, Location, list[Location]]:
    """Parse the map into heights, start, end and every lowest (a or S) location.

    Locations are (row, col). ``S`` has height 0 and ``E`` height 25.
    """
    lines = text.rstrip().splitlines()
    if any(len(line) != len(lines[0]) for line in lines):
        raise ValueError("rows of the map differ in length")

    heights: list[list[int]] = []
    start: Location = (0, 0)
    end: Location = (0, 0)
    lowest: list[Location] = []
    for row, line in enumerate(lines):
        row_heights = []
        for col, c in enumerate(line):
            if c in ("a", "S"):
                lowest.append((row, col))
            if c == "S":
                start = (row, col)
                row_heights.append(0)
            elif c == "E":
                end = (row, col)
                row_heights.append(25)
            else:
                row_heights.append(ord(c) - ord("a"))
        heights.append(row_heights)
    return heights, start, end, lowest


def search_distance(
    starts: Iterable[Location], end: Location, heights: list[list[int]]
) -> int | None:
    """Fewest steps from any start to ``end``, climbing at most one per step."""
    origins = list(dict.fromkeys(starts))
    visited = set(origins)
    queue = deque((origin, 0) for origin in origins)
    rows = len(heights)
    cols = len(heights[0]) if heights else 0

    while queue:
        (row, col), cost = queue.popleft()
        if (row, col) == end:
            return cost
        limit = heights[row][col] + 1
        for dr, dc in _STEPS:
            nr, nc = row + dr, col + dc
            if (
                0 <= nr < rows
                and 0 <= nc < cols
                and (nr, nc) not in visited
                and heights[nr][nc] <= limit
            ):
                visited.add((nr, nc))
                queue.append(((nr, nc), cost + 1))
    return None


class Day12:
    def solve_a(self, text: str) -> int | None:
        """Fewest steps from ``S`` to ``E``."""
        heights, start, end, _ = parse(text)
        return search_distance([start], end, heights)

    def solve_b(self, text: str) -> int | None:
        """Fewest steps from any lowest square to ``E``."""
        heights, _, end, lowest = parse(text)
        return search_distance(lowest, end, heights)