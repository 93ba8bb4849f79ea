"""Regolith reservoir: pour sand into a cave of rock lines."""

from __future__ import annotations

_AIR = "."
_ROCK = "#"
_SAND = "o"

# Extra columns on each side of the rocks, wide enough for the sand pile.
_BUFFER = 150
_SOURCE_X = 500

Point = tuple[int, int]


def _parse_line(line: str) -> list[Point]:
    points = []
    for part in line.split(" -> "):
        x, y, *_ = part.split(",")
        points.append((int(x), int(y)))
    return points


def parse(text: str) -> list[list[Point]]:
    """Parse each rock path into its list of (x, y) corner points."""
    return [_parse_line(line) for line in text.rstrip().splitlines()]


def _create_map(paths: list[list[Point]]) -> tuple[list[list[str]], int, int]:
    points = [point for path in paths for point in path]
    if len(points) < 2:
        raise ValueError("at least two points are needed to build the cave")
    x_min = min(x for x, _ in points) - _BUFFER
    x_max = max(x for x, _ in points) + _BUFFER
    y_max = max(y for _, y in points)

    grid = [[_AIR] * (x_max - x_min + 1) for _ in range(y_max + 2)]
    for path in paths:
        for (ax, ay), (bx, by) in zip(path, path[1:]):
            for col in range(min(ax, bx) - x_min, max(ax, bx) - x_min + 1):
                for row in range(min(ay, by), max(ay, by) + 1):
                    grid[row][col] = _ROCK
    return grid, x_min, y_max


def _get(grid: list[list[str]], row: int, col: int) -> str | None:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return None


def _simulate(grid: list[list[str]], x_min: int, y_max: int, floor: bool) -> int:
    sand = 0
    while True:
        row, col = 0, _SOURCE_X - x_min
        if floor and _get(grid, row, col) != _AIR:
            return sand

        while not (floor and row == y_max + 1):
            for dc in (0, -1, 1):
                cell = _get(grid, row + 1, col + dc)
                if cell is None:
                    return sand
                if cell == _AIR:
                    row, col = row + 1, col + dc
                    break
            else:
                break

        grid[row][col] = _SAND
        sand += 1


class Day14:
    def solve_a(self, text: str) -> int:
        """Units of sand that come to rest before sand falls into the abyss."""
        grid, x_min, y_max = _create_map(parse(text))
        return _simulate(grid, x_min, y_max, floor=False)

    def solve_b(self, text: str) -> int:
        """Units of sand that come to rest on the floor until the source is blocked."""
        grid, x_min, y_max = _create_map(parse(text))
        return _simulate(grid, x_min, y_max, floor=True)