"""Beacon exclusion zone: reason about sensor coverage on a grid."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

_ROW = 2_000_000
PART_B_MAX = 4_000_000

_PATTERN = re.compile(
    r"Sensor at x=(?P<sx>-?\d+), y=(?P<sy>-?\d+): "
    r"closest beacon is at x=(?P<bx>-?\d+), y=(?P<by>-?\d+)"
)


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def manhattan_distance(self, other: Point) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


@dataclass(frozen=True)
class Sensor:
    """A sensor, its closest beacon and the distance between them."""

    position: Point
    beacon: Point
    distance: int

    @classmethod
    def parse(cls, line: str) -> Sensor:
        """Parse one report line."""
        match = _PATTERN.search(line)
        if match is None:
            raise ValueError(f"invalid sensor line: {line!r}")
        position = Point(int(match["sx"]), int(match["sy"]))
        beacon = Point(int(match["bx"]), int(match["by"]))
        return cls(position, beacon, position.manhattan_distance(beacon))

    def is_inside_range(self, point: Point) -> bool:
        """Whether ``point`` is covered and cannot hold an unknown beacon."""
        if point == self.beacon:
            return False
        return self.distance >= self.position.manhattan_distance(point)


def parse(text: str) -> list[Sensor]:
    """Parse every sensor report."""
    return [Sensor.parse(line) for line in text.rstrip().splitlines()]


def part_a(sensors: Sequence[Sensor], row: int) -> int:
    """Number of positions in ``row`` that cannot contain a beacon."""
    if not sensors:
        raise ValueError("no sensors")
    intervals = []
    for sensor in sensors:
        reach = sensor.distance - abs(sensor.position.y - row)
        if reach >= 0:
            intervals.append((sensor.position.x - reach, sensor.position.x + reach))
    intervals.sort()

    merged: list[list[int]] = []
    for low, high in intervals:
        if merged and low <= merged[-1][1] + 1:
            merged[-1][1] = max(merged[-1][1], high)
        else:
            merged.append([low, high])
    covered = sum(high - low + 1 for low, high in merged)

    for beacon in {s.beacon for s in sensors if s.beacon.y == row}:
        in_union = any(low <= beacon.x <= high for low, high in merged)
        if in_union and not any(s.is_inside_range(beacon) for s in sensors):
            covered -= 1
    return covered


def part_b(sensors: Sequence[Sensor], maximum: int) -> int | None:
    """Tuning frequency of the first uncovered point found along sensor edges."""
    for sensor in sensors:
        xs = range(
            max(0, sensor.position.x - sensor.distance - 1),
            min(sensor.position.x, maximum) + 1,
        )
        ys = range(sensor.position.y, maximum + 1)
        for x, y in zip(xs, ys):
            point = Point(x, y)
            if not any(s.is_inside_range(point) for s in sensors):
                return point.x * PART_B_MAX + point.y
    return None


class Day15:
    def solve_a(self, text: str) -> int:
        """Positions without a beacon in row 2000000."""
        return part_a(parse(text), _ROW)

    def solve_b(self, text: str) -> int | None:
        """Tuning frequency of the distress beacon within 0..4000000."""
        return part_b(parse(text), PART_B_MAX)