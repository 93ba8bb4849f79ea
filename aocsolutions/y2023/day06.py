"""Wait for it: ways to beat the record in boat races."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Race:
    """A race's duration and the record distance to beat."""

    time: int
    distance: int

    def wins(self) -> int:
        """Count winning button-hold times by trying every one."""
        return sum(
            1
            for speed in range(1, self.time)
            if speed * (self.time - speed) > self.distance
        )

    def wins_compute(self) -> int:
        """Count winning hold times from the roots of the quadratic equation."""
        discriminant = float(self.time * self.time) - 4.0 * float(self.distance)
        if discriminant < 0:
            return 0
        root = math.sqrt(discriminant)
        high = max(0, math.floor((self.time + root) / 2))
        low = max(0, math.floor((self.time - root) / 2))
        return high - low


def _strip_prefix(text: str, prefix: str) -> str:
    if not text.startswith(prefix):
        raise ValueError(f"expected line starting with {prefix!r}: {text!r}")
    return text[len(prefix) :]


def _split_lines(text: str) -> tuple[str, str]:
    times, sep, distances = text.strip().partition("\n")
    if not sep:
        raise ValueError("expected a time line and a distance line")
    return times, distances


def _numbers(text: str) -> list[int]:
    return [int(part) for part in text.split() if part.isdigit()]


def parse(text: str) -> list[Race]:
    """Parse the columns of times and distances into races."""
    times, distances = _split_lines(text)
    return [
        Race(time, distance)
        for time, distance in zip(
            _numbers(_strip_prefix(times, "Time:")),
            _numbers(_strip_prefix(distances, "Distance:")),
        )
    ]


class Day06:
    def solve_a(self, text: str) -> int:
        """Product of the number of ways to win each race."""
        return math.prod(race.wins() for race in parse(text))

    def solve_b(self, text: str) -> int:
        """Ways to win the single race formed by joining the digits."""
        times, distances = _split_lines(text)
        time = int(_strip_prefix(times, "Time: ").replace(" ", ""))
        distance = int(_strip_prefix(distances, "Distance: ").replace(" ", ""))
        return Race(time, distance).wins_compute()