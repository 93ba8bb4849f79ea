"""Camp cleanup: count section assignments that contain or overlap each other."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Pair:
    """An inclusive range of section ids."""

    start: int
    end: int

    @classmethod
    def parse(cls, text: str) -> Pair:
        """Parse a range written as ``start-end``."""
        start, end, *_ = text.split("-")
        return cls(int(start), int(end))

    def fully_contains(self, other: Pair) -> bool:
        return self.start <= other.start and other.end <= self.end

    def overlaps(self, other: Pair) -> bool:
        return self.start <= other.end and other.start <= self.end


def _pairs(text: str) -> list[tuple[Pair, Pair]]:
    result = []
    for line in text.rstrip().splitlines():
        first, second, *_ = line.split(",")
        result.append((Pair.parse(first), Pair.parse(second)))
    return result


class Day04:
    def solve_a(self, text: str) -> int:
        """Number of pairs where one range fully contains the other."""
        return sum(
            1 for a, b in _pairs(text) if a.fully_contains(b) or b.fully_contains(a)
        )

    def solve_b(self, text: str) -> int:
        """Number of pairs whose ranges overlap."""
        return sum(1 for a, b in _pairs(text) if a.overlaps(b))