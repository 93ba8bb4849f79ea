"""Hot springs: count arrangements of damaged springs matching group sizes."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

_COPIES = 5


def possible_ways(springs: str, groups: Sequence[int]) -> int:
    """Arrangements of ``?`` in ``springs`` giving exactly ``groups`` runs of ``#``."""
    groups = tuple(groups)
    length = len(springs)
    group_count = len(groups)

    @lru_cache(maxsize=None)
    def ways(index: int, within: int, group: int) -> int:
        # ``within`` is the length of the run of '#' being built, 0 if none.
        if index == length:
            if within == 0:
                return int(group == group_count)
            return int(group == group_count - 1 and within == groups[group])
        if within and group == group_count:
            return 0

        c = springs[index]
        if c == ".":
            if within:
                if within != groups[group]:
                    return 0
                return ways(index + 1, 0, group + 1)
            return ways(index + 1, 0, group)
        if c == "#":
            return ways(index + 1, within + 1, group)
        if c == "?":
            if within:
                total = ways(index + 1, within + 1, group)
                if within == groups[group]:
                    total += ways(index + 1, 0, group + 1)
                return total
            return ways(index + 1, 1, group) + ways(index + 1, 0, group)
        raise ValueError(f"invalid spring character: {c!r}")

    return ways(0, 0, 0)


def _parse_line(line: str) -> tuple[str, list[int]]:
    springs, sep, pattern = line.partition(" ")
    if not sep:
        raise ValueError(f"line without group sizes: {line!r}")
    groups = []
    for part in pattern.split(","):
        try:
            groups.append(int(part))
        except ValueError:
            continue
    return springs, groups


class Day12:
    def solve_a(self, text: str) -> int:
        """Sum of arrangement counts over all rows."""
        return sum(
            possible_ways(*_parse_line(line)) for line in text.strip().splitlines()
        )

    def solve_b(self, text: str) -> int:
        """Sum of arrangement counts with every row unfolded five times."""
        total = 0
        for line in text.strip().splitlines():
            springs, groups = _parse_line(line)
            total += possible_ways("?".join([springs] * _COPIES), groups * _COPIES)
        return total