"""Cube conundrum: which games are possible with a bag of coloured cubes."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

_CUBES = re.compile(r"(?P<count>\d+) (?P<color>blue|red|green)")


@dataclass(frozen=True)
class CubeSet:
    """Counts of red, blue and green cubes."""

    red: int = 0
    blue: int = 0
    green: int = 0

    def is_within(self, other: CubeSet) -> bool:
        """Whether no colour exceeds the count in ``other``."""
        return (
            self.red <= other.red
            and self.blue <= other.blue
            and self.green <= other.green
        )

    def power(self) -> int:
        """Product of the three counts."""
        return self.red * self.green * self.blue

    def minimum_containing_set(self, other: CubeSet) -> CubeSet:
        """The smallest set containing both sets."""
        return CubeSet(
            red=max(self.red, other.red),
            blue=max(self.blue, other.blue),
            green=max(self.green, other.green),
        )


def parse_game(line: str) -> tuple[int, list[CubeSet]] | None:
    """Parse ``Game N: ...`` into its id and revealed sets; None without ':'."""
    head, sep, sets_text = line.partition(":")
    if not sep:
        return None
    if not head.startswith("Game "):
        raise ValueError(f"invalid game header: {head!r}")
    game_id = int(head[len("Game ") :])

    sets = []
    for part in sets_text.split(";"):
        cubes = CubeSet()
        for match in _CUBES.finditer(part):
            cubes = replace(cubes, **{match["color"]: int(match["count"])})
        sets.append(cubes)
    return game_id, sets


def _games(text: str) -> list[tuple[int, list[CubeSet]]]:
    return [
        game
        for game in (parse_game(line) for line in text.strip().splitlines())
        if game is not None
    ]


class Day02:
    def solve_a(self, text: str) -> int:
        """Sum of ids of games possible with 12 red, 13 green and 14 blue."""
        limits = CubeSet(red=12, green=13, blue=14)
        return sum(
            game_id
            for game_id, sets in _games(text)
            if all(s.is_within(limits) for s in sets)
        )

    def solve_b(self, text: str) -> int:
        """Sum of the powers of the minimal cube sets for every game."""
        total = 0
        for _, sets in _games(text):
            if not sets:
                continue
            minimal = sets[0]
            for cubes in sets[1:]:
                minimal = minimal.minimum_containing_set(cubes)
            total += minimal.power()
        return total