"""Parabolic reflector dish: tilt a platform of rolling rocks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

ROCK_ROUND = "O"
ROCK_CUBE = "#"
EMPTY_SPACE = "."
CYCLES = 1_000_000_000

World = tuple[str, ...]


def parse_world(text: str) -> World:
    """Parse the platform into a tuple of row strings."""
    world = tuple(text.strip().splitlines())
    if not world or any(len(row) != len(world[0]) for row in world):
        raise ValueError("platform rows differ in length")
    allowed = {ROCK_ROUND, ROCK_CUBE, EMPTY_SPACE}
    for row in world:
        if not set(row) <= allowed:
            raise ValueError(f"invalid platform row: {row!r}")
    return world


def _columns(world: Iterable[str]) -> list[str]:
    return ["".join(column) for column in zip(*world)]


def _weight_tilted_north(world: World) -> int:
    height = len(world)
    total = 0
    for column in _columns(world):
        empty: deque[int] = deque()
        for i, c in enumerate(column):
            if c == ROCK_CUBE:
                empty.clear()
            elif c == ROCK_ROUND:
                if empty:
                    value = empty.popleft()
                    empty.append(i)
                else:
                    value = i
                total += height - value
            else:
                empty.append(i)
    return total


def _weight(world: World) -> int:
    width = len(world[0])
    return sum(
        width - i
        for column in _columns(world)
        for i, c in enumerate(column)
        if c == ROCK_ROUND
    )


def _slide(line: str) -> str:
    """Roll round rocks in ``line`` towards its start."""
    return ROCK_CUBE.join(
        ROCK_ROUND * segment.count(ROCK_ROUND)
        + EMPTY_SPACE * (len(segment) - segment.count(ROCK_ROUND))
        for segment in line.split(ROCK_CUBE)
    )


def _slide_north(world: World) -> World:
    return tuple(_columns(_slide(column) for column in _columns(world)))


def _rotate_clockwise(world: World) -> World:
    return tuple(_columns(reversed(world)))


def cycle(world: World) -> World:
    """Tilt north, west, south and east in turn."""
    if len(world) != len(world[0]):
        raise ValueError("spin cycles need a square platform")
    for _ in range(4):
        world = _rotate_clockwise(_slide_north(world))
    return world


def _find_cycle(world: World) -> int:
    seen = {world: 0}
    history = [world]
    for _ in range(CYCLES):
        world = cycle(world)
        index = seen.get(world)
        if index is not None:
            cycle_len = len(history) - index
            return _weight(history[index + (CYCLES - index) % cycle_len])
        seen[world] = len(history)
        history.append(world)
    return _weight(world)


class Day14:
    def solve_a(self, text: str) -> int:
        """Load on the north beams after tilting north."""
        return _weight_tilted_north(parse_world(text))

    def solve_b(self, text: str) -> int:
        """Load on the north beams after a billion spin cycles."""
        return _find_cycle(parse_world(text))