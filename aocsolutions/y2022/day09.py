"""Rope bridge: count positions visited by the tail of a knotted rope."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class _Move(Enum):
    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


_LETTERS = {"R": _Move.RIGHT, "L": _Move.LEFT, "U": _Move.UP, "D": _Move.DOWN}


def parse(text: str) -> list[tuple[_Move, int]]:
    """Parse lines like ``R 4`` into (move, amount) pairs."""
    moves = []
    for line in text.rstrip().splitlines():
        parts = line.split(" ")
        letter = parts[0][:1]
        if letter not in _LETTERS:
            raise ValueError(f"line is not a move: {line!r}")
        if len(parts) < 2:
            raise ValueError(f"move without an amount: {line!r}")
        amount = int(parts[1])
        if amount < 0:
            raise ValueError(f"negative amount: {line!r}")
        moves.append((_LETTERS[letter], amount))
    return moves


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def _follow(knot: tuple[int, int], leader: tuple[int, int]) -> tuple[int, int]:
    dx, dy = leader[0] - knot[0], leader[1] - knot[1]
    if max(abs(dx), abs(dy)) > 1:
        return knot[0] + _sign(dx), knot[1] + _sign(dy)
    return knot


def simulate(moves: Iterable[tuple[_Move, int]], number_of_knots: int) -> int:
    """Number of distinct positions the last knot occupies after each step."""
    if number_of_knots < 1:
        raise ValueError("a rope needs at least one knot")
    knots = [(0, 0)] * number_of_knots
    visited: set[tuple[int, int]] = set()
    for move, amount in moves:
        dx, dy = move.value
        for _ in range(amount):
            head_x, head_y = knots[0]
            moved = [(head_x + dx, head_y + dy)]
            for knot in knots[1:]:
                moved.append(_follow(knot, moved[-1]))
            knots = moved
            visited.add(knots[-1])
    return len(visited)


class Day09:
    def solve_a(self, text: str) -> int:
        """Tail positions for a rope of two knots."""
        return simulate(parse(text), 2)

    def solve_b(self, text: str) -> int:
        """Tail positions for a rope of ten knots."""
        return simulate(parse(text), 10)