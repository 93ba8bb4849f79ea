"""Cathode-ray tube: simulate a one-register CPU driving a small screen."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import count
from typing import NamedTuple

from aocsolutions.ocr import screen_to_string

_ROWS = 6
_COLUMNS = 40


class _Instruction(NamedTuple):
    cycles: int
    delta: int


def parse(text: str) -> list[_Instruction]:
    """Parse ``noop`` and ``addx N`` lines into (cycles, delta) instructions."""
    instructions = []
    for line in text.rstrip().splitlines():
        op, *args = line.split(" ")
        if op == "noop":
            instructions.append(_Instruction(1, 0))
        elif op == "addx":
            if not args:
                raise ValueError(f"addx without a value: {line!r}")
            instructions.append(_Instruction(2, int(args[0])))
        else:
            raise ValueError(f"unknown instruction: {line!r}")
    return instructions


def _ticks(instructions: Iterable[_Instruction]) -> Iterator[tuple[int, int]]:
    """Yield (zero-based cycle, register value) during every cycle."""
    x = 1
    cycles = count()
    for instruction in instructions:
        for _ in range(instruction.cycles):
            yield next(cycles), x
        x += instruction.delta


class Day10:
    def solve_a(self, text: str) -> int:
        """Sum of signal strengths at cycles 20, 60, 100, ..."""
        return sum(
            (tick + 1) * x
            for tick, x in _ticks(parse(text))
            if (tick + 1) % _COLUMNS == 20
        )

    def screen(self, text: str) -> str:
        """The 6x40 screen drawn by the program, as '#' and '.' lines."""
        pixels = [[False] * _COLUMNS for _ in range(_ROWS)]
        for tick, x in _ticks(parse(text)):
            row, col = divmod(tick, _COLUMNS)
            if abs(x - col) <= 1:
                if row >= _ROWS:
                    raise ValueError("program draws past the last screen row")
                pixels[row][col] = True
        return screen_to_string(pixels)