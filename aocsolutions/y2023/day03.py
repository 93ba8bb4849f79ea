"""Gear ratios: part numbers next to symbols in an engine schematic."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

_NUMBER = re.compile(r"\d+")
_ANY_SYMBOL = r"[^\w.]"
_GEAR = r"\*"


@dataclass(frozen=True)
class _Number:
    value: int
    y: int
    x: int
    length: int

    def adjacent(self) -> set[tuple[int, int]]:
        return {
            (row, col)
            for row in range(max(0, self.y - 1), self.y + 2)
            for col in range(max(0, self.x - 1), self.x + self.length + 1)
        }


def _find_symbols(text: str, pattern: str) -> set[tuple[int, int]]:
    symbol = re.compile(pattern)
    return {
        (y, match.start())
        for y, line in enumerate(text.strip().splitlines())
        for match in symbol.finditer(line)
    }


def _find_numbers(text: str) -> list[_Number]:
    return [
        _Number(int(match.group()), y, match.start(), len(match.group()))
        for y, line in enumerate(text.strip().splitlines())
        for match in _NUMBER.finditer(line)
    ]


class Day03:
    def solve_a(self, text: str) -> int:
        """Sum of numbers adjacent to any symbol."""
        symbols = _find_symbols(text, _ANY_SYMBOL)
        return sum(
            number.value
            for number in _find_numbers(text)
            if number.adjacent() & symbols
        )

    def solve_b(self, text: str) -> int:
        """Sum of gear ratios: products of exactly two numbers next to a '*'."""
        numbers = _find_numbers(text)
        total = 0
        for gear in _find_symbols(text, _GEAR):
            values = [n.value for n in numbers if gear in n.adjacent()]
            if len(values) == 2:
                total += math.prod(values)
        return total