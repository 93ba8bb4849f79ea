"""Monkey in the middle: simulate monkeys passing items by worry level."""

from __future__ import annotations

import heapq
import math
import re
from collections.abc import Sequence
from dataclasses import dataclass

_OPERATORS = ("+", "*")


@dataclass(frozen=True)
class Operation:
    """``new = old <operator> operand``; an operand of None means ``old`` itself."""

    operator: str
    operand: int | None = None

    def __post_init__(self) -> None:
        if self.operator not in _OPERATORS:
            raise ValueError(f"unknown operator: {self.operator!r}")

    def evaluate(self, old: int) -> int:
        """Apply the operation to the worry level ``old``."""
        operand = old if self.operand is None else self.operand
        if self.operator == "+":
            return old + operand
        return old * operand


def _parse_operation(line: str) -> Operation:
    tokens = line.split()
    if len(tokens) < 2:
        raise ValueError(f"unknown operation: {line!r}")
    operator, operand = tokens[-2], tokens[-1]
    if operator == "*" and operand == "old":
        return Operation("*", None)
    if operator in _OPERATORS:
        return Operation(operator, int(operand))
    raise ValueError(f"unknown operation: {line!r}")


def _target(line: str) -> int:
    if not line or not line[-1].isdigit():
        raise ValueError(f"missing target monkey: {line!r}")
    return int(line[-1])


@dataclass(frozen=True)
class Monkey:
    """How a monkey changes an item's worry level and where it throws it."""

    operation: Operation
    divisor: int
    true_index: int
    false_index: int

    @classmethod
    def parse(cls, text: str) -> Monkey:
        """Parse the lines from the operation line onwards."""
        lines = text.splitlines()
        if len(lines) < 4:
            raise ValueError("monkey description is incomplete")
        operation = _parse_operation(lines[0])
        parts = lines[1].split(" by ")
        if len(parts) < 2:
            raise ValueError(f"missing divisor: {lines[1]!r}")
        return cls(
            operation=operation,
            divisor=int(parts[1]),
            true_index=_target(lines[2]),
            false_index=_target(lines[3]),
        )


def _parse_items(line: str) -> list[int]:
    return [int(part.strip()) for part in re.split("[:,]", line)[1:]]


def parse(text: str) -> tuple[list[Monkey], list[list[int]]]:
    """Parse all monkeys and the items each one starts with."""
    monkeys = []
    items = []
    for block in text.rstrip().split("\n\n"):
        head, sep, rest = block.partition("Operation")
        if not sep:
            raise ValueError("monkey without an operation")
        head_lines = head.splitlines()[1:]
        if not head_lines:
            raise ValueError("monkey without starting items")
        items.append(_parse_items(head_lines[0]))
        monkeys.append(Monkey.parse(rest))
    return monkeys, items


def simulate(
    monkeys: Sequence[Monkey],
    items: Sequence[Sequence[int]],
    rounds: int,
    divisor: int,
) -> int:
    """Monkey business: product of the two largest inspection counts."""
    held = [list(monkey_items) for monkey_items in items]
    counts = [0] * len(monkeys)
    common = math.prod(monkey.divisor for monkey in monkeys)

    for _ in range(rounds):
        for index, monkey in enumerate(monkeys):
            for item in list(held[index]):
                worry = monkey.operation.evaluate(item) // divisor % common
                if worry % monkey.divisor == 0:
                    held[monkey.true_index].append(worry)
                else:
                    held[monkey.false_index].append(worry)
            counts[index] += len(held[index])
            held[index].clear()

    return math.prod(heapq.nlargest(2, counts))


class Day11:
    def solve_a(self, text: str) -> int:
        """Monkey business after 20 rounds with relief (worry divided by 3)."""
        monkeys, items = parse(text)
        return simulate(monkeys, items, 20, 3)

    def solve_b(self, text: str) -> int:
        """Monkey business after 10000 rounds without relief."""
        monkeys, items = parse(text)
        return simulate(monkeys, items, 10_000, 1)