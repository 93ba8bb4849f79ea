"""Supply stacks: rearrange crates and report the top of each stack."""

from __future__ import annotations

import re
from typing import NamedTuple

_COMMAND = re.compile(r"move (?P<amount>\d+) from (?P<source>\d+) to (?P<target>\d+)")


class _Move(NamedTuple):
    amount: int
    source: int
    target: int


def parse(text: str) -> tuple[dict[int, list[str]], list[_Move]]:
    """Parse the crate drawing into stacks (bottom first) and the move list."""
    drawing, commands_block, *_ = text.rstrip().split("\n\n")

    stacks: dict[int, list[str]] = {}
    for line in reversed(drawing.splitlines()):
        for index, crate in enumerate(line[1::4]):
            if "A" <= crate <= "Z":
                stacks.setdefault(index + 1, []).append(crate)

    commands = []
    for line in commands_block.splitlines():
        match = _COMMAND.search(line)
        if match is None:
            raise ValueError(f"invalid command: {line!r}")
        commands.append(
            _Move(int(match["amount"]), int(match["source"]), int(match["target"]))
        )
    return stacks, commands


def _rearrange(text: str, *, one_at_a_time: bool) -> str:
    stacks, commands = parse(text)
    for move in commands:
        source = stacks[move.source]
        if move.amount > len(source):
            raise ValueError(
                f"cannot move {move.amount} crates from stack {move.source}"
            )
        split = len(source) - move.amount
        crates = source[split:]
        del source[split:]
        if one_at_a_time:
            crates.reverse()
        stacks[move.target].extend(crates)
    return "".join(stacks[key][-1] for key in sorted(stacks))


class Day05:
    def solve_a(self, text: str) -> str:
        """Top crates when crates are moved one at a time."""
        return _rearrange(text, one_at_a_time=True)

    def solve_b(self, text: str) -> str:
        """Top crates when several crates are moved at once."""
        return _rearrange(text, one_at_a_time=False)