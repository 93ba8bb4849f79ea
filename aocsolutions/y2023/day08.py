"""Haunted wasteland: follow left/right instructions through a network."""

from __future__ import annotations

import re
from collections.abc import Callable
from functools import reduce
from itertools import cycle

from aocsolutions.mathutil import lcm

_NODE = re.compile(
    r"(?P<source>[\dA-Z]{3}) = \((?P<left>[\dA-Z]{3}), (?P<right>[\dA-Z]{3})\)"
)

Network = dict[str, tuple[str, str]]


def parse(text: str) -> tuple[str, Network]:
    """Split the input into the instruction string and the node network."""
    path, sep, body = text.partition("\n\n")
    if not sep:
        raise ValueError("expected instructions and network separated by a blank line")
    network: Network = {}
    for line in body.strip().splitlines():
        match = _NODE.search(line)
        if match is None:
            raise ValueError(f"invalid node line: {line!r}")
        network[match["source"]] = (match["left"], match["right"])
    return path, network


def _steps_to_end(
    path: str, network: Network, is_end: Callable[[str], bool], start: str
) -> int:
    if not path:
        raise ValueError("empty instruction path")
    current = start
    for steps, choice in enumerate(cycle(path), start=1):
        try:
            left, right = network[current]
        except KeyError:
            raise ValueError(f"unknown node {current!r}") from None
        current = right if choice == "R" else left
        if is_end(current):
            return steps
    raise AssertionError("unreachable")


class Day08:
    def solve_a(self, text: str) -> int:
        """Steps from ``AAA`` to ``ZZZ``."""
        path, network = parse(text)
        return _steps_to_end(path, network, lambda node: node == "ZZZ", "AAA")

    def solve_b(self, text: str) -> int:
        """Steps until every ``..A`` node simultaneously reaches a ``..Z`` node."""
        path, network = parse(text)
        starts = [node for node in network if node[2:3] == "A"]
        if not starts:
            raise ValueError("no starting positions found")
        return reduce(
            lcm,
            (
                _steps_to_end(path, network, lambda node: node[2:3] == "Z", start)
                for start in starts
            ),
        )