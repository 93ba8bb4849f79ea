"""Proboscidea volcanium: release as much pressure as possible from valves."""

from __future__ import annotations

import heapq
import itertools
import math
import re
from collections import deque
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass, replace
from typing import TypeVar

from aocsolutions.bitset import BitSet

_START = "AA"
_MINUTES_ALONE = 30
_MINUTES_WITH_ELEPHANT = 26

_PATTERN = re.compile(
    r"Valve (?P<name>[A-Z]{2}).*=(?P<rate>\d+); "
    r"tunnels? leads? to valves? (?P<exit>.*)$"
)

N = TypeVar("N", bound=Hashable)


@dataclass(frozen=True)
class Valve:
    """A valve as described by the scan: its flow rate and its tunnels."""

    name: str
    flow: int
    exits: tuple[str, ...]

    @classmethod
    def parse(cls, line: str) -> Valve:
        """Parse one line of the scan."""
        match = _PATTERN.search(line)
        if match is None:
            raise ValueError(f"invalid valve line: {line!r}")
        return cls(
            name=match["name"],
            flow=int(match["rate"]),
            exits=tuple(match["exit"].split(", ")),
        )


def parse(text: str) -> list[Valve]:
    """Parse every valve of the scan."""
    return [Valve.parse(line) for line in text.rstrip().splitlines()]


def compress(valves: Iterable[Valve]) -> dict[str, dict[str, int]]:
    """Distances from the start and every valve with flow to the flowing valves.

    Paths stop at the first valve with flow, so each entry lists only the
    flowing valves reachable directly, with the number of tunnels walked.
    """
    by_name = {valve.name: valve for valve in valves}
    if _START not in by_name:
        raise ValueError(f"no valve named {_START}")

    def lookup(name: str) -> Valve:
        try:
            return by_name[name]
        except KeyError:
            raise ValueError(f"tunnel leads to unknown valve {name!r}") from None

    compressed: dict[str, dict[str, int]] = {}
    for name, valve in by_name.items():
        if name != _START and valve.flow <= 0:
            continue
        distances: dict[str, int] = {}
        seen = {name}
        queue = deque([(name, 0)])
        while queue:
            node, distance = queue.popleft()
            if node != name and lookup(node).flow > 0:
                continue
            for exit_name in lookup(node).exits:
                if exit_name not in seen:
                    seen.add(exit_name)
                    distances[exit_name] = distance + 1
                    queue.append((exit_name, distance + 1))
        compressed[name] = {
            target: distance
            for target, distance in distances.items()
            if lookup(target).flow > 0
        }
    return compressed


def _astar(
    start: N,
    successors: Callable[[N], Iterable[tuple[N, float]]],
    heuristic: Callable[[N], float],
    success: Callable[[N], bool],
) -> float | None:
    """Cost of the cheapest path from ``start`` to a node meeting ``success``."""
    best: dict[N, float] = {start: 0}
    order = itertools.count()
    heap: list[tuple[float, float, int, N]] = [(0, 0, next(order), start)]
    while heap:
        _, negative_cost, _, node = heapq.heappop(heap)
        cost = -negative_cost
        if success(node):
            return cost
        if cost > best[node]:
            continue
        for successor, move_cost in successors(node):
            new_cost = cost + move_cost
            known = best.get(successor)
            if known is not None and known <= new_cost:
                continue
            best[successor] = new_cost
            estimate = new_cost + heuristic(successor)
            heapq.heappush(heap, (estimate, -new_cost, next(order), successor))
    return None


def _with_opened(opened: BitSet, valve: int) -> BitSet:
    result = BitSet(opened.bits)
    result.insert(valve)
    return result


@dataclass(frozen=True)
class _IdValve:
    flow: int
    exits: tuple[tuple[int, int], ...]


@dataclass(frozen=True)
class _State:
    remaining: int
    current: tuple[int, int]
    opened: BitSet


@dataclass(frozen=True)
class _PairState:
    remaining: int
    actors: tuple[tuple[int, int], tuple[int, int]]
    opened: BitSet


class _Network:
    """The compressed valve graph with integer ids and cached search results."""

    def __init__(self, text: str) -> None:
        valves = parse(text)
        flows = {valve.name: valve.flow for valve in valves}
        compressed = compress(valves)
        ids = {name: index for index, name in enumerate(compressed)}
        self.valves = {
            ids[name]: _IdValve(
                flow=flows[name],
                exits=tuple((ids[target], d) for target, d in exits.items()),
            )
            for name, exits in compressed.items()
        }
        self.start = ids[_START]
        by_flow = sorted(
            ((index, valve.flow) for index, valve in self.valves.items()),
            key=lambda item: item[1],
        )
        by_flow.reverse()
        self.by_flow = by_flow
        self._costs: dict[_State, float] = {}

    def _initial_opened(self) -> BitSet:
        opened = BitSet()
        if self.valves[self.start].flow == 0:
            opened.insert(self.start)
        return opened

    def _finished(self, remaining: int, opened: BitSet) -> bool:
        return remaining == 0 or len(opened) == len(self.valves)

    def _single_moves(self, state: _State) -> list[tuple[_State, int]]:
        dest, distance = state.current
        remaining = state.remaining - 1
        if distance > 0:
            return [(_State(remaining, (dest, distance - 1), state.opened), 0)]
        moves: list[tuple[_State, int]] = []
        if dest not in state.opened:
            opened = _with_opened(state.opened, dest)
            cost = remaining * self.valves[dest].flow
            moves.append((_State(remaining, state.current, opened), -cost))
        for target, target_distance in self.valves[dest].exits:
            moves.append(
                (_State(remaining, (target, target_distance - 1), state.opened), 0)
            )
        return moves

    def one_actor_cost(self, state: _State) -> float:
        """Lowest (most negative) cost one actor can reach from ``state``."""
        cached = self._costs.get(state)
        if cached is not None:
            return cached
        if self._finished(state.remaining, state.opened):
            result: float = 0
        else:
            result = min(
                (cost + self.one_actor_cost(n) for n, cost in self._single_moves(state)),
                default=math.inf,
            )
        self._costs[state] = result
        return result

    def _actor_moves(self, state: _PairState, actor: int) -> list[tuple[_PairState, int]]:
        dest, distance = state.actors[actor]

        def with_actor(position: tuple[int, int]) -> tuple[tuple[int, int], tuple[int, int]]:
            return (position, state.actors[1]) if actor == 0 else (state.actors[0], position)

        if distance > 0:
            return [(replace(state, actors=with_actor((dest, distance - 1))), 0)]
        moves: list[tuple[_PairState, int]] = []
        if dest not in state.opened:
            opened = _with_opened(state.opened, dest)
            cost = state.remaining * self.valves[dest].flow
            moves.append((replace(state, opened=opened), -cost))
        for target, target_distance in self.valves[dest].exits:
            moves.append(
                (replace(state, actors=with_actor((target, target_distance - 1))), 0)
            )
        return moves

    def _pair_moves(self, state: _PairState) -> list[tuple[_PairState, int]]:
        moved = replace(state, remaining=state.remaining - 1)
        return [
            (both, first_cost + second_cost)
            for you, first_cost in self._actor_moves(moved, 0)
            for both, second_cost in self._actor_moves(you, 1)
        ]

    def _pair_heuristic(self, state: _PairState) -> float:
        return sum(
            self.one_actor_cost(_State(state.remaining, actor, state.opened))
            for actor in state.actors
        )

    def alone(self) -> int:
        state = _State(_MINUTES_ALONE, (self.start, 0), self._initial_opened())
        cost = self.one_actor_cost(state)
        if math.isinf(cost):
            raise ValueError("no way to spend the time")
        return int(-cost)

    def with_elephant(self) -> int:
        start = _PairState(
            _MINUTES_WITH_ELEPHANT,
            ((self.start, 0), (self.start, 0)),
            self._initial_opened(),
        )
        cost = _astar(
            start,
            self._pair_moves,
            self._pair_heuristic,
            lambda s: self._finished(s.remaining, s.opened),
        )
        if cost is None:
            raise ValueError("no way to spend the time")
        return int(-cost)


class Day16:
    def solve_a(self, text: str) -> int:
        """Most pressure released alone in 30 minutes."""
        return _Network(text).alone()

    def solve_b(self, text: str) -> int:
        """Most pressure released together with an elephant in 26 minutes."""
        return _Network(text).with_elephant()