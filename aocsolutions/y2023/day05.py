"""If you give a seed a fertilizer: follow seeds through chained range maps."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_ENTRY = re.compile(r"(?P<destination>\d+) (?P<source>\d+) (?P<length>\d+)")
_SEEDS_PREFIX = "seeds: "
_MAP_SUFFIX = " map:"

RangeMap = list[tuple[range, int]]


def _entry(line: str) -> tuple[int, int, int]:
    match = _ENTRY.search(line)
    if match is None:
        raise ValueError(f"invalid mapping line: {line!r}")
    return int(match["destination"]), int(match["source"]), int(match["length"])


def _seed_numbers(block: str) -> list[int]:
    if not block.startswith(_SEEDS_PREFIX):
        raise ValueError("input does not start with the seed list")
    numbers = []
    for part in block[len(_SEEDS_PREFIX) :].split():
        try:
            numbers.append(int(part))
        except ValueError:
            continue
    return numbers


def _insert(mapping: RangeMap, span: range, offset: int) -> RangeMap:
    """Insert ``span`` with ``offset``, overwriting whatever it overlaps."""
    if not span:
        raise ValueError("mapping ranges must not be empty")
    result: RangeMap = []
    for existing, existing_offset in mapping:
        if existing.start < span.stop and span.start < existing.stop:
            if existing.start < span.start:
                result.append((range(existing.start, span.start), existing_offset))
            if span.stop < existing.stop:
                result.append((range(span.stop, existing.stop), existing_offset))
        else:
            result.append((existing, existing_offset))
    result.append((span, offset))
    result.sort(key=lambda item: item[0].start)
    return result


def _range_maps(blocks: Iterable[str]) -> list[RangeMap]:
    maps = []
    for block in blocks:
        mapping: RangeMap = []
        for line in block.splitlines()[1:]:
            destination, source, length = _entry(line)
            mapping = _insert(mapping, range(source, source + length), destination - source)
        maps.append(mapping)
    return maps


def map_ranges(inputs: Iterable[range], mapping: Sequence[tuple[range, int]]) -> list[range]:
    """Translate every input range through ``mapping``, splitting where needed.

    Parts of an input not covered by the mapping pass through unchanged.
    """
    pending = list(inputs)
    output: list[range] = []
    while pending:
        current = pending.pop()
        overlapping = [
            (span, offset)
            for span, offset in mapping
            if current and span.start < current.stop and current.start < span.stop
        ]
        if not overlapping:
            output.append(current)
            continue
        for span, offset in overlapping:
            start = max(current.start, span.start)
            end = min(current.stop, span.stop)
            output.append(range(start + offset, end + offset))
            if current.start < start:
                pending.append(range(current.start, start))
            if end < current.stop:
                pending.append(range(end, current.stop))
    return output


@dataclass(frozen=True)
class _Converter:
    target: str
    entries: tuple[tuple[int, int, int], ...]

    def convert(self, value: int) -> int:
        for destination, source, length in self.entries:
            if source <= value < source + length:
                return value + destination - source
        return value


def _converters(blocks: Iterable[str]) -> dict[str, _Converter]:
    converters = {}
    for block in blocks:
        header, *lines = block.splitlines()
        if not header.endswith(_MAP_SUFFIX):
            raise ValueError(f"invalid map header: {header!r}")
        source, sep, target = header[: -len(_MAP_SUFFIX)].partition("-to-")
        if not sep:
            raise ValueError(f"invalid map header: {header!r}")
        converters[source] = _Converter(target, tuple(_entry(line) for line in lines))
    return converters


def _to_location(converters: dict[str, _Converter], seed: int) -> int:
    current = "seed"
    value = seed
    while current != "location":
        try:
            converter = converters[current]
        except KeyError:
            raise ValueError(f"no map from {current!r}") from None
        value = converter.convert(value)
        current = converter.target
    return value


class Day05:
    def solve_a(self, text: str) -> int:
        """Lowest location number for any of the listed seeds."""
        first, *blocks = text.split("\n\n")
        seeds = _seed_numbers(first)
        converters = _converters(blocks)
        if not seeds:
            raise ValueError("no seeds listed")
        return min(_to_location(converters, seed) for seed in seeds)

    def solve_b(self, text: str) -> int:
        """Lowest location number when the seed list holds (start, length) pairs."""
        first, *blocks = text.split("\n\n")
        numbers = _seed_numbers(first)
        if len(numbers) % 2:
            raise ValueError("seed ranges must come in pairs")
        ranges = [
            range(start, start + length)
            for start, length in zip(numbers[::2], numbers[1::2])
        ]
        for mapping in _range_maps(blocks):
            ranges = map_ranges(ranges, mapping)
        if not ranges:
            raise ValueError("no seed ranges")
        return min(span.start for span in ranges)