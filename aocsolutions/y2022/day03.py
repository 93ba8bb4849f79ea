"""Rucksack reorganisation: priorities of items shared between groups."""

from collections.abc import Iterable


def char_to_priority(c: str) -> int:
    """Priority of an item: a-z are 1-26, A-Z are 27-52."""
    if c.isupper():
        return ord(c) - ord("A") + 27
    return ord(c) - ord("a") + 1


def _common_item(groups: Iterable[str]) -> str:
    shared = set.intersection(*(set(g) for g in groups))
    if not shared:
        raise ValueError("no item shared between groups")
    return next(iter(shared))


class Day03:
    def solve_a(self, text: str) -> int:
        """Sum of priorities of the item found in both compartments."""
        total = 0
        for line in text.splitlines():
            half = len(line) // 2
            total += char_to_priority(_common_item((line[:half], line[half:])))
        return total

    def solve_b(self, text: str) -> int:
        """Sum of priorities of the badge shared by each group of three."""
        lines = text.splitlines()
        groups = (lines[start : start + 3] for start in range(0, len(lines), 3))
        return sum(char_to_priority(_common_item(group)) for group in groups)