"""Tuning trouble: find the first window of distinct characters."""

from __future__ import annotations

from collections import Counter


def find_first_unique(text: str, length: int) -> int | None:
    """Position just after the first ``length`` distinct consecutive characters."""
    if length < 1:
        raise ValueError("window length must be positive")
    counts: Counter[str] = Counter()
    trailing = iter(text)
    for index, char in enumerate(text):
        if index >= length:
            old = next(trailing)
            counts[old] -= 1
            if not counts[old]:
                del counts[old]
        counts[char] += 1
        if len(counts) == length:
            return index + 1
    return None


class Day06:
    def solve_a(self, text: str) -> int | None:
        """Start-of-packet marker position (4 distinct characters)."""
        return find_first_unique(text.rstrip(), 4)

    def solve_b(self, text: str) -> int | None:
        """Start-of-message marker position (14 distinct characters)."""
        return find_first_unique(text.rstrip(), 14)