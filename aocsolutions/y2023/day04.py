"""Scratchcards: count winning numbers and the cards they win."""

from __future__ import annotations


def _to_set(text: str) -> set[int]:
    return {int(part) for part in text.split()}


def play_round(line: str) -> int:
    """Number of card numbers that are also winning numbers; 0 if malformed."""
    _, sep, numbers = line.partition(":")
    if not sep:
        return 0
    winners, sep, mine = numbers.partition("|")
    if not sep:
        return 0
    return len(_to_set(winners) & _to_set(mine))


class Day04:
    def solve_a(self, text: str) -> int:
        """Total points, doubling for each match after the first."""
        return sum(
            2 ** (count - 1)
            for count in map(play_round, text.splitlines())
            if count > 0
        )

    def solve_b(self, text: str) -> int:
        """Total scratchcards held once won copies are counted."""
        lines = text.splitlines()
        counter = [1] * len(lines)
        for index, wins in enumerate(map(play_round, lines)):
            for other in range(index + 1, min(index + wins, len(lines) - 1) + 1):
                counter[other] += counter[index]
        return sum(counter)