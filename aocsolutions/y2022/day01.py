"""Calorie counting: sum each elf's items and find the largest totals."""

import heapq


def _elf_totals(text: str) -> list[int]:
    return [
        sum(int(line) for line in elf.splitlines())
        for elf in text.rstrip().split("\n\n")
    ]


class Day01:
    def solve_a(self, text: str) -> int:
        """Largest calorie total carried by one elf."""
        return max(_elf_totals(text))

    def solve_b(self, text: str) -> int:
        """Sum of the three largest calorie totals."""
        return sum(heapq.nlargest(3, _elf_totals(text)))