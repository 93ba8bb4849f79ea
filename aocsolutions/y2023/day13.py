"""Point of incidence: find lines of reflection in patterns of ash and rocks."""

from __future__ import annotations

from collections.abc import Sequence


def _is_mirror(lines: Sequence[Sequence[str]], mid: int, expected: int) -> bool:
    diff = 0
    left, right = mid, mid + 1
    while left >= 0 and right < len(lines):
        diff += sum(1 for a, b in zip(lines[left], lines[right]) if a != b)
        if diff > expected:
            return False
        left -= 1
        right += 1
    return diff == expected


def _split(lines: Sequence[Sequence[str]], expected: int) -> int | None:
    """Index of the last line before the first mirror with ``expected`` smudges."""
    return next(
        (mid for mid in range(len(lines) - 1) if _is_mirror(lines, mid, expected)),
        None,
    )


def _summarize(image: str, expected: int) -> int:
    rows = image.splitlines()
    if not rows or any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("pattern rows differ in length")
    columns = ["".join(column) for column in zip(*rows)]

    vertical = _split(columns, expected)
    if vertical is not None:
        return vertical + 1
    horizontal = _split(rows, expected)
    if horizontal is not None:
        return (horizontal + 1) * 100
    raise ValueError("pattern has no line of reflection")


def solve(text: str, expected: int) -> int:
    """Sum of pattern summaries, each mirror differing in ``expected`` cells."""
    return sum(_summarize(image, expected) for image in text.strip().split("\n\n"))


class Day13:
    def solve_a(self, text: str) -> int:
        """Summary of perfect reflections."""
        return solve(text, 0)

    def solve_b(self, text: str) -> int:
        """Summary of reflections with exactly one smudge."""
        return solve(text, 1)