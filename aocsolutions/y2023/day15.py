"""Lens library: the HASH algorithm and a box of lenses keyed by it."""

from __future__ import annotations

BOX_COUNT = 256


def holiday_hash(s: str) -> int:
    """HASH of ``s``: a byte-sized running hash over its characters."""
    value = 0
    for c in s:
        value = (value + (ord(c) & 0xFF)) * 17 % 256
    return value


class LensBoxes:
    """256 boxes, each holding labelled lenses in insertion order."""

    def __init__(self) -> None:
        self.boxes: list[dict[str, int]] = [{} for _ in range(BOX_COUNT)]

    def insert(self, label: str, focal_length: int) -> None:
        """Put a lens in its box, replacing one with the same label in place."""
        self.boxes[holiday_hash(label)][label] = focal_length

    def remove(self, label: str) -> None:
        """Take the lens with ``label`` out of its box, if present."""
        self.boxes[holiday_hash(label)].pop(label, None)

    def focusing_power(self) -> int:
        """Sum over lenses of box number times slot number times focal length."""
        return sum(
            box_number * slot * focal_length
            for box_number, box in enumerate(self.boxes, start=1)
            for slot, focal_length in enumerate(box.values(), start=1)
        )

    def __str__(self) -> str:
        return "\n".join(
            f"Box {i}: {list(box.items())}" for i, box in enumerate(self.boxes) if box
        )


def _parse_instruction(instruction: str) -> tuple[str, int | None]:
    label, sep, focal = instruction.partition("=")
    if sep:
        return label, int(focal)
    label, sep, _ = instruction.partition("-")
    if sep:
        return label, None
    raise ValueError(f"Not a valid action: {instruction!r}")


class Day15:
    def solve_a(self, text: str) -> int:
        """Sum of the HASH of every step."""
        return sum(holiday_hash(step) for step in text.strip().split(","))

    def solve_b(self, text: str) -> int:
        """Focusing power after performing every step."""
        boxes = LensBoxes()
        for instruction in text.strip().split(","):
            label, focal_length = _parse_instruction(instruction)
            if focal_length is None:
                boxes.remove(label)
            else:
                boxes.insert(label, focal_length)
        return boxes.focusing_power()