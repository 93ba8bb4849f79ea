"""A compact set of small non-negative integers stored in one 64-bit word."""

from __future__ import annotations

from dataclasses import dataclass

_WIDTH = 64


def _check(k: int) -> None:
    if not 0 <= k < _WIDTH:
        raise ValueError(f"bit index {k} outside 0..{_WIDTH - 1}")


@dataclass(unsafe_hash=True)
class BitSet:
    """Set of integers in ``range(64)`` backed by a single integer bitmask."""

    bits: int = 0

    def insert(self, k: int) -> None:
        """Add ``k`` to the set."""
        _check(k)
        self.bits |= 1 << k

    def __contains__(self, k: int) -> bool:
        _check(k)
        return bool(self.bits & (1 << k))

    def __len__(self) -> int:
        return bin(self.bits).count("1")